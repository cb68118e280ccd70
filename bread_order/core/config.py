"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Catalog written to items.json on first boot.
SEED_ITEMS = ("Baguette", "Whole Wheat", "Rye", "Sourdough")

# Floor for PASSWORD_ITERATIONS.
MIN_PASSWORD_ITERATIONS = 1000


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # orders.json, items.json and users.json live here
    DATA_DIR: Path = Path("data")
    # index.html, login.html, users.html and their assets
    STATIC_DIR: Path = Path("public")

    SESSION_COOKIE_NAME: str = "session"
    SESSION_COOKIE_SECURE: bool = False

    PASSWORD_ITERATIONS: int = 200_000

    # Seeded into users.json when the file does not exist yet
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: SecretStr = SecretStr("admin123")

    DEFAULT_ITEMS: list[str] = list(SEED_ITEMS)
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return level

    @field_validator("SESSION_COOKIE_NAME")
    @classmethod
    def validate_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_COOKIE_NAME must be set and non-empty")
        return v.strip()

    @field_validator("PASSWORD_ITERATIONS")
    @classmethod
    def validate_password_iterations(cls, v: int) -> int:
        if v < MIN_PASSWORD_ITERATIONS:
            raise ValueError(
                f"PASSWORD_ITERATIONS must be at least {MIN_PASSWORD_ITERATIONS}"
            )
        return v

    @field_validator("DEFAULT_ADMIN_USERNAME")
    @classmethod
    def validate_default_admin_username(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DEFAULT_ADMIN_USERNAME must be set and non-empty")
        return v.strip()

    @field_validator("DEFAULT_ADMIN_PASSWORD")
    @classmethod
    def validate_default_admin_password(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("DEFAULT_ADMIN_PASSWORD must be set and non-empty")
        return v

    @field_validator("DEFAULT_ITEMS")
    @classmethod
    def validate_default_items(cls, v: list[str]) -> list[str]:
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("DEFAULT_ITEMS must not contain empty names")
        if len(set(names)) != len(names):
            raise ValueError("DEFAULT_ITEMS must not contain duplicates")
        return names


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
