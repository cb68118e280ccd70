"""Password hashing (PBKDF2-HMAC-SHA256) and session token generation."""

import hashlib
import hmac
import secrets
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from bread_order.schemas.users import PasswordHash

PASSWORD_ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 200_000
SALT_BYTES = 16
# 256-bit derived key.
KEY_BYTES = 32
# 192 bits of entropy, rendered as 48 hex characters.
SESSION_TOKEN_BYTES = 24


def hash_password(
    password: str,
    salt: str | None = None,
    iterations: int = DEFAULT_ITERATIONS,
) -> PasswordHash:
    """
    Derive a password hash for storage.

    Without `salt` a fresh random salt is generated. Pass the stored hex salt
    (and iteration count) to reproduce an existing hash for comparison.
    """
    salt_bytes = bytes.fromhex(salt) if salt else secrets.token_bytes(SALT_BYTES)
    derived = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt_bytes,
        iterations,
        dklen=KEY_BYTES,
    )
    return PasswordHash(
        algo=PASSWORD_ALGORITHM,
        iter=iterations,
        salt=salt_bytes.hex(),
        hash=derived.hex(),
    )


def verify_password(password: str, stored: PasswordHash | dict[str, Any] | None) -> bool:
    """Check a plain password against a stored hash in constant time."""
    if stored is None or not isinstance(password, str):
        return False
    try:
        ph = stored if isinstance(stored, PasswordHash) else PasswordHash.model_validate(stored)
    except PydanticValidationError:
        return False
    if ph.algo != PASSWORD_ALGORITHM:
        return False
    try:
        check = hash_password(password, salt=ph.salt, iterations=ph.iter)
    except ValueError:
        # salt is not valid hex
        return False
    return hmac.compare_digest(check.hash, ph.hash)


def new_session_token() -> str:
    """Return an opaque random session token for the session cookie."""
    return secrets.token_hex(SESSION_TOKEN_BYTES)
