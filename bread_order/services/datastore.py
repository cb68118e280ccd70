"""The three JSON documents the service persists, wired to their stores."""

import logging
from pathlib import Path

from bread_order.core.config import Settings
from bread_order.core.storage import JsonFile
from bread_order.services.records import RecordStore
from bread_order.services.users import UserDirectory

logger = logging.getLogger(__name__)

ORDERS_FILENAME = "orders.json"
ITEMS_FILENAME = "items.json"
USERS_FILENAME = "users.json"


class DataStore:
    """orders.json, items.json and users.json under one data directory."""

    def __init__(self, data_dir: Path, default_items: list[str], iterations: int) -> None:
        self.data_dir = Path(data_dir)
        self.orders = RecordStore(
            JsonFile(self.data_dir / ORDERS_FILENAME, default=[]),
            not_found_message="Order not found",
        )
        self.items = RecordStore(
            JsonFile(self.data_dir / ITEMS_FILENAME, default=list(default_items)),
            not_found_message="Item not found",
        )
        self.users = UserDirectory(
            JsonFile(self.data_dir / USERS_FILENAME, default={"users": []}),
            iterations=iterations,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataStore":
        return cls(
            settings.DATA_DIR,
            default_items=settings.DEFAULT_ITEMS,
            iterations=settings.PASSWORD_ITERATIONS,
        )

    @property
    def files(self) -> tuple[JsonFile, ...]:
        return (self.orders.file, self.items.file, self.users.file)

    @property
    def in_memory(self) -> bool:
        return any(f.in_memory for f in self.files)

    def seed(self, admin_username: str, admin_password: str) -> None:
        """Create any missing data file with its default contents."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(
                "Could not create data directory",
                extra={"path": str(self.data_dir), "reason": str(e)[:200]},
            )
        for store in (self.orders, self.items):
            if store.file.ensure():
                logger.info("Seeded data file", extra={"path": str(store.file.path)})
        self.users.ensure_default_admin(admin_username, admin_password)
