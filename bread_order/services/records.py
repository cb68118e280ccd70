"""Index-addressed record collection backed by one JSON array file."""

from __future__ import annotations

from typing import Any

from bread_order.core.errors import NotFoundError
from bread_order.core.storage import JsonFile


class RecordStore:
    """
    A JSON array whose records are identified only by position.

    Deleting shifts every later record down by one, so an index is not a
    stable id. Every mutation re-reads the whole file, changes it and writes
    it back under the file's lock, and returns the full updated collection.
    """

    def __init__(self, file: JsonFile, not_found_message: str = "Not found") -> None:
        self.file = file
        self.not_found_message = not_found_message

    def list(self) -> list[Any]:
        return self.file.read()

    def _check_index(self, records: list[Any], index: int) -> None:
        if index < 0 or index >= len(records):
            raise NotFoundError(self.not_found_message)

    def get(self, index: int) -> Any:
        records = self.list()
        self._check_index(records, index)
        return records[index]

    def append(self, record: Any) -> list[Any]:
        with self.file.lock:
            records = self.file.read()
            records.append(record)
            self.file.write(records)
            return records

    def replace_at(self, index: int, record: Any) -> list[Any]:
        with self.file.lock:
            records = self.file.read()
            self._check_index(records, index)
            records[index] = record
            self.file.write(records)
            return records

    def delete_at(self, index: int) -> list[Any]:
        with self.file.lock:
            records = self.file.read()
            self._check_index(records, index)
            del records[index]
            self.file.write(records)
            return records

    def replace_all(self, records: list[Any]) -> list[Any]:
        with self.file.lock:
            self.file.write(records)
            return records
