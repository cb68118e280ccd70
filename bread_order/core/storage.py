"""JSON file persistence with an in-memory shadow for read-only filesystems."""

import copy
import errno
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Write failures that mean "this filesystem will not take writes": keep data in memory.
NOT_WRITABLE_ERRNOS = frozenset({errno.EROFS, errno.EACCES, errno.EPERM})


class JsonFile:
    """
    One JSON document on disk, read and written whole.

    Reads never raise: a missing, unreadable or corrupt file (or one holding
    the wrong top-level type) degrades to a copy of `default`. Writes that the
    filesystem refuses are kept in memory for the rest of the process and
    preferred by later reads. `lock` is held by callers across a
    read-modify-write cycle.
    """

    def __init__(self, path: Path, default: Any) -> None:
        self.path = Path(path)
        self.default = default
        self.lock = threading.RLock()
        self._shadow: str | None = None

    @property
    def in_memory(self) -> bool:
        """True while the latest contents exist only in the memory shadow."""
        return self._shadow is not None

    def exists(self) -> bool:
        return self._shadow is not None or self.path.exists()

    def read(self) -> Any:
        try:
            if self._shadow is not None:
                data = json.loads(self._shadow)
            elif self.path.exists():
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            else:
                return copy.deepcopy(self.default)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(
                "Read JSON failed",
                extra={"path": str(self.path), "reason": str(e)[:200]},
            )
            return copy.deepcopy(self.default)
        if not isinstance(data, type(self.default)):
            logger.warning(
                "Unexpected JSON document type; using default",
                extra={"path": str(self.path), "found": type(data).__name__},
            )
            return copy.deepcopy(self.default)
        return data

    def write(self, data: Any) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            if e.errno in NOT_WRITABLE_ERRNOS:
                logger.warning(
                    "Filesystem not writable; keeping data in memory for this process",
                    extra={"path": str(self.path), "errno": e.errno},
                )
                self._shadow = json.dumps(data, ensure_ascii=False)
                return
            logger.error(
                "Write JSON failed",
                extra={"path": str(self.path), "reason": str(e)[:200]},
            )
            raise
        self._shadow = None

    def ensure(self) -> bool:
        """Write the default document if nothing exists yet. Returns True when seeded."""
        with self.lock:
            if self.exists():
                return False
            self.write(copy.deepcopy(self.default))
            return True
