"""A JSON array on disk, shared by the JSON repositories.

Every read-modify-write runs under the file's lock, and writes go through
a temporary file that replaces the original, so readers never see a
half-written file.  The lock only serializes threads of one process.
"""

from __future__ import annotations

import copy
import json
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from bookstore.domain.exceptions import PersistenceError

T = TypeVar("T")


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    def read(self) -> list[dict[str, Any]]:
        with self._lock:
            return self._load()

    def update(self, mutate: Callable[[list[dict[str, Any]]], T]) -> T:
        """Load, apply *mutate* in place, persist; return what *mutate* returned.

        The file is only rewritten when *mutate* changed the records.
        """
        with self._lock:
            records = self._load()
            before = copy.deepcopy(records)
            result = mutate(records)
            if records != before:
                self._persist(records)
            return result

    def _load(self) -> list[dict[str, Any]]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path.name}: {exc}") from exc

    def _persist(self, records: list[dict[str, Any]]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
