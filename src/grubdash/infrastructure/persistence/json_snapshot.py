"""JSON-file seed and snapshot for the in-memory stores.

The file holds a JSON array of records in their wire shape.  It is read
once when the stores are built and rewritten after a mutating command.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Generic, TypeVar

from grubdash.infrastructure.persistence.in_memory_store import InMemoryRecordStore

R = TypeVar("R")


class SnapshotError(Exception):
    """A snapshot file could not be read as a list of records."""


class JsonSnapshot(Generic[R]):

    def __init__(
        self,
        file_path: Path,
        to_domain: Callable[[dict], R],
        to_raw: Callable[[R], dict],
    ) -> None:
        self._file_path = file_path
        self._to_domain = to_domain
        self._to_raw = to_raw
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> InMemoryRecordStore[R]:
        raw_records = self._load_raw()
        try:
            return InMemoryRecordStore([self._to_domain(raw) for raw in raw_records])
        except (KeyError, TypeError, AttributeError) as exc:
            raise SnapshotError(f"Invalid record in {self._file_path}: {exc!r}") from exc

    def persist(self, store: InMemoryRecordStore[R]) -> None:
        records = [self._to_raw(record) for record in store.list_all()]
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"{self._file_path} is not valid JSON: {exc.msg}") from exc
        if not isinstance(records, list):
            raise SnapshotError(f"{self._file_path} must hold a JSON array")
        return records

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
