"""In-memory implementation of RecordStore.

Records are kept in a plain list in insertion order.  Ids are compared
by their string form so a route id of ``"3"`` finds a record with id
``3``.
"""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from grubdash.domain.exceptions import NotFoundError
from grubdash.domain.model.dish import RecordId
from grubdash.domain.repository.record_store import RecordStore

R = TypeVar("R")


class InMemoryRecordStore(RecordStore[R], Generic[R]):

    def __init__(self, records: Iterable[R] | None = None) -> None:
        self._records: list[R] = list(records or [])

    # --- RecordStore interface ------------------------------------------------

    def list_all(self) -> list[R]:
        return list(self._records)

    def get_by_id(self, record_id: RecordId) -> R | None:
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._records[index]

    def add(self, record: R) -> None:
        self._records.append(record)

    def replace(self, record: R) -> None:
        index = self._index_of(record.id)  # type: ignore[attr-defined]
        if index is None:
            raise NotFoundError(f"Record does not exist: {record.id}")  # type: ignore[attr-defined]
        self._records[index] = record

    def remove(self, record_id: RecordId) -> None:
        index = self._index_of(record_id)
        if index is None:
            raise NotFoundError(f"Record does not exist: {record_id}")
        del self._records[index]

    def ids(self) -> list[RecordId]:
        return [record.id for record in self._records]  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return len(self._records)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, record_id: RecordId) -> int | None:
        wanted = str(record_id)
        for i, record in enumerate(self._records):
            if str(record.id) == wanted:  # type: ignore[attr-defined]
                return i
        return None
