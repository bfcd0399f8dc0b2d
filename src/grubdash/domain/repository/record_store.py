"""Abstract store for records of one resource type.

Defined in the domain layer so the application never depends on
infrastructure.  A store is an ordered collection: ``list_all`` returns
records in insertion order and ``replace`` keeps a record's position.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from grubdash.domain.model.dish import RecordId

R = TypeVar("R")


class RecordStore(ABC, Generic[R]):

    @abstractmethod
    def list_all(self) -> list[R]:
        """Return every record in store order."""

    @abstractmethod
    def get_by_id(self, record_id: RecordId) -> R | None:
        """Return the record whose id matches, or None if not found."""

    @abstractmethod
    def add(self, record: R) -> None:
        """Append a new record."""

    @abstractmethod
    def replace(self, record: R) -> None:
        """Swap the stored record carrying the same id for ``record``."""

    @abstractmethod
    def remove(self, record_id: RecordId) -> None:
        """Delete the record with the given id."""

    @abstractmethod
    def ids(self) -> list[RecordId]:
        """Return the ids of all stored records."""
