"""Domain service: identifier generation.

Ids are shared across every store handed to the generator, so a dish and
an order never receive the same id.
"""

from __future__ import annotations

from grubdash.domain.model.dish import RecordId
from grubdash.domain.repository.record_store import RecordStore


class IdGenerator:

    def __init__(self, *stores: RecordStore) -> None:
        self._stores = stores

    def next_id(self) -> int:
        """Return the highest numeric id currently stored plus one, or 1.

        Ids that are not numeric (e.g. seeded hex strings) are ignored;
        they can never collide with an integer.
        """
        numeric = [
            value
            for store in self._stores
            for value in (_as_int(record_id) for record_id in store.ids())
            if value is not None
        ]
        if not numeric:
            return 1
        return max(numeric) + 1


def _as_int(record_id: RecordId) -> int | None:
    if isinstance(record_id, bool):
        return None
    if isinstance(record_id, int):
        return record_id
    if isinstance(record_id, str) and record_id.strip().isdigit():
        return int(record_id)
    return None
