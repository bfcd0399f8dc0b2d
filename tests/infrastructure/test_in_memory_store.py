"""Tests for the in-memory RecordStore."""

import pytest

from grubdash.domain.exceptions import NotFoundError
from grubdash.domain.model.order import Order
from grubdash.infrastructure.persistence.in_memory_store import InMemoryRecordStore


def _order(order_id, status="pending") -> Order:
    return Order(id=order_id, deliver_to="here", mobile_number="555", status=status)


class TestInMemoryRecordStore:

    def test_list_preserves_insertion_order(self):
        store = InMemoryRecordStore()
        for order_id in (3, 1, 2):
            store.add(_order(order_id))
        assert [o.id for o in store.list_all()] == [3, 1, 2]

    def test_list_returns_a_copy(self):
        store = InMemoryRecordStore([_order(1)])
        store.list_all().clear()
        assert len(store) == 1

    def test_lookup_by_string_or_int(self):
        store = InMemoryRecordStore([_order(4)])
        assert store.get_by_id("4") is store.get_by_id(4)
        assert store.get_by_id("5") is None

    def test_replace_keeps_position(self):
        store = InMemoryRecordStore([_order(1), _order(2), _order(3)])
        store.replace(_order(2, status="delivered"))
        assert [o.id for o in store.list_all()] == [1, 2, 3]
        assert store.get_by_id(2).status == "delivered"

    def test_replace_unknown_raises(self):
        with pytest.raises(NotFoundError):
            InMemoryRecordStore().replace(_order(1))

    def test_remove(self):
        store = InMemoryRecordStore([_order(1), _order(2)])
        store.remove("1")
        assert store.ids() == [2]

    def test_remove_unknown_raises(self):
        with pytest.raises(NotFoundError, match="does not exist"):
            InMemoryRecordStore().remove(9)
