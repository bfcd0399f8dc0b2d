"""Unit tests for the individual validation and lookup steps."""

import pytest

from grubdash.application.pipeline import PROCEED, Halt, Request, RequestContext
from grubdash.application.validators import (
    dish_quantity_is_integer,
    dish_quantity_positive,
    dish_quantity_present,
    has_dishes,
    id_matches_route,
    order_is_pending,
    price_is_valid,
    require_field,
    resource_exists,
    status_is_valid,
)
from grubdash.domain.exceptions import IdMismatchError, NotFoundError, ValidationError
from grubdash.domain.model.dish import Dish
from grubdash.domain.model.order import Order
from grubdash.infrastructure.persistence.in_memory_store import InMemoryRecordStore


def _ctx(data: dict | None = None, route_id=None) -> RequestContext:
    body = {} if data is None else {"data": data}
    return RequestContext(Request(body=body, route_id=route_id))


def _halted_with(outcome, error_type, fragment: str) -> None:
    assert isinstance(outcome, Halt)
    assert isinstance(outcome.error, error_type)
    assert fragment in outcome.error.message


class TestRequireField:

    def test_present(self):
        assert require_field("name", "Dish")(_ctx({"name": "Taco"})) == PROCEED

    def test_missing_names_the_field(self):
        outcome = require_field("name", "Dish")(_ctx({}))
        _halted_with(outcome, ValidationError, "Dish must include a name")
        assert outcome.error.status_code == 400

    def test_missing_data_object(self):
        outcome = require_field("deliverTo", "Order")(_ctx())
        _halted_with(outcome, ValidationError, "deliverTo")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_are_missing(self, value):
        assert isinstance(require_field("name", "Dish")(_ctx({"name": value})), Halt)

    @pytest.mark.parametrize("value", [0, False, []])
    def test_falsy_non_strings_are_present(self, value):
        assert require_field("price", "Dish")(_ctx({"price": value})) == PROCEED


class TestPriceIsValid:

    @pytest.mark.parametrize("price", [1, 5, 5.0, 1200])
    def test_positive_integers_accepted(self, price):
        assert price_is_valid(_ctx({"price": price})) == PROCEED

    @pytest.mark.parametrize("price", [0, -1, 2.5, "5", True, None])
    def test_invalid_rejected(self, price):
        _halted_with(price_is_valid(_ctx({"price": price})), ValidationError, "integer greater than 0")


class TestHasDishes:

    def test_missing(self):
        _halted_with(has_dishes(_ctx({})), ValidationError, "Order must include a dish")

    @pytest.mark.parametrize("dishes", [[], "taco", {"quantity": 1}, 3])
    def test_empty_or_not_a_list(self, dishes):
        _halted_with(
            has_dishes(_ctx({"dishes": dishes})), ValidationError, "at least one dish"
        )

    def test_non_empty_list(self):
        assert has_dishes(_ctx({"dishes": [{"quantity": 1}]})) == PROCEED


class TestDishQuantities:

    def test_present_reports_first_missing_index(self):
        outcome = dish_quantity_present(_ctx({"dishes": [{"quantity": 1}, {}, {}]}))
        _halted_with(outcome, ValidationError, "Dish 1 must have a quantity")

    def test_non_object_entry_has_no_quantity(self):
        outcome = dish_quantity_present(_ctx({"dishes": ["taco"]}))
        _halted_with(outcome, ValidationError, "Dish 0")

    def test_zero_counts_as_present(self):
        assert dish_quantity_present(_ctx({"dishes": [{"quantity": 0}]})) == PROCEED

    def test_positive_reports_first_offender(self):
        outcome = dish_quantity_positive(
            _ctx({"dishes": [{"quantity": 2}, {"quantity": 1}, {"quantity": -3}]})
        )
        _halted_with(outcome, ValidationError, "Dish 2")

    def test_positive_ignores_non_numbers(self):
        assert dish_quantity_positive(_ctx({"dishes": [{"quantity": "2"}]})) == PROCEED

    @pytest.mark.parametrize("quantity", ["2", 1.5, True])
    def test_integer_rejects(self, quantity):
        outcome = dish_quantity_is_integer(_ctx({"dishes": [{"quantity": 1}, {"quantity": quantity}]}))
        _halted_with(outcome, ValidationError, "Dish 1")

    def test_all_valid(self):
        ctx = _ctx({"dishes": [{"quantity": 1}, {"quantity": 3}]})
        for step in (dish_quantity_present, dish_quantity_positive, dish_quantity_is_integer):
            assert step(ctx) == PROCEED


class TestStatusIsValid:

    @pytest.mark.parametrize("status", ["pending", "preparing", "out-for-delivery", "delivered"])
    def test_known_statuses(self, status):
        assert status_is_valid(_ctx({"status": status})) == PROCEED

    @pytest.mark.parametrize("status", ["invalid", "", None, "PENDING"])
    def test_unknown_statuses(self, status):
        _halted_with(status_is_valid(_ctx({"status": status})), ValidationError, "status of pending")


class TestOrderIsPending:

    def _with_order(self, status):
        ctx = _ctx()
        ctx.locals["order"] = Order(id=1, deliver_to="a", mobile_number="b", status=status)
        return ctx

    def test_pending_can_be_deleted(self):
        assert order_is_pending(self._with_order("pending")) == PROCEED

    @pytest.mark.parametrize("status", ["preparing", "out-for-delivery", "delivered", None])
    def test_other_statuses_blocked(self, status):
        _halted_with(
            order_is_pending(self._with_order(status)), ValidationError, "unless it is pending"
        )


class TestResourceExists:

    def _store(self):
        return InMemoryRecordStore(
            [Dish(id=1, name="Taco", description="x", price=5, image_url="y")]
        )

    def test_attaches_found_record(self):
        step = resource_exists(self._store(), "dish", "Dish does not exist: {id}")
        ctx = _ctx(route_id="1")
        assert step(ctx) == PROCEED
        assert ctx.locals["dish"].name == "Taco"

    def test_not_found_names_the_id(self):
        step = resource_exists(self._store(), "dish", "Dish does not exist: {id}")
        ctx = _ctx(route_id="42")
        outcome = step(ctx)
        _halted_with(outcome, NotFoundError, "Dish does not exist: 42")
        assert outcome.error.status_code == 404
        assert "dish" not in ctx.locals


class TestIdMatchesRoute:

    def test_absent_body_id(self):
        assert id_matches_route("Dish")(_ctx({}, route_id="1")) == PROCEED

    def test_empty_body_id_ignored(self):
        assert id_matches_route("Dish")(_ctx({"id": ""}, route_id="1")) == PROCEED

    def test_equal_ids(self):
        assert id_matches_route("Dish")(_ctx({"id": 1}, route_id="1")) == PROCEED

    def test_mismatch_names_both_ids(self):
        outcome = id_matches_route("Order")(_ctx({"id": "7"}, route_id="3"))
        _halted_with(outcome, IdMismatchError, "Order: 7, Route: 3")
        assert outcome.error.status_code == 400
