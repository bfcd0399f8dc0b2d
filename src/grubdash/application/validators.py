"""Validation and lookup steps.

Every factory here returns a ``Step``: a callable taking the request
context and returning ``PROCEED`` or ``Halt``.  Steps never mutate a
store; lookups only attach the located record to ``ctx.locals``.
"""

from __future__ import annotations

from typing import Any, Callable

from grubdash.application.pipeline import PROCEED, Halt, Outcome, RequestContext, Step
from grubdash.domain.exceptions import IdMismatchError, NotFoundError, ValidationError
from grubdash.domain.model.order import OrderStatus
from grubdash.domain.repository.record_store import RecordStore

QUANTITY_MESSAGE = "Dish {index} must have a quantity that is an integer greater than 0"


def is_present(value: Any) -> bool:
    """A field counts as missing when absent, ``None`` or a blank string."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_integer(value: Any) -> bool:
    """True for ints and integral floats (JSON ``5.0``); bools are rejected."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# --- Field presence -----------------------------------------------------------


def require_field(name: str, entity: str) -> Step:
    """Halt with 400 unless ``data[name]`` is present."""

    def step(ctx: RequestContext) -> Outcome:
        if is_present(ctx.data.get(name)):
            return PROCEED
        return Halt(ValidationError(f"{entity} must include a {name}"))

    step.__name__ = f"require_{name}"
    return step


# --- Dishes -------------------------------------------------------------------


def price_is_valid(ctx: RequestContext) -> Outcome:
    price = ctx.data.get("price")
    if is_integer(price) and price > 0:
        return PROCEED
    return Halt(ValidationError("Dish must have a price that is an integer greater than 0"))


# --- Orders -------------------------------------------------------------------


def has_dishes(ctx: RequestContext) -> Outcome:
    dishes = ctx.data.get("dishes")
    if dishes is None:
        return Halt(ValidationError("Order must include a dish"))
    if not isinstance(dishes, list) or not dishes:
        return Halt(ValidationError("Order must include at least one dish"))
    return PROCEED


def _first_dish_violating(predicate: Callable[[Any], bool], description: str) -> Step:
    """Build a step that halts on the first dish entry whose quantity fails.

    ``predicate`` receives the entry's quantity and returns True when the
    entry is in violation.  Entries that are not objects count as having
    no quantity.
    """

    def step(ctx: RequestContext) -> Outcome:
        for index, entry in enumerate(ctx.data.get("dishes") or []):
            quantity = entry.get("quantity") if isinstance(entry, dict) else None
            if predicate(quantity):
                return Halt(ValidationError(QUANTITY_MESSAGE.format(index=index)))
        return PROCEED

    step.__name__ = description
    return step


dish_quantity_present = _first_dish_violating(
    lambda quantity: quantity is None, "dish_quantity_present"
)
dish_quantity_positive = _first_dish_violating(
    lambda quantity: _is_number(quantity) and quantity <= 0, "dish_quantity_positive"
)
dish_quantity_is_integer = _first_dish_violating(
    lambda quantity: not is_integer(quantity), "dish_quantity_is_integer"
)

QUANTITY_STEPS: tuple[Step, ...] = (
    dish_quantity_present,
    dish_quantity_positive,
    dish_quantity_is_integer,
)


def status_is_valid(ctx: RequestContext) -> Outcome:
    if ctx.data.get("status") in OrderStatus.values():
        return PROCEED
    return Halt(
        ValidationError(
            "Order must have a status of " + ", ".join(OrderStatus.values())
        )
    )


def order_is_pending(ctx: RequestContext) -> Outcome:
    if ctx.locals["order"].is_pending:
        return PROCEED
    return Halt(ValidationError("An order cannot be deleted unless it is pending"))


# --- Lookup and route consistency ---------------------------------------------


def resource_exists(store: RecordStore, key: str, not_found: str) -> Step:
    """Locate the route's record in ``store`` and attach it as ``ctx.locals[key]``.

    ``not_found`` is a message template receiving ``{id}``.
    """

    def step(ctx: RequestContext) -> Outcome:
        route_id = ctx.request.route_id
        record = store.get_by_id(route_id) if route_id is not None else None
        if record is None:
            return Halt(NotFoundError(not_found.format(id=route_id)))
        ctx.locals[key] = record
        return PROCEED

    step.__name__ = f"{key}_exists"
    return step


def id_matches_route(entity: str) -> Step:
    """Halt with 400 when the body carries an id different from the route id."""

    def step(ctx: RequestContext) -> Outcome:
        body_id = ctx.data.get("id")
        route_id = ctx.request.route_id
        if is_present(body_id) and str(body_id) != str(route_id):
            return Halt(
                IdMismatchError(
                    f"{entity} id does not match route id. "
                    f"{entity}: {body_id}, Route: {route_id}."
                )
            )
        return PROCEED

    step.__name__ = "id_matches_route"
    return step
