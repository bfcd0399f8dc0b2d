"""Application service: the /orders resource.

Orders are the only records that can be deleted, and only while pending.
An update builds a fresh Order carrying the original id and writes it
back over the stored one.
"""

from __future__ import annotations

import logging

from grubdash.application.pipeline import Pipeline, RequestContext, Response
from grubdash.application.validators import (
    QUANTITY_STEPS,
    has_dishes,
    id_matches_route,
    order_is_pending,
    require_field,
    resource_exists,
    status_is_valid,
)
from grubdash.domain.model.order import Order
from grubdash.domain.repository.record_store import RecordStore
from grubdash.domain.service.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class OrdersController:

    def __init__(self, order_store: RecordStore[Order], id_generator: IdGenerator) -> None:
        self._order_store = order_store
        self._id_generator = id_generator

        order_exists = resource_exists(order_store, "order", "Order not found with id: {id}")
        dish_checks = [has_dishes, *QUANTITY_STEPS]

        self.list = Pipeline("orders.list", [], self._list)
        self.create = Pipeline(
            "orders.create",
            [
                require_field("deliverTo", "Order"),
                require_field("mobileNumber", "Order"),
                require_field("dishes", "Order"),
                *dish_checks,
            ],
            self._create,
        )
        self.read = Pipeline("orders.read", [order_exists], self._read)
        self.update = Pipeline(
            "orders.update",
            [
                order_exists,
                id_matches_route("Order"),
                require_field("deliverTo", "Order"),
                require_field("mobileNumber", "Order"),
                require_field("status", "Order"),
                require_field("dishes", "Order"),
                *dish_checks,
                status_is_valid,
            ],
            self._update,
        )
        self.delete = Pipeline("orders.delete", [order_exists, order_is_pending], self._destroy)

    # --- Handlers -------------------------------------------------------------

    def _list(self, ctx: RequestContext) -> Response:
        return Response.ok([order.to_data() for order in self._order_store.list_all()])

    def _create(self, ctx: RequestContext) -> Response:
        data = ctx.data
        order = Order(
            id=self._id_generator.next_id(),
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=data.get("status"),
            dishes=[_ordered_dish(entry) for entry in data["dishes"]],
        )
        self._order_store.add(order)
        logger.info("Created order %s", order.id, extra={"resource": "orders"})
        return Response.created(order.to_data())

    def _read(self, ctx: RequestContext) -> Response:
        return Response.ok(ctx.locals["order"].to_data())

    def _update(self, ctx: RequestContext) -> Response:
        data = ctx.data
        updated = Order(
            id=ctx.locals["order"].id,
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=data["status"],
            dishes=[_ordered_dish(entry) for entry in data["dishes"]],
        )
        self._order_store.replace(updated)
        logger.info("Updated order %s", updated.id, extra={"resource": "orders"})
        return Response.ok(updated.to_data())

    def _destroy(self, ctx: RequestContext) -> Response:
        order: Order = ctx.locals["order"]
        self._order_store.remove(order.id)
        logger.info("Deleted order %s", order.id, extra={"resource": "orders"})
        return Response.no_content()


def _ordered_dish(entry: dict) -> dict:
    """Copy a validated dish entry; an integral float quantity becomes an int."""
    return {**entry, "quantity": int(entry["quantity"])}
