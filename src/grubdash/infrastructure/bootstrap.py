"""Composition root: wires stores, the id generator and the controllers.

This is the only place that knows about every layer.  Stores are created
here and injected into the controllers; nothing else holds them.
"""

from __future__ import annotations

import logging
from typing import Any

from grubdash.application.dishes import DishesController
from grubdash.application.orders import OrdersController
from grubdash.application.pipeline import Pipeline, Request, Response
from grubdash.domain.exceptions import MethodNotAllowedError, NotFoundError
from grubdash.domain.model.dish import Dish, RecordId
from grubdash.domain.model.order import Order
from grubdash.domain.service.id_generator import IdGenerator
from grubdash.infrastructure.config import Settings, get_settings
from grubdash.infrastructure.persistence.in_memory_store import InMemoryRecordStore
from grubdash.infrastructure.persistence.json_snapshot import JsonSnapshot

logger = logging.getLogger(__name__)


class GrubDashApp:
    """Dispatches ``(resource, action)`` pairs to controller pipelines.

    Requests are processed one at a time; the stores carry no locking.
    """

    def __init__(
        self,
        dish_store: InMemoryRecordStore[Dish],
        order_store: InMemoryRecordStore[Order],
        snapshots: list[tuple[JsonSnapshot, InMemoryRecordStore]] | None = None,
    ) -> None:
        self.dish_store = dish_store
        self.order_store = order_store
        self._snapshots = snapshots or []

        id_generator = IdGenerator(dish_store, order_store)
        self.dishes = DishesController(dish_store, id_generator)
        self.orders = OrdersController(order_store, id_generator)

        self._routes: dict[str, dict[str, Pipeline]] = {
            "dishes": {
                "list": self.dishes.list,
                "create": self.dishes.create,
                "read": self.dishes.read,
                "update": self.dishes.update,
            },
            "orders": {
                "list": self.orders.list,
                "create": self.orders.create,
                "read": self.orders.read,
                "update": self.orders.update,
                "delete": self.orders.delete,
            },
        }

    def handle(
        self,
        resource: str,
        action: str,
        route_id: RecordId | None = None,
        body: Any = None,
    ) -> Response:
        actions = self._routes.get(resource)
        if actions is None:
            return Response.from_error(NotFoundError(f"Path not found: /{resource}"))
        pipeline = actions.get(action)
        if pipeline is None:
            return Response.from_error(
                MethodNotAllowedError(f"{action} is not allowed for /{resource}")
            )
        return pipeline.run(Request(body=body, route_id=route_id))

    def save(self) -> None:
        """Write every store back to its snapshot file, if any."""
        for snapshot, store in self._snapshots:
            snapshot.persist(store)
            logger.debug("Saved snapshot %s", snapshot.file_path)


def create_app(settings: Settings | None = None) -> GrubDashApp:
    settings = settings or get_settings()

    if settings.data_dir is None:
        return GrubDashApp(InMemoryRecordStore(), InMemoryRecordStore())

    dish_snapshot = JsonSnapshot(settings.data_dir / "dishes.json", Dish.from_data, Dish.to_data)
    order_snapshot = JsonSnapshot(settings.data_dir / "orders.json", Order.from_data, Order.to_data)
    dish_store = dish_snapshot.load()
    order_store = order_snapshot.load()
    logger.info(
        "Loaded %d dishes and %d orders from %s",
        len(dish_store),
        len(order_store),
        settings.data_dir,
    )
    return GrubDashApp(
        dish_store,
        order_store,
        snapshots=[(dish_snapshot, dish_store), (order_snapshot, order_store)],
    )
