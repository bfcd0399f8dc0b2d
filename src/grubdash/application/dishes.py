"""Application service: the /dishes resource.

Each public attribute is a Pipeline wired with the validation steps its
operation needs; the handler methods at the end of each chain assume the
payload already passed validation.
"""

from __future__ import annotations

import logging

from grubdash.application.pipeline import Pipeline, RequestContext, Response
from grubdash.application.validators import (
    id_matches_route,
    price_is_valid,
    require_field,
    resource_exists,
)
from grubdash.domain.model.dish import Dish
from grubdash.domain.repository.record_store import RecordStore
from grubdash.domain.service.id_generator import IdGenerator

logger = logging.getLogger(__name__)

DISH_FIELDS = ("name", "description", "image_url", "price")


class DishesController:

    def __init__(self, dish_store: RecordStore[Dish], id_generator: IdGenerator) -> None:
        self._dish_store = dish_store
        self._id_generator = id_generator

        dish_exists = resource_exists(dish_store, "dish", "Dish does not exist: {id}")
        body_checks = [require_field(name, "Dish") for name in DISH_FIELDS]

        self.list = Pipeline("dishes.list", [], self._list)
        self.create = Pipeline("dishes.create", [*body_checks, price_is_valid], self._create)
        self.read = Pipeline("dishes.read", [dish_exists], self._read)
        self.update = Pipeline(
            "dishes.update",
            [dish_exists, *body_checks, price_is_valid, id_matches_route("Dish")],
            self._update,
        )

    # --- Handlers -------------------------------------------------------------

    def _list(self, ctx: RequestContext) -> Response:
        return Response.ok([dish.to_data() for dish in self._dish_store.list_all()])

    def _create(self, ctx: RequestContext) -> Response:
        data = ctx.data
        dish = Dish(
            id=self._id_generator.next_id(),
            name=data["name"],
            description=data["description"],
            price=int(data["price"]),
            image_url=data["image_url"],
        )
        self._dish_store.add(dish)
        logger.info("Created dish %s", dish.id, extra={"resource": "dishes"})
        return Response.created(dish.to_data())

    def _read(self, ctx: RequestContext) -> Response:
        return Response.ok(ctx.locals["dish"].to_data())

    def _update(self, ctx: RequestContext) -> Response:
        data = ctx.data
        dish: Dish = ctx.locals["dish"]
        dish.update(
            name=data["name"],
            description=data["description"],
            price=int(data["price"]),
            image_url=data["image_url"],
        )
        logger.info("Updated dish %s", dish.id, extra={"resource": "dishes"})
        return Response.ok(dish.to_data())
