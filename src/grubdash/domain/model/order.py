"""Order aggregate.

An order owns its list of ordered dishes.  Status moves through
pending -> preparing -> out-for-delivery -> delivered, but the value is
whatever the client supplies on update; no transition graph is enforced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from grubdash.domain.model.dish import RecordId


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``status`` stays ``None`` when an order is created without one.
    ``dishes`` holds the ordered dish entries exactly as submitted
    (``dishId``, ``quantity`` and any copied dish fields).
    """

    id: RecordId
    deliver_to: str
    mobile_number: str
    status: str | None = None
    dishes: list[dict] = field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING.value

    # --- Serialization --------------------------------------------------------

    def to_data(self) -> dict:
        return {
            "id": self.id,
            "deliverTo": self.deliver_to,
            "mobileNumber": self.mobile_number,
            "status": self.status,
            "dishes": [dict(entry) for entry in self.dishes],
        }

    @staticmethod
    def from_data(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            deliver_to=raw["deliverTo"],
            mobile_number=raw["mobileNumber"],
            status=raw.get("status"),
            dishes=list(raw.get("dishes", [])),
        )
