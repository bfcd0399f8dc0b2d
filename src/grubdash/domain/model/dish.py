"""Dish aggregate.

Dishes are created and edited but never removed from the menu.
"""

from __future__ import annotations

from dataclasses import dataclass

RecordId = int | str


@dataclass
class Dish:
    """A dish on the menu.

    Kept as a mutable dataclass because an update rewrites the fields of
    the stored record in place.  ``id`` is assigned once on creation and
    never changes.
    """

    id: RecordId
    name: str
    description: str
    price: int
    image_url: str

    def update(self, name: str, description: str, price: int, image_url: str) -> None:
        """Overwrite every editable field; ``id`` is left untouched."""
        self.name = name
        self.description = description
        self.price = price
        self.image_url = image_url

    # --- Serialization --------------------------------------------------------

    def to_data(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "image_url": self.image_url,
        }

    @staticmethod
    def from_data(raw: dict) -> Dish:
        return Dish(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=raw["price"],
            image_url=raw["image_url"],
        )
