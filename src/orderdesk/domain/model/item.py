"""Catalog item.

Items are referenced by line items; their price is read through the
order view at query time, so a price change shows up in every report.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Money


@dataclass
class Item:
    id: int | None
    name: str
    price: Money

    @staticmethod
    def create(name: str, price: Money) -> Item:
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        return Item(id=None, name=name.strip(), price=price)
