"""Customer record."""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError


@dataclass
class Customer:
    id: int | None
    name: str

    @staticmethod
    def create(name: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(id=None, name=name.strip())
