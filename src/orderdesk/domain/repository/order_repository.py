"""Abstract repository for orders and the order reporting view."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import Order
from orderdesk.domain.model.view import CustomerOrderView


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order with customer and line item loaded."""

    @abstractmethod
    def list_view(self) -> list[CustomerOrderView]:
        """Return one row per (order, line item) joined to customer and item."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its associations, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> int:
        """Insert a new order, assign ``order.id`` and return affected rows."""

    @abstractmethod
    def update(self, order: Order) -> int:
        """Write date, customer and line item of an existing order.

        Returns the number of affected rows.
        """

    @abstractmethod
    def delete(self, order_id: int) -> int:
        """Remove an order and return the number of affected rows."""
