"""Application service: the order data-access facade.

A single entry point for the calling layer.  Each operation is a thin
pass-through to a repository; the facade's job is to turn whatever the
repositories raise into an explicit ``Result`` (or, for delete, a
status-coded ``DeleteOrderResponse``) so the caller never has to guess
whether an empty answer meant "nothing there" or "something broke".
"""

from __future__ import annotations

import logging

from orderdesk.application.dto import DeleteOrderResponse
from orderdesk.application.result import Failure, NotFound, Ok, Result
from orderdesk.domain.exceptions import (
    PersistenceError,
    SchemaMissingError,
    StoreUnavailableError,
    ValidationError,
)
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order, OrderItem
from orderdesk.domain.model.view import CustomerOrderView
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.order_item_repository import OrderItemRepository
from orderdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderDataAccess:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        order_item_repo: OrderItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._order_item_repo = order_item_repo

    # --- Queries --------------------------------------------------------------

    def list_orders(self) -> Result[list[Order]]:
        """All orders with customer and line item populated."""
        try:
            return Ok(self._order_repo.list_all())
        except Exception as exc:
            logger.exception("Failed to list orders")
            return Failure(exc)

    def list_order_view(self) -> Result[list[CustomerOrderView]]:
        """Flattened order/customer/item rows, one per (order, line item)."""
        try:
            return Ok(self._order_repo.list_view())
        except Exception as exc:
            logger.exception("Failed to build order view")
            return Failure(exc)

    def get_order(self, order_id: int) -> Result[Order]:
        try:
            order = self._order_repo.get_by_id(order_id)
        except Exception as exc:
            logger.exception("Failed to load order #%s", order_id)
            return Failure(exc)
        if order is None:
            return NotFound(f"Order #{order_id} not found")
        return Ok(order)

    def list_order_items(self) -> Result[list[OrderItem]]:
        try:
            return Ok(self._order_item_repo.list_all())
        except Exception as exc:
            logger.exception("Failed to list order items")
            return Failure(exc)

    def list_customers(self) -> Result[list[Customer]]:
        try:
            return Ok(self._customer_repo.list_all())
        except Exception as exc:
            logger.exception("Failed to list customers")
            return Failure(exc)

    # --- Commands -------------------------------------------------------------

    def create_order(self, order: Order | None) -> Result[Order]:
        """Insert an order and return it reloaded with its associations."""
        try:
            self._insert(order)
            saved = self._order_repo.get_by_id(order.id)  # type: ignore[union-attr]
            if saved is None:
                raise PersistenceError(f"Order #{order.id} missing after insert")  # type: ignore[union-attr]
        except Exception as exc:
            logger.exception("Failed to create order")
            return Failure(exc)
        logger.info("Created order #%s", saved.id)
        return Ok(saved)

    def create_order_id(self, order: Order | None) -> Result[int]:
        """Insert an order and return only its generated id."""
        try:
            self._insert(order)
        except Exception as exc:
            logger.exception("Failed to create order")
            return Failure(exc)
        logger.info("Created order #%s", order.id)  # type: ignore[union-attr]
        return Ok(order.id)  # type: ignore[union-attr]

    def update_order(self, order_id: int, changes: Order | None) -> Result[Order]:
        """Overwrite date, customer and line item of an existing order."""
        try:
            if changes is None:
                raise ValidationError("Order data is null")
            existing = self._order_repo.get_by_id(order_id)
            if existing is None:
                return NotFound(f"Order #{order_id} not found")

            self._check_references(changes)
            existing.apply_changes(changes)
            if self._order_repo.update(existing) == 0:
                raise PersistenceError(f"Failed to update order #{order_id}")

            saved = self._order_repo.get_by_id(order_id)
            if saved is None:
                return NotFound(f"Order #{order_id} not found")
        except Exception as exc:
            logger.exception("Failed to update order #%s", order_id)
            return Failure(exc)
        logger.info("Updated order #%s", order_id)
        return Ok(saved)

    def delete_order(self, order_id: int | None) -> DeleteOrderResponse:
        if not isinstance(order_id, int) or isinstance(order_id, bool) or order_id <= 0:
            return DeleteOrderResponse.bad_request("Invalid Order Id")

        try:
            if self._order_repo.get_by_id(order_id) is None:
                return DeleteOrderResponse.bad_request("Order not found")
            if self._order_repo.delete(order_id) == 0:
                return DeleteOrderResponse.bad_request("Order not found")
        except SchemaMissingError as exc:
            logger.exception("Schema missing while deleting order #%s", order_id)
            return DeleteOrderResponse.server_error(str(exc))
        except StoreUnavailableError:
            logger.exception("Store unavailable while deleting order #%s", order_id)
            return DeleteOrderResponse.server_error("Database is unavailable")
        except Exception:
            logger.exception("Failed to delete order #%s", order_id)
            return DeleteOrderResponse.server_error("Failed to delete order")

        logger.info("Deleted order #%s", order_id)
        return DeleteOrderResponse.ok("Order Deleted successfully")

    # --- Internal helpers -----------------------------------------------------

    def _insert(self, order: Order | None) -> None:
        if order is None:
            raise ValidationError("Order data is null")
        self._check_references(order)
        if self._order_repo.add(order) == 0:
            raise PersistenceError("Failed to save Order record to the database")

    def _check_references(self, order: Order) -> None:
        if self._customer_repo.get_by_id(order.customer_id) is None:
            raise ValidationError(f"Customer #{order.customer_id} does not exist")
        if self._order_item_repo.get_by_id(order.order_item_id) is None:
            raise ValidationError(f"Line item #{order.order_item_id} does not exist")
