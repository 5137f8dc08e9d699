"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the CLI without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.model.order import Order
from orderdesk.domain.model.view import CustomerOrderView

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_SERVER_ERROR = 500


@dataclass(frozen=True)
class DeleteOrderResponse:
    """Outcome of a delete: a JSON-style body plus an HTTP-style status."""

    success: bool
    message: str
    status_code: int

    @property
    def body(self) -> dict:
        return {"success": self.success, "message": self.message}

    @staticmethod
    def ok(message: str) -> DeleteOrderResponse:
        return DeleteOrderResponse(True, message, STATUS_OK)

    @staticmethod
    def bad_request(message: str) -> DeleteOrderResponse:
        return DeleteOrderResponse(False, message, STATUS_BAD_REQUEST)

    @staticmethod
    def server_error(message: str) -> DeleteOrderResponse:
        return DeleteOrderResponse(False, message, STATUS_SERVER_ERROR)


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order with its customer and line item flattened."""

    id: int
    order_date: str
    customer_id: int
    customer_name: str
    order_item_id: int
    item_name: str
    quantity: int | None
    line_total: str


@dataclass(frozen=True)
class OrderViewRowDTO:
    """Output: a single row of the customer/order report."""

    customer_id: int
    customer_name: str
    item_name: str
    price: str  # formatted, e.g. "$15.00"
    quantity: int
    line_total: str
    order_date: str


def order_to_dto(order: Order) -> OrderDTO:
    customer = order.customer
    line_item = order.order_item
    item = line_item.item if line_item is not None else None
    line_total = line_item.line_total if line_item is not None else None
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M"),
        customer_id=order.customer_id,
        customer_name=customer.name if customer is not None else "-",
        order_item_id=order.order_item_id,
        item_name=item.name if item is not None else "-",
        quantity=line_item.quantity.value if line_item is not None else None,
        line_total=str(line_total) if line_total is not None else "-",
    )


def view_row_to_dto(row: CustomerOrderView) -> OrderViewRowDTO:
    return OrderViewRowDTO(
        customer_id=row.customer_id,
        customer_name=row.customer_name,
        item_name=row.item_name,
        price=str(row.price),
        quantity=row.quantity,
        line_total=str(row.line_total),
        order_date=row.order_date.strftime("%Y-%m-%d %H:%M"),
    )
