"""Tests for the OrderDataAccess facade.

Uses in-memory fake repositories, no database.
"""

from datetime import datetime

import pytest

from orderdesk.application.order_data_access import OrderDataAccess
from orderdesk.application.result import Failure, NotFound, Ok
from orderdesk.domain.exceptions import (
    PersistenceError,
    StoreUnavailableError,
    ValidationError,
)
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.item import Item
from orderdesk.domain.model.order import Order, OrderItem
from orderdesk.domain.model.value_objects import Money, Quantity
from tests.fakes import (
    ExplodingOrderRepository,
    FakeCustomerRepository,
    FakeItemRepository,
    FakeOrderItemRepository,
    FakeOrderRepository,
    MissingSchemaOrderRepository,
    UnavailableOrderRepository,
    ZeroRowOrderRepository,
)

MAY_1 = datetime(2024, 5, 1, 9, 30)
JUNE_2 = datetime(2024, 6, 2, 14, 0)


def _setup(order_repo_cls=FakeOrderRepository, seeded: bool = True):
    """Build the facade over fakes, optionally pre-loaded with reference data."""
    customers = FakeCustomerRepository(
        [Customer(None, "Alice"), Customer(None, "Bob")] if seeded else []
    )
    items = FakeItemRepository(
        [
            Item(None, "Widget", Money.of("15.00")),
            Item(None, "Gadget", Money.of("25.00")),
        ]
        if seeded
        else []
    )
    order_items = FakeOrderItemRepository(
        items,
        [
            OrderItem(None, item_id=1, quantity=Quantity(3)),
            OrderItem(None, item_id=2, quantity=Quantity(1)),
        ]
        if seeded
        else [],
    )
    orders = order_repo_cls(customers, order_items)
    access = OrderDataAccess(orders, customers, order_items)
    return access, orders


class TestEmptyStore:

    def test_list_orders_is_empty_not_none(self):
        access, _ = _setup(seeded=False)
        assert access.list_orders() == Ok([])

    def test_list_order_view_is_empty(self):
        access, _ = _setup(seeded=False)
        assert access.list_order_view() == Ok([])

    def test_list_customers_is_empty(self):
        access, _ = _setup(seeded=False)
        assert access.list_customers() == Ok([])

    def test_list_order_items_is_empty(self):
        access, _ = _setup(seeded=False)
        assert access.list_order_items() == Ok([])


class TestCreateOrder:

    def test_returns_reloaded_record_with_associations(self):
        access, _ = _setup()
        result = access.create_order(Order.create(1, 1, MAY_1))

        assert result.is_ok
        saved = result.value
        assert saved.id == 1
        assert saved.order_date == MAY_1
        assert saved.customer.name == "Alice"
        assert saved.order_item.item.name == "Widget"
        assert saved.order_item.quantity == Quantity(3)

    def test_get_after_insert_returns_inserted_fields(self):
        access, _ = _setup()
        order_id = access.create_order_id(Order.create(2, 2, JUNE_2)).unwrap()

        order = access.get_order(order_id).unwrap()
        assert (order.customer_id, order.order_item_id, order.order_date) == (2, 2, JUNE_2)
        assert order.customer.name == "Bob"
        assert order.order_item.item.name == "Gadget"

    def test_null_order_is_a_validation_failure(self):
        access, _ = _setup()
        result = access.create_order(None)
        assert isinstance(result, Failure)
        assert isinstance(result.cause, ValidationError)

    def test_create_id_returns_sequential_ids(self):
        access, _ = _setup()
        first = access.create_order_id(Order.create(1, 1, MAY_1))
        second = access.create_order_id(Order.create(2, 2, MAY_1))
        assert first == Ok(1)
        assert second == Ok(2)

    def test_create_id_null_order_fails(self):
        access, _ = _setup()
        result = access.create_order_id(None)
        assert result.is_failure
        assert isinstance(result.cause, ValidationError)

    def test_zero_affected_rows_is_distinct_from_success(self):
        access, _ = _setup(order_repo_cls=ZeroRowOrderRepository)
        result = access.create_order_id(Order.create(1, 1, MAY_1))
        assert isinstance(result, Failure)
        assert isinstance(result.cause, PersistenceError)
        assert "Failed to save Order" in result.message

    def test_zero_affected_rows_fails_record_variant_too(self):
        access, _ = _setup(order_repo_cls=ZeroRowOrderRepository)
        result = access.create_order(Order.create(1, 1, MAY_1))
        assert isinstance(result.cause, PersistenceError)

    def test_unknown_customer_is_rejected_before_insert(self):
        access, orders = _setup()
        result = access.create_order_id(Order.create(9, 1, MAY_1))

        assert isinstance(result.cause, ValidationError)
        assert result.message == "Customer #9 does not exist"
        assert orders.list_all() == []

    def test_unknown_line_item_is_rejected_before_insert(self):
        access, orders = _setup()
        result = access.create_order(Order.create(1, 9, MAY_1))

        assert isinstance(result.cause, ValidationError)
        assert result.message == "Line item #9 does not exist"
        assert orders.list_all() == []


class TestGetOrder:

    def test_unknown_id_is_not_found(self):
        access, _ = _setup()
        result = access.get_order(42)
        assert isinstance(result, NotFound)
        assert "42" in result.message

    def test_store_outage_is_failure_with_cause(self):
        access, _ = _setup(order_repo_cls=lambda c, oi: UnavailableOrderRepository())
        result = access.get_order(1)
        assert isinstance(result, Failure)
        assert isinstance(result.cause, StoreUnavailableError)


class TestUpdateOrder:

    def test_overwrites_date_customer_and_line_item(self):
        access, _ = _setup()
        order_id = access.create_order_id(Order.create(1, 1, MAY_1)).unwrap()

        result = access.update_order(order_id, Order.create(2, 2, JUNE_2))

        updated = result.unwrap()
        assert updated.id == order_id
        assert updated.order_date == JUNE_2
        assert updated.customer.name == "Bob"
        assert updated.order_item.item.name == "Gadget"

    def test_id_in_changes_is_ignored(self):
        access, _ = _setup()
        order_id = access.create_order_id(Order.create(1, 1, MAY_1)).unwrap()
        changes = Order(id=999, order_date=JUNE_2, customer_id=2, order_item_id=1)

        updated = access.update_order(order_id, changes).unwrap()
        assert updated.id == order_id
        assert access.get_order(999).is_not_found

    def test_unknown_id_is_not_found_and_does_not_raise(self):
        access, _ = _setup()
        result = access.update_order(7, Order.create(1, 1, MAY_1))
        assert result == NotFound("Order #7 not found")

    def test_null_changes_fail(self):
        access, _ = _setup()
        result = access.update_order(1, None)
        assert isinstance(result.cause, ValidationError)

    def test_unknown_references_leave_order_untouched(self):
        access, _ = _setup()
        order_id = access.create_order_id(Order.create(1, 1, MAY_1)).unwrap()

        result = access.update_order(order_id, Order.create(5, 1, JUNE_2))

        assert result.message == "Customer #5 does not exist"
        kept = access.get_order(order_id).unwrap()
        assert (kept.customer_id, kept.order_date) == (1, MAY_1)


class TestDeleteOrder:

    @pytest.mark.parametrize("bad_id", [0, -5, None])
    def test_invalid_id_is_400(self, bad_id):
        access, _ = _setup()
        response = access.delete_order(bad_id)
        assert response.status_code == 400
        assert response.body == {"success": False, "message": "Invalid Order Id"}

    def test_unknown_id_is_400(self):
        access, _ = _setup()
        response = access.delete_order(99)
        assert response.status_code == 400
        assert response.body == {"success": False, "message": "Order not found"}

    def test_existing_id_is_200_and_order_is_gone(self):
        access, _ = _setup()
        order_id = access.create_order_id(Order.create(1, 1, MAY_1)).unwrap()

        response = access.delete_order(order_id)

        assert response.status_code == 200
        assert response.success is True
        assert response.message == "Order Deleted successfully"
        assert access.get_order(order_id).is_not_found

    def test_store_outage_is_500(self):
        access, _ = _setup(order_repo_cls=lambda c, oi: UnavailableOrderRepository())
        response = access.delete_order(1)
        assert response.status_code == 500
        assert response.body == {"success": False, "message": "Database is unavailable"}

    def test_missing_schema_is_500_with_hint(self):
        access, _ = _setup(order_repo_cls=MissingSchemaOrderRepository)
        response = access.delete_order(1)
        assert response.status_code == 500
        assert response.message == "Database tables are missing; run 'orderdesk db init'"

    def test_unexpected_error_is_500(self):
        access, _ = _setup(order_repo_cls=ExplodingOrderRepository)
        order_id = access.create_order_id(Order.create(1, 1, MAY_1)).unwrap()

        response = access.delete_order(order_id)

        assert response.status_code == 500
        assert response.success is False
        assert response.message == "Failed to delete order"


class TestListings:

    def test_list_orders_populates_associations(self):
        access, _ = _setup()
        access.create_order_id(Order.create(1, 1, MAY_1))
        access.create_order_id(Order.create(2, 2, JUNE_2))

        orders = access.list_orders().unwrap()

        assert [o.customer.name for o in orders] == ["Alice", "Bob"]
        assert [o.order_item.item.name for o in orders] == ["Widget", "Gadget"]

    def test_view_has_one_row_per_order_line(self):
        access, _ = _setup()
        access.create_order_id(Order.create(1, 1, MAY_1))
        access.create_order_id(Order.create(1, 2, MAY_1))
        access.create_order_id(Order.create(2, 1, JUNE_2))

        rows = access.list_order_view().unwrap()

        assert len(rows) == 3
        first = rows[0]
        assert (first.customer_id, first.customer_name) == (1, "Alice")
        assert (first.item_name, first.price, first.quantity) == ("Widget", Money.of("15.00"), 3)
        assert first.line_total == Money.of("45.00")
        assert first.order_date == MAY_1

    def test_list_customers(self):
        access, _ = _setup()
        names = [c.name for c in access.list_customers().unwrap()]
        assert names == ["Alice", "Bob"]

    def test_list_order_items_includes_item(self):
        access, _ = _setup()
        line_items = access.list_order_items().unwrap()
        assert [(li.item.name, li.quantity.value) for li in line_items] == [
            ("Widget", 3),
            ("Gadget", 1),
        ]

    def test_list_orders_outage_is_failure(self):
        access, _ = _setup(order_repo_cls=lambda c, oi: UnavailableOrderRepository())
        assert access.list_orders().is_failure
        assert access.list_order_view().is_failure
