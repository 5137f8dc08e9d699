"""CLI commands for orders."""

from __future__ import annotations

import json
from datetime import datetime

import click

from orderdesk.application.dto import order_to_dto, view_row_to_dto
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.value_objects import Money
from orderdesk.infrastructure.bootstrap import order_data_access, unit_of_work
from orderdesk.infrastructure.cli.output import unwrap


def _build_order(customer_id: int, line_item_id: int, date: datetime | None) -> Order:
    try:
        return Order.create(customer_id, line_item_id, order_date=date)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_orders(orders: list[Order]) -> None:
    click.echo(
        f"{'ID':<6} {'Date':<17} {'Customer':<20} {'Item':<20} {'Qty':>5} {'Total':>10}"
    )
    click.echo("-" * 83)
    for order in orders:
        dto = order_to_dto(order)
        qty = dto.quantity if dto.quantity is not None else "-"
        click.echo(
            f"{dto.id:<6} {dto.order_date:<17} {dto.customer_name:<20} "
            f"{dto.item_name:<20} {qty:>5} {dto.line_total:>10}"
        )


@click.command("list")
@click.pass_obj
def order_list(store) -> None:
    """List all orders with their customer and line item."""
    with unit_of_work(store) as session:
        orders = unwrap(order_data_access(session).list_orders())

    if not orders:
        click.echo("No orders found.")
        return
    _display_orders(orders)


@click.command("view")
@click.pass_obj
def order_view(store) -> None:
    """Show the customer/order report, one row per order line."""
    with unit_of_work(store) as session:
        rows = unwrap(order_data_access(session).list_order_view())

    if not rows:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'Cust':<5} {'Customer':<20} {'Item':<20} {'Price':>10} {'Qty':>5} "
        f"{'Total':>10} {'Date':<17}"
    )
    click.echo("-" * 93)
    grand_total = Money.zero()
    for row in rows:
        dto = view_row_to_dto(row)
        grand_total = grand_total + row.line_total
        click.echo(
            f"{dto.customer_id:<5} {dto.customer_name:<20} {dto.item_name:<20} "
            f"{dto.price:>10} {dto.quantity:>5} {dto.line_total:>10} {dto.order_date:<17}"
        )
    click.echo("-" * 93)
    click.echo(f"{'Grand Total':<62} {str(grand_total):>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(store, order_id: int) -> None:
    """Show a single order."""
    with unit_of_work(store) as session:
        order = unwrap(order_data_access(session).get_order(order_id))

    dto = order_to_dto(order)
    click.echo(f"Order #{dto.id}")
    click.echo(f"Date:      {dto.order_date}")
    click.echo(f"Customer:  {dto.customer_name} (#{dto.customer_id})")
    click.echo(f"Line item: #{dto.order_item_id} {dto.item_name} x {dto.quantity}")
    click.echo(f"Total:     {dto.line_total}")


@click.command("create")
@click.option("--customer-id", required=True, type=int, help="Customer placing the order.")
@click.option("--line-item-id", required=True, type=int, help="Line item ordered.")
@click.option("--date", "order_date", type=click.DateTime(), default=None,
              help="Order date (defaults to now).")
@click.option("--id-only", is_flag=True, default=False, help="Print only the new order ID.")
@click.pass_obj
def order_create(
    store,
    customer_id: int,
    line_item_id: int,
    order_date: datetime | None,
    id_only: bool,
) -> None:
    """Create a new order."""
    order = _build_order(customer_id, line_item_id, order_date)

    with unit_of_work(store) as session:
        access = order_data_access(session)
        if id_only:
            click.echo(unwrap(access.create_order_id(order)))
            return
        saved = unwrap(access.create_order(order))

    click.echo(f"Order #{saved.id} created")
    _display_orders([saved])


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--customer-id", required=True, type=int, help="New customer.")
@click.option("--line-item-id", required=True, type=int, help="New line item.")
@click.option("--date", "order_date", type=click.DateTime(), default=None,
              help="New order date (defaults to now).")
@click.pass_obj
def order_update(
    store,
    order_id: int,
    customer_id: int,
    line_item_id: int,
    order_date: datetime | None,
) -> None:
    """Replace the date, customer and line item of an order."""
    changes = _build_order(customer_id, line_item_id, order_date)

    with unit_of_work(store) as session:
        saved = unwrap(order_data_access(session).update_order(order_id, changes))

    click.echo(f"Order #{saved.id} updated")
    _display_orders([saved])


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.pass_context
def order_delete(ctx: click.Context, order_id: int) -> None:
    """Delete an order; prints the JSON response body."""
    with unit_of_work(ctx.obj) as session:
        response = order_data_access(session).delete_order(order_id)

    click.echo(json.dumps(response.body))
    if response.status_code != 200:
        ctx.exit(1)
