"""CLI commands for customers, catalog items and line items."""

from __future__ import annotations

import click

from orderdesk.domain.exceptions import DomainException, EntityNotFoundError
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.item import Item
from orderdesk.domain.model.order import OrderItem
from orderdesk.domain.model.value_objects import Money
from orderdesk.infrastructure.bootstrap import (
    customer_repository,
    item_repository,
    order_data_access,
    order_item_repository,
    unit_of_work,
)
from orderdesk.infrastructure.cli.output import unwrap


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.pass_obj
def customer_add(store, name: str) -> None:
    """Add a customer."""
    try:
        customer = Customer.create(name)
        with unit_of_work(store) as session:
            customer_repository(session).add(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' added")


@click.command("list")
@click.pass_obj
def customer_list(store) -> None:
    """List all customers."""
    with unit_of_work(store) as session:
        customers = unwrap(order_data_access(session).list_customers())

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<30}")


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def item_add(store, name: str, price: str) -> None:
    """Add an item to the catalog."""
    try:
        item = Item.create(name, Money.of(price))
        with unit_of_work(store) as session:
            item_repository(session).add(item)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item.id} '{item.name}' added at {item.price}")


@click.command("list")
@click.pass_obj
def item_list(store) -> None:
    """List all catalog items."""
    try:
        with unit_of_work(store) as session:
            items = item_repository(session).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for i in items:
        click.echo(f"{i.id:<6} {i.name:<20} {str(i.price):>10}")


@click.command("add")
@click.option("--item-id", required=True, type=int, help="Catalog item.")
@click.option("--quantity", required=True, type=int, help="Units ordered.")
@click.pass_obj
def line_item_add(store, item_id: int, quantity: int) -> None:
    """Add a line item (a quantity of one catalog item)."""
    try:
        line_item = OrderItem.create(item_id, quantity)
        with unit_of_work(store) as session:
            if item_repository(session).get_by_id(item_id) is None:
                raise EntityNotFoundError(f"Item #{item_id} does not exist")
            order_item_repository(session).add(line_item)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line item #{line_item.id} added ({quantity} x item #{item_id})")


@click.command("list")
@click.pass_obj
def line_item_list(store) -> None:
    """List all line items."""
    with unit_of_work(store) as session:
        line_items = unwrap(order_data_access(session).list_order_items())

    if not line_items:
        click.echo("No line items found.")
        return

    click.echo(f"{'ID':<6} {'Item':<20} {'Qty':>5} {'Total':>10}")
    click.echo("-" * 44)
    for li in line_items:
        name = li.item.name if li.item is not None else f"#{li.item_id}"
        total = li.line_total
        click.echo(
            f"{li.id:<6} {name:<20} {li.quantity.value:>5} {str(total) if total else '-':>10}"
        )
