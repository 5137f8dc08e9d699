from dataclasses import replace

import click
from sqlalchemy.exc import SQLAlchemyError

from orderdesk.infrastructure.bootstrap import engine, load_settings
from orderdesk.infrastructure.cli.catalog_commands import (
    customer_add,
    customer_list,
    item_add,
    item_list,
    line_item_add,
    line_item_list,
)
from orderdesk.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
    order_view,
)
from orderdesk.infrastructure.logging_setup import setup_logger
from orderdesk.infrastructure.persistence.database import create_schema


@click.group()
@click.option("--database-url", default=None, help="SQLAlchemy database URL.")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None) -> None:
    """orderdesk: order records, customers and line items"""
    settings = load_settings()
    if database_url:
        settings = replace(settings, database_url=database_url)
    setup_logger(settings.log_level, settings.log_dir)

    store = engine(settings)
    ctx.obj = store
    ctx.call_on_close(store.dispose)


@cli.group()
def db() -> None:
    """Manage the database."""


@db.command("init")
@click.pass_obj
def db_init(store) -> None:
    """Create the order tables if they do not exist."""
    try:
        create_schema(store)
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Could not initialize database: {exc}")
    click.echo("Database initialized.")


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def item() -> None:
    """Manage catalog items."""


@cli.group("line-item")
def line_item() -> None:
    """Manage order line items."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
order.add_command(order_view)
customer.add_command(customer_add)
customer.add_command(customer_list)
item.add_command(item_add)
item.add_command(item_list)
line_item.add_command(line_item_add)
line_item.add_command(line_item_list)
