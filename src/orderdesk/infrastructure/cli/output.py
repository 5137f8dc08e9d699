"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from typing import TypeVar

import click

from orderdesk.application.result import Failure, NotFound, Ok, Result

T = TypeVar("T")


def unwrap(result: Result[T]) -> T:
    """Return the value of an Ok result, or abort the command."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, NotFound):
        raise click.ClickException(result.message)
    if isinstance(result, Failure):
        raise click.ClickException(f"Operation failed: {result.message}")
    raise TypeError(f"Unexpected result {result!r}")
