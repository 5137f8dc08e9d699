"""Explicit outcomes for data-access operations.

Every facade call returns exactly one of:

- ``Ok(value)``     -- the operation succeeded (``value`` may be an empty list)
- ``NotFound(msg)`` -- the requested record does not exist
- ``Failure(cause)`` -- the operation failed; ``cause`` is the original error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from orderdesk.domain.exceptions import EntityNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_not_found(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    message: str = "Not found"

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_not_found(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self):
        raise EntityNotFoundError(self.message)


@dataclass(frozen=True)
class Failure:
    cause: Exception

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_not_found(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return str(self.cause) or type(self.cause).__name__

    def unwrap(self):
        raise self.cause


Result = Union[Ok[T], NotFound, Failure]
