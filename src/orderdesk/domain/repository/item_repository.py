"""Abstract repository for catalog items.

Defined in the domain layer so the domain never depends on
infrastructure.  The SQLAlchemy implementation lives in
``orderdesk.infrastructure.persistence``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in the catalog."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> Item | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def add(self, item: Item) -> None:
        """Insert a new item and assign its id."""
