"""Abstract repository for customers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Insert a new customer and assign its id."""
