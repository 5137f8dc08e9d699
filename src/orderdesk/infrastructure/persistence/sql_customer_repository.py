"""SQLAlchemy-backed implementation of CustomerRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from orderdesk.domain.model.customer import Customer
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.infrastructure.persistence.database import is_storable_id, store_errors
from orderdesk.infrastructure.persistence.mappers import customer_to_domain
from orderdesk.infrastructure.persistence.orm import CustomerRecord


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Customer]:
        with store_errors(self._session):
            records = self._session.scalars(
                select(CustomerRecord).order_by(CustomerRecord.id)
            ).all()
            return [customer_to_domain(r) for r in records]

    def get_by_id(self, customer_id: int) -> Customer | None:
        if not is_storable_id(customer_id):
            return None
        with store_errors(self._session):
            record = self._session.get(CustomerRecord, customer_id)
            return customer_to_domain(record) if record is not None else None

    def add(self, customer: Customer) -> None:
        record = CustomerRecord(name=customer.name)
        with store_errors(self._session):
            self._session.add(record)
            self._session.commit()
            customer.id = record.id
