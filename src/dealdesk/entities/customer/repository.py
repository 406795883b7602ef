"""Customer repository."""

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from dealdesk.entities.customer.entity import Customer
from dealdesk.entities.customer.table import CustomerTable


class CustomerRepository:
    """Data-access layer for customers."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Customer]:
        statement = select(CustomerTable).order_by(CustomerTable.id)
        return [Customer.model_validate(row) for row in self._session.exec(statement)]

    def get(self, customer_id: int) -> Customer | None:
        row = self._session.get(CustomerTable, customer_id)
        if row is None:
            return None
        return Customer.model_validate(row)

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(CustomerTable)).one()

    def add(self, customer: Customer) -> Customer:
        row = CustomerTable(name=customer.name)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.info("Created customer #{}", row.id)
        return Customer.model_validate(row)

    def update(self, customer: Customer) -> Customer | None:
        row = self._session.get(CustomerTable, customer.id)
        if row is None:
            return None

        row.name = customer.name
        self._session.add(row)
        self._session.commit()
        logger.info("Updated customer #{}", row.id)
        return Customer.model_validate(row)

    def remove(self, customer_id: int) -> bool:
        row = self._session.get(CustomerTable, customer_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.commit()
        logger.info("Removed customer #{}", customer_id)
        return True
