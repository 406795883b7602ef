"""Deal repository."""

import datetime as dt

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from dealdesk.entities.deal.entity import Deal
from dealdesk.entities.deal.table import DealTable


class DealRepository:
    """Data-access layer for deals."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Deal]:
        statement = select(DealTable).order_by(DealTable.customer_id, DealTable.product_id)
        return [Deal.model_validate(row) for row in self._session.exec(statement)]

    def get(self, product_id: int, customer_id: int) -> Deal | None:
        row = self._session.get(DealTable, (product_id, customer_id))
        if row is None:
            return None
        return Deal.model_validate(row)

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(DealTable)).one()

    def count_for_customer(self, customer_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(DealTable)
            .where(DealTable.customer_id == customer_id)
        )
        return self._session.exec(statement).one()

    def add(
        self,
        product_id: int,
        customer_id: int,
        amount: int = 1,
        date: dt.date | None = None,
    ) -> Deal:
        """Record a deal; a ``None`` date leaves it to the database default."""
        row = DealTable(product_id=product_id, customer_id=customer_id, amount=amount, date=date)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.info("Customer #{} bought product #{}", customer_id, product_id)
        return Deal.model_validate(row)
