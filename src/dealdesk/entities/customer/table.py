"""Customer database table model."""

from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from dealdesk.entities.deal.table import DealTable
    from dealdesk.entities.product.table import ProductTable


class CustomerTable(SQLModel, table=True):
    """Database persistence model for customers."""

    __tablename__ = "customers"

    id: int | None = Field(
        default=None,
        sa_column=sa.Column("customer_id", sa.Integer, primary_key=True, autoincrement=True),
    )
    name: str

    deals: list["DealTable"] = Relationship(
        back_populates="customer",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    @property
    def products(self) -> list["ProductTable"]:
        """Products this customer bought, one per deal."""
        return [deal.product for deal in self.deals]
