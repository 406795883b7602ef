"""Product database table model."""

from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from dealdesk.entities.customer.table import CustomerTable
    from dealdesk.entities.deal.table import DealTable


class ProductTable(SQLModel, table=True):
    """Database persistence model for products."""

    __tablename__ = "products"

    id: int | None = Field(
        default=None,
        sa_column=sa.Column("product_id", sa.Integer, primary_key=True, autoincrement=True),
    )
    good: str
    price: float
    category: str = Field(sa_column=sa.Column("category_name", sa.Text, nullable=False))

    deals: list["DealTable"] = Relationship(
        back_populates="product",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    @property
    def customers(self) -> list["CustomerTable"]:
        """Customers who bought this product, one per deal."""
        return [deal.customer for deal in self.deals]
