"""Deal database table model.

``deals`` is the join table of the product/customer many-to-many
relationship. It carries its own attributes, so it is mapped as a model
with a composite primary key rather than a plain association table.
"""

import datetime as dt
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from dealdesk.entities.customer.table import CustomerTable
    from dealdesk.entities.product.table import ProductTable


class DealTable(SQLModel, table=True):
    """Database persistence model for deals."""

    __tablename__ = "deals"

    product_id: int = Field(
        sa_column=sa.Column(
            "product_id",
            sa.Integer,
            sa.ForeignKey("products.product_id", ondelete="CASCADE"),
            primary_key=True,
        )
    )
    customer_id: int = Field(
        sa_column=sa.Column(
            "customer_id",
            sa.Integer,
            sa.ForeignKey("customers.customer_id", ondelete="CASCADE"),
            primary_key=True,
        )
    )
    amount: int = Field(default=1, sa_column_kwargs={"server_default": "1"})
    date: dt.date | None = Field(
        default=None,
        sa_column=sa.Column("deal_date", sa.Date, server_default=sa.text("CURRENT_DATE")),
    )

    product: "ProductTable" = Relationship(back_populates="deals")
    customer: "CustomerTable" = Relationship(back_populates="deals")
