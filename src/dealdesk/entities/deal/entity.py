"""Entity: Deal."""

import datetime as dt

from pydantic import Field

from dealdesk.entities._base import Entity


class Deal(Entity):
    """One customer's purchase of one product.

    A deal is identified by the (product_id, customer_id) pair.
    """

    product_id: int = Field(description="Purchased product")
    customer_id: int = Field(description="Buying customer")
    amount: int = Field(default=1, description="Number of items bought")
    date: dt.date | None = Field(default=None, description="Date of the deal")

    def columns(self) -> tuple[object, ...]:
        return (self.product_id, self.customer_id, self.amount, self.date)
