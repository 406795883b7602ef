"""Entity: Product."""

from pydantic import Field

from dealdesk.entities._base import Entity


class Product(Entity):
    """A good offered by the store."""

    id: int | None = Field(default=None, description="Identifier assigned by the store")
    good: str = Field(description="Product name")
    price: float = Field(description="Unit price, expected to be non-negative")
    category: str = Field(description="Category name")

    def columns(self) -> tuple[object, ...]:
        return (self.id, self.good, self.price, self.category)
