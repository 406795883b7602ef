"""Entity: Customer."""

from pydantic import Field

from dealdesk.entities._base import Entity


class Customer(Entity):
    """A person buying from the store."""

    id: int | None = Field(default=None, description="Identifier assigned by the store")
    name: str = Field(description="Customer name")

    def columns(self) -> tuple[object, ...]:
        return (self.id, self.name)
