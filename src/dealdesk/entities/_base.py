from abc import abstractmethod

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base domain entity.

    Entities are built from table rows with ``model_validate(row)`` and print
    as a single pipe-separated line. ``BaseModel``'s metaclass derives from
    ``ABCMeta``, so subclasses must implement ``columns``.
    """

    model_config = ConfigDict(from_attributes=True)

    @abstractmethod
    def columns(self) -> tuple[object, ...]:
        """Values shown, in order, when the entity is printed."""

    def __str__(self) -> str:
        return " | ".join(str(value) for value in self.columns())
