"""Entity package: Deal."""

from .entity import Deal
from .repository import DealRepository
from .table import DealTable

__all__ = ["Deal", "DealRepository", "DealTable"]
