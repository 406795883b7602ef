"""Entities organised by business concept.

Each entity has its own package containing:
- entity.py: Domain model returned to callers
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .customer import Customer, CustomerRepository, CustomerTable
from .deal import Deal, DealRepository, DealTable
from .product import Product, ProductRepository, ProductTable

__all__ = [
    "Customer",
    "CustomerTable",
    "CustomerRepository",
    "Deal",
    "DealTable",
    "DealRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
]
