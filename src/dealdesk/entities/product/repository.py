"""Product repository."""

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from dealdesk.entities.product.entity import Product
from dealdesk.entities.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Every write is committed immediately.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        return [Product.model_validate(row) for row in self._session.exec(statement)]

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row)

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(ProductTable)).one()

    def add(self, product: Product) -> Product:
        row = ProductTable(good=product.good, price=product.price, category=product.category)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.info("Created product #{}", row.id)
        return Product.model_validate(row)

    def update(self, product: Product) -> Product | None:
        """Write the fields of ``product`` over the stored row with the same id."""
        row = self._session.get(ProductTable, product.id)
        if row is None:
            return None

        row.good = product.good
        row.price = product.price
        row.category = product.category
        self._session.add(row)
        self._session.commit()
        logger.info("Updated product #{}", row.id)
        return Product.model_validate(row)

    def remove(self, product_id: int) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.commit()
        logger.info("Removed product #{}", product_id)
        return True
