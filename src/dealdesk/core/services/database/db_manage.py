"""Schema creation and seed data."""

from loguru import logger
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from dealdesk.entities.customer.table import CustomerTable
from dealdesk.entities.deal.table import DealTable
from dealdesk.entities.product.table import ProductTable

SEED_PRODUCTS: tuple[tuple[int, str, float, str], ...] = (
    (1, "hat", 10.0, "clothes"),
    (2, "bmw", 1000.0, "cars"),
    (3, "audi", 1100.0, "cars"),
    (4, "fiat", 800.0, "cars"),
)

SEED_CUSTOMERS: tuple[tuple[int, str], ...] = (
    (1, "Ignat"),
    (2, "Ivan"),
)

_SERIAL_COLUMNS = (
    (ProductTable.__tablename__, "product_id"),
    (CustomerTable.__tablename__, "customer_id"),
)


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create any missing tables."""
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def ensure_created(self) -> bool:
        """Create the schema and seed it when the database has none of our tables.

        A database that already holds the schema is left untouched, so seed
        rows are inserted once per database.

        Returns:
            True if the schema was created by this call.
        """
        ours = {
            ProductTable.__tablename__,
            CustomerTable.__tablename__,
            DealTable.__tablename__,
        }
        existing = set(inspect(self._engine).get_table_names()) & ours
        if existing == ours:
            logger.debug("Schema already present")
            return False

        self.create_all()
        if existing:
            logger.warning("Created missing tables {}; seed data skipped", sorted(ours - existing))
            return True

        self.seed()
        return True

    def seed(self) -> None:
        """Insert the fixed products and customers."""
        with Session(self._engine) as session:
            for product_id, good, price, category in SEED_PRODUCTS:
                session.add(ProductTable(id=product_id, good=good, price=price, category=category))
            for customer_id, name in SEED_CUSTOMERS:
                session.add(CustomerTable(id=customer_id, name=name))
            session.commit()

        if self._engine.dialect.name == "postgresql":
            # explicit ids do not advance serial sequences
            with self._engine.begin() as connection:
                for table, column in _SERIAL_COLUMNS:
                    connection.execute(
                        text(
                            f"SELECT setval(pg_get_serial_sequence('{table}', '{column}'), "
                            f"(SELECT MAX({column}) FROM {table}))"
                        )
                    )

        logger.info(
            "Seeded {} products and {} customers", len(SEED_PRODUCTS), len(SEED_CUSTOMERS)
        )
