from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

# Ensure models are registered with SQLModel metadata before creating tables
import dealdesk.entities  # noqa: F401
from dealdesk.core.services.database.db_manage import DbManageService

__all__ = ["engine", "session", "seeded_session"]


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    """Session on an empty schema."""
    SQLModel.metadata.create_all(engine)
    with Session(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def seeded_session(engine: Engine) -> Generator[Session, None, None]:
    """Session on a schema created and seeded the way the console does it."""
    DbManageService(engine).ensure_created()
    with Session(engine, expire_on_commit=False) as session:
        yield session
