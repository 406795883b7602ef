"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, create_engine

from dealdesk.runtime.config.config_data import ConfigData
from dealdesk.runtime.context import get_config


class DbSessionService:
    """Owns the engine for the configured connection string.

    The console opens one session through :meth:`session_scope` and keeps it
    for the lifetime of the process.
    """

    def __init__(self, config: ConfigData | None = None):
        main_config = config or get_config()
        db_config = main_config.database
        url = make_url(main_config.connection_string)

        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(main_config, url.get_backend_name()),
        }
        if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            engine_kwargs["poolclass"] = StaticPool

        logger.info("Initializing database engine for {}", url.render_as_string(hide_password=True))
        self._engine = create_engine(url, **engine_kwargs)

    @staticmethod
    def _get_connect_args(config: ConfigData, backend: str) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if backend == "postgresql":
            connect_args.update(
                {
                    "application_name": f"dealdesk_{config.app.environment}",
                    "connect_timeout": 30,
                }
            )

        elif backend == "sqlite":
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": config.database.sqlite_timeout,
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better reliability."
                )

        return connect_args

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session, rolling back and closing it on the way out."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database session aborted",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()
