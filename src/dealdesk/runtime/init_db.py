"""Database initialization script."""

from dealdesk.core.services.database.db_manage import DbManageService
from dealdesk.core.services.database.db_session import DbSessionService
from dealdesk.runtime.config.config_data import ConfigData
from dealdesk.runtime.context import load_config


def init_db(config: ConfigData) -> bool:
    """Create all database tables, and the seed rows if the schema was missing."""
    db_session_service = DbSessionService(config)
    try:
        return DbManageService(db_session_service.engine).ensure_created()
    finally:
        db_session_service.dispose()


if __name__ == "__main__":
    init_db(load_config())
