"""
Configuration package.
"""

from .database import (
    check_database_connection,
    close_database_connections,
    create_engine,
    get_async_session_factory,
    get_database_url,
    get_db_session,
)
from .logging import configure_logging, get_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    # Database
    "get_database_url",
    "create_engine",
    "get_async_session_factory",
    "get_db_session",
    "check_database_connection",
    "close_database_connections",
    # Logging
    "configure_logging",
    "get_logger",
]
