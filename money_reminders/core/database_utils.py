"""
Database utility functions for consistent session management outside request handlers.

Request handlers receive their session through the ``get_db`` dependency; scripts
(seeding, health checks, startup) use ``get_db_session`` instead.
"""

import logging
from contextlib import contextmanager
from typing import Generator, List

from sqlalchemy import inspect, text
from sqlalchemy.orm import Session

from money_reminders.db.base import Base
from money_reminders.db.session import SessionLocal, engine

logger = logging.getLogger(__name__)


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """
    Get a database session with proper cleanup using context manager.

    Usage:
        with get_db_session() as db:
            result = db.query(Model).all()

    Commits on success, rolls back and re-raises on any exception.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database session error: {e}")
        raise
    finally:
        db.close()


def missing_tables() -> List[str]:
    """Names of mapped tables that do not exist in the connected database."""
    # Import models so they register on Base.metadata
    import money_reminders.models  # noqa: F401

    existing = set(inspect(engine).get_table_names())
    return [name for name in Base.metadata.tables if name not in existing]


def create_tables() -> None:
    import money_reminders.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_database_connection() -> bool:
    """Run a trivial query; returns False (and logs) when the database is unreachable."""
    try:
        with get_db_session() as db:
            db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
