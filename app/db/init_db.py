"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
databases should be migrated with Alembic instead; this is for local
development and tests.
"""

import logging

from sqlmodel import SQLModel

from app.db import base  # noqa: F401
from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db(drop_existing: bool = False) -> None:
    """
    Initialize database schema.

    Args:
        drop_existing: Drop every table first (destroys all data)
    """
    if drop_existing:
        logger.warning("Dropping all tables")
        SQLModel.metadata.drop_all(engine)

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    init_db()
