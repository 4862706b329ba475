"""
Database initialization.

Creates all tables.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import healthtrack.db.base  # noqa: F401  (registers every table on SQLModel.metadata)


def init_db(bind: Optional[Engine] = None) -> None:
    """Create every table registered on ``SQLModel.metadata``."""
    if bind is None:
        from healthtrack.db.session import engine as bind

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)
    logger.info(f"Tables ready: {', '.join(sorted(SQLModel.metadata.tables))}")


if __name__ == "__main__":
    init_db()
