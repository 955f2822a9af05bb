"""
db/init_db.py
-------------
Creates the visitors table if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import asyncio
from typing import Optional

from db.connection import QueryExecutor
from repositories.visitor_repo import VisitorRepository
from utils.logger import get_logger

logger = get_logger(__name__)


async def init_schema(executor: Optional[QueryExecutor] = None) -> str:
    """
    Create the schema. Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        executor: An open executor to use. When omitted, one is built from
            the environment settings and closed again afterwards.

    Returns:
        The table-created success message.
    """
    owned = executor is None
    if owned:
        executor = QueryExecutor()
        executor.open()
    try:
        message = await VisitorRepository(executor).create_table()
        logger.info("Database schema initialized successfully.")
        return message
    finally:
        if owned:
            executor.close()


if __name__ == "__main__":
    print(asyncio.run(init_schema()))
