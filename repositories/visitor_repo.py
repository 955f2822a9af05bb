"""
repositories/visitor_repo.py
----------------------------
Data access layer for visitor book entries.
All SQL run against the `visitors` table goes through here.
"""

from typing import Any, Union

from db import queries
from db.connection import QueryExecutor
from models.visitor import Visitor, VisitorColumn
from utils.exceptions import InvalidColumn, NoVisitors, NoVisitorsFound, VisitorNotFound
from utils.logger import get_logger
from utils.validators import validate_visitor

logger = get_logger(__name__)


class VisitorRepository:
    """
    Repository for CRUD operations on the visitors table.

    Every operation runs its statements one after another on the injected
    executor. Existence checks and the writes that follow them are separate
    statements, so they are not atomic.
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    # ── SCHEMA ────────────────────────────────────────────

    async def create_table(self) -> str:
        """Create the visitors table if it is missing."""
        await self.executor.execute(queries.CREATE_TABLE)
        return queries.TABLE_CREATED

    # ── CREATE ────────────────────────────────────────────

    async def add_new_visitor(self, visitor: Visitor) -> int:
        """
        Validate and insert a new visitor.

        Args:
            visitor: The Visitor to persist. Its `id` is ignored.

        Returns:
            The id the database assigned to the new row.

        Raises:
            ValidationError: If a field is invalid (nothing is written).
        """
        params = (
            visitor.name, visitor.age, visitor.date_of_visit,
            visitor.time_of_visit, visitor.assistant, visitor.comments,
        )
        validate_visitor(*params)

        result = await self.executor.execute(queries.ADD_NEW_VISITOR, params)
        visitor_id = result.rows[0]["id"]
        logger.info(f"Added visitor #{visitor_id}")
        return visitor_id

    # ── READ ──────────────────────────────────────────────

    async def list_all_visitors(self) -> list[dict]:
        """Return `{id, name}` for every visitor."""
        result = await self.executor.execute(queries.LIST_ALL_VISITORS)
        return result.rows

    async def view_visitor(self, visitor_id: int) -> list[dict]:
        """
        Fetch one visitor's full row.

        Returns:
            The matching rows as a list (a single row in practice).

        Raises:
            VisitorNotFound: If no row has this id.
        """
        await self._ensure_exists(visitor_id)
        result = await self.executor.execute(queries.VIEW_VISITOR, (visitor_id,))
        return result.rows

    async def view_last_visitor(self) -> int:
        """
        Return the id of the most recently inserted visitor (highest id).

        Raises:
            NoVisitorsFound: If the table is empty.
        """
        result = await self.executor.execute(queries.VIEW_LAST_VISITOR)
        if not result.rows:
            logger.warning("No visitors found for last-visitor lookup")
            raise NoVisitorsFound()
        return result.rows[0]["id"]

    # ── UPDATE ────────────────────────────────────────────

    async def update_visitor(
        self, visitor_id: int, column: Union[VisitorColumn, str], new_value: Any
    ) -> int:
        """
        Set one column of one visitor.

        Args:
            visitor_id: Primary key of the row to change.
            column: One of the six mutable columns.
            new_value: Value stored in that column.

        Returns:
            Number of rows updated.

        Raises:
            VisitorNotFound: If no row has this id.
            InvalidColumn: If `column` is not a mutable visitor column.
        """
        await self._ensure_exists(visitor_id)

        try:
            target = VisitorColumn(column)
        except ValueError:
            logger.warning(f"Rejected update of visitor #{visitor_id}: invalid column {column!r}")
            raise InvalidColumn(column) from None

        result = await self.executor.execute(
            queries.update_visitor(target), (new_value, visitor_id)
        )
        logger.info(f"Updated {target.value} of visitor #{visitor_id}")
        return result.row_count

    # ── DELETE ────────────────────────────────────────────

    async def delete_visitor(self, visitor_id: int) -> str:
        """
        Delete one visitor.

        Raises:
            VisitorNotFound: If no row has this id.
        """
        await self._ensure_exists(visitor_id)
        await self.executor.execute(queries.DELETE_VISITOR, (visitor_id,))
        logger.info(f"Deleted visitor #{visitor_id}")
        return queries.visitor_deleted(visitor_id)

    async def delete_all_visitors(self) -> str:
        """
        Delete every visitor.

        Raises:
            NoVisitors: If there is nothing to delete.
        """
        if not await self.list_all_visitors():
            logger.warning("Delete-all requested on an empty visitors table")
            raise NoVisitors()
        await self.executor.execute(queries.DELETE_ALL_VISITORS)
        logger.info("Deleted all visitors")
        return queries.ALL_VISITORS_DELETED

    # ── HELPERS ───────────────────────────────────────────

    async def _ensure_exists(self, visitor_id: int) -> None:
        result = await self.executor.execute(queries.VIEW_VISITOR, (visitor_id,))
        if not result.rows:
            logger.warning(f"Visitor #{visitor_id} not found")
            raise VisitorNotFound(visitor_id)
