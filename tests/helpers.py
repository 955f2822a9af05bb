"""Test doubles shared across test modules."""

from unittest.mock import MagicMock

from db.connection import QueryExecutor, QueryResult


def make_executor(responses: dict | None = None) -> MagicMock:
    """
    Build a stand-in for QueryExecutor.

    `responses` maps statement text to the QueryResult it returns; any other
    statement returns an empty result. `execute` is an AsyncMock, so awaited
    calls can be asserted.
    """
    responses = responses or {}

    async def _execute(sql, params=None):
        return responses.get(sql, QueryResult())

    executor = MagicMock(spec=QueryExecutor)
    executor.execute.side_effect = _execute
    return executor
