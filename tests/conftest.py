"""Shared fixtures for the visitor registry tests."""

from unittest.mock import MagicMock

import pytest

from db import queries
from db.connection import QueryResult
from models.visitor import Visitor
from tests.helpers import make_executor


@pytest.fixture
def visitor() -> Visitor:
    return Visitor(
        name="John Doe",
        age=30,
        date_of_visit="2024-09-29",
        time_of_visit="10:30",
        assistant="Jane Smith",
        comments="No comments",
    )


@pytest.fixture
def existing_row() -> dict:
    return {
        "id": 1,
        "name": "John Doe",
        "age": 30,
        "date_of_visit": "2024-09-29",
        "time_of_visit": "10:30",
        "assistant": "Jane Smith",
        "comments": "No comments",
    }


@pytest.fixture
def populated_executor(existing_row) -> MagicMock:
    """Executor backed by a table holding a single visitor with id 1."""
    return make_executor({
        queries.ADD_NEW_VISITOR: QueryResult(rows=[existing_row], row_count=1),
        queries.VIEW_VISITOR: QueryResult(rows=[existing_row], row_count=1),
        queries.LIST_ALL_VISITORS: QueryResult(rows=[{"id": 1, "name": "John Doe"}], row_count=1),
        queries.VIEW_LAST_VISITOR: QueryResult(rows=[existing_row], row_count=1),
        queries.update_visitor("name"): QueryResult(row_count=1),
        queries.DELETE_VISITOR: QueryResult(row_count=1),
        queries.DELETE_ALL_VISITORS: QueryResult(row_count=1),
    })


@pytest.fixture
def empty_executor() -> MagicMock:
    """Executor backed by an empty table."""
    return make_executor()
