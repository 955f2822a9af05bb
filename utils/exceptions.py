"""
utils/exceptions.py
-------------------
Domain errors raised by the validator and the visitor repository.
Each error keeps its structured fields next to a readable `message`.
Database driver errors are not part of this hierarchy; they propagate as-is.
"""

from typing import Any


class VisitorError(Exception):
    """Base class for every visitor-domain failure."""

    message: str = "Visitor operation failed."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# ── Validation ────────────────────────────────────────────

class ValidationError(VisitorError):
    """A visitor field failed validation. Raised before any query runs."""

    field: str = ""


class InvalidName(ValidationError):
    field = "name"
    message = "Invalid 'name': must be a non-empty string of letters only."


class InvalidAge(ValidationError):
    field = "age"
    message = "Invalid 'age': must be a number."


class InvalidDateOfVisit(ValidationError):
    field = "date_of_visit"
    message = "Invalid 'dateOfVisit': must be nonempty."


class InvalidTimeOfVisit(ValidationError):
    field = "time_of_visit"
    message = "Invalid 'timeOfVisit': must be nonempty."


class InvalidAssistant(ValidationError):
    field = "assistant"
    message = "Invalid 'assistant': must be a non-empty string."


class InvalidComments(ValidationError):
    field = "comments"
    message = "Invalid 'comments': must be a string."


# ── Lookup ────────────────────────────────────────────────

class VisitorNotFound(VisitorError):
    """No row exists for the requested id."""

    def __init__(self, visitor_id: Any):
        self.visitor_id = visitor_id
        super().__init__(f"Visitor with {visitor_id} not found.")


class EmptyCollectionError(VisitorError):
    """The visitors table holds no rows."""


class NoVisitors(EmptyCollectionError):
    message = "No visitors to delete."


class NoVisitorsFound(EmptyCollectionError):
    message = "No visitors found."


# ── Update ────────────────────────────────────────────────

class InvalidColumn(VisitorError):
    """Update targeted a column outside the mutable visitor columns."""

    def __init__(self, column: Any):
        self.column = column
        super().__init__(f"Invalid column name: {column}")
