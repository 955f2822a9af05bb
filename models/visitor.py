"""
models/visitor.py
-----------------
Domain model for visitor book entries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class VisitorColumn(str, Enum):
    """The visitor columns that may be changed after insert. `id` is never one of them."""

    NAME = "name"
    AGE = "age"
    DATE_OF_VISIT = "date_of_visit"
    TIME_OF_VISIT = "time_of_visit"
    ASSISTANT = "assistant"
    COMMENTS = "comments"


@dataclass
class Visitor:
    """
    Represents a single visit.

    Attributes:
        name: Visitor's name.
        age: Visitor's age in years.
        date_of_visit: Date of the visit (ISO text or a `date`).
        time_of_visit: Time of the visit (e.g. '10:30' or a `time`).
        assistant: Name of the staff member who helped the visitor.
        comments: Free-form note about the visit.
        id: Database primary key (None for new records).
    """
    name: Any
    age: Any
    date_of_visit: Any
    time_of_visit: Any
    assistant: Any
    comments: Any
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Visitor":
        """Build a Visitor from a full `visitors` result row."""
        return cls(
            id=row["id"],
            name=row["name"],
            age=row["age"],
            date_of_visit=row["date_of_visit"],
            time_of_visit=row["time_of_visit"],
            assistant=row["assistant"],
            comments=row["comments"],
        )
