"""
utils/validators.py
-------------------
Shape checks for a visitor record before it is written.
"""

import math
import re

from utils.exceptions import (
    InvalidAge,
    InvalidAssistant,
    InvalidComments,
    InvalidDateOfVisit,
    InvalidName,
    InvalidTimeOfVisit,
)

_LETTER = re.compile(r"[a-zA-Z]")


def _has_letter(value) -> bool:
    return bool(value) and isinstance(value, str) and _LETTER.search(value) is not None


def _is_positive_number(value) -> bool:
    # bool is an int subclass but never a valid age
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return value > 0


def validate_visitor(name, age, date_of_visit, time_of_visit, assistant, comments) -> None:
    """
    Validate the six writable visitor fields.

    Fields are checked in a fixed order and the first failure is raised:
    name, age, date_of_visit, time_of_visit, assistant, comments.

    Raises:
        InvalidName, InvalidAge, InvalidDateOfVisit, InvalidTimeOfVisit,
        InvalidAssistant, InvalidComments
    """
    if not _has_letter(name):
        raise InvalidName()

    if not _is_positive_number(age):
        raise InvalidAge()

    if not date_of_visit:
        raise InvalidDateOfVisit()

    if not time_of_visit:
        raise InvalidTimeOfVisit()

    if not _has_letter(assistant):
        raise InvalidAssistant()

    # An empty string is rejected too; callers store a placeholder instead.
    if not comments or not isinstance(comments, str):
        raise InvalidComments()
