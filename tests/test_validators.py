"""Tests for validate_visitor."""

import pytest

from utils.exceptions import (
    InvalidAge,
    InvalidAssistant,
    InvalidComments,
    InvalidDateOfVisit,
    InvalidName,
    InvalidTimeOfVisit,
    ValidationError,
)
from utils.validators import validate_visitor

VALID = {
    "name": "John Doe",
    "age": 30,
    "date_of_visit": "2024-09-29",
    "time_of_visit": "10:30",
    "assistant": "Jane Smith",
    "comments": "comment",
}


def _validate(**overrides):
    validate_visitor(**{**VALID, **overrides})


class TestValidateVisitor:

    def test_valid_input_passes(self):
        assert validate_visitor("John Doe", 30, "2024-09-29", "10:30", "Jane Smith", "comment") is None

    @pytest.mark.parametrize(
        "field, value, error",
        [
            ("name", "", InvalidName),
            ("name", 123, InvalidName),
            ("name", "12345", InvalidName),
            ("name", None, InvalidName),
            ("age", None, InvalidAge),
            ("age", 0, InvalidAge),
            ("age", -5, InvalidAge),
            ("age", "30", InvalidAge),
            ("age", True, InvalidAge),
            ("age", float("nan"), InvalidAge),
            ("date_of_visit", "", InvalidDateOfVisit),
            ("date_of_visit", None, InvalidDateOfVisit),
            ("time_of_visit", "", InvalidTimeOfVisit),
            ("time_of_visit", None, InvalidTimeOfVisit),
            ("assistant", "", InvalidAssistant),
            ("assistant", 123, InvalidAssistant),
            ("assistant", "!!!", InvalidAssistant),
            ("comments", "", InvalidComments),
            ("comments", None, InvalidComments),
            ("comments", 123, InvalidComments),
        ],
    )
    def test_single_invalid_field(self, field, value, error):
        with pytest.raises(error) as exc_info:
            _validate(**{field: value})
        assert exc_info.value.field == field
        assert isinstance(exc_info.value, ValidationError)

    def test_name_needs_only_one_letter(self):
        _validate(name="R2-D2")

    def test_fractional_age_is_accepted(self):
        _validate(age=4.5)

    def test_first_violation_wins(self):
        with pytest.raises(InvalidAge):
            _validate(age=-1, date_of_visit="", assistant="", comments=None)

        with pytest.raises(InvalidName):
            _validate(name="", age=-1)

        with pytest.raises(InvalidTimeOfVisit):
            _validate(time_of_visit="", assistant=5)

    def test_messages_are_readable(self):
        with pytest.raises(InvalidComments, match="Invalid 'comments': must be a string."):
            _validate(comments=123)
