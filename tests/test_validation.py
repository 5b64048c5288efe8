"""Tests for precondition helpers."""

import pytest

from checkout_engine.errors import StateError, ValidationError
from checkout_engine.models import SessionStatus
from checkout_engine.validation import (
    require_int,
    require_non_negative,
    require_not_empty,
    require_positive,
    require_status,
    require_status_not,
)


class TestRequireNotEmpty:
    """Tests for require_not_empty."""

    def test_returns_stripped_value(self) -> None:
        """Surrounding whitespace is removed."""
        assert require_not_empty("  P001 ", "empty") == "P001"

    @pytest.mark.parametrize("value", ["", "   ", None, 1, b"P001"])
    def test_rejects_blank_or_non_string(self, value) -> None:
        """Blank and non-string values are rejected."""
        with pytest.raises(ValidationError, match="empty"):
            require_not_empty(value, "empty")


class TestNumericChecks:
    """Tests for the integer helpers."""

    def test_positive(self) -> None:
        """Zero is not positive."""
        require_positive(1, "bad")
        with pytest.raises(ValidationError, match="bad"):
            require_positive(0, "bad")

    def test_non_negative(self) -> None:
        """Zero passes, negatives fail."""
        require_non_negative(0, "bad")
        with pytest.raises(ValidationError, match="bad"):
            require_non_negative(-1, "bad")

    @pytest.mark.parametrize("value", [1.5, 2.0, "2", None, True])
    def test_non_integers_rejected(self, value) -> None:
        """Floats, strings, None and bools are not integers."""
        with pytest.raises(ValidationError):
            require_positive(value, "bad")
        with pytest.raises(ValidationError):
            require_non_negative(value, "bad")
        with pytest.raises(ValidationError):
            require_int(value, "bad")

    def test_require_int_allows_negative(self) -> None:
        """Sign is not checked by require_int."""
        require_int(-3, "bad")


class TestStatusChecks:
    """Tests for the status helpers."""

    def test_require_status(self) -> None:
        """Mismatched status is a StateError."""
        require_status(SessionStatus.OPEN, SessionStatus.OPEN, "nope")
        with pytest.raises(StateError, match="nope"):
            require_status(SessionStatus.IDLE, SessionStatus.OPEN, "nope")

    def test_require_status_not(self) -> None:
        """Forbidden status is a StateError."""
        require_status_not(SessionStatus.IDLE, SessionStatus.OPEN, "nope")
        with pytest.raises(StateError, match="nope"):
            require_status_not(SessionStatus.OPEN, SessionStatus.OPEN, "nope")
