"""Validation helpers for operation precondition checks.

Eliminates repeated validation boilerplate across the checkout components.
"""

from .errors import StateError, ValidationError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_not_empty(value: str, error_msg: str) -> str:
    """Require a non-blank string; return it stripped."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(error_msg)
    return value.strip()


def require_int(value: int, error_msg: str) -> None:
    """Require an integer (bools excluded)."""
    if not _is_int(value):
        raise ValidationError(error_msg)


def require_positive(value: int, error_msg: str) -> None:
    """Require an integer greater than zero."""
    if not _is_int(value) or value <= 0:
        raise ValidationError(error_msg)


def require_non_negative(value: int, error_msg: str) -> None:
    """Require an integer of zero or greater."""
    if not _is_int(value) or value < 0:
        raise ValidationError(error_msg)


def require_status(actual, expected, error_msg: str) -> None:
    """Require that the current status matches the expected value."""
    if actual != expected:
        raise StateError(error_msg)


def require_status_not(actual, forbidden, error_msg: str) -> None:
    """Require that the current status is NOT the forbidden value."""
    if actual == forbidden:
        raise StateError(error_msg)
