"""
Pure functions for optional values.

Generated clients model every field as optional; these helpers apply
defaults and compare values where ``None`` means "not provided".
"""

from typing import Any, Optional, Union

Number = Union[int, float]


def default_string(real: Optional[str], default: Optional[str]) -> Optional[str]:
    """Return ``real`` unless it is None, otherwise ``default``."""
    if real is None:
        return default
    return real


def default_number(
    real: Optional[Number], default: Optional[Number]
) -> Optional[Number]:
    """Return ``real`` unless it is None, otherwise ``default``."""
    if real is None:
        return default
    return real


def empty(value: Optional[str]) -> bool:
    """Check whether a string is None or empty."""
    return value is None or value == ""


def equal_string(first: Optional[str], second: Optional[str]) -> bool:
    """Compare two strings, treating None as the empty string."""
    return (first or "") == (second or "")


def equal_number(first: Optional[Number], second: Optional[Number]) -> bool:
    """Compare two numbers, treating None as zero."""
    return (first or 0) == (second or 0)


def is_unset(value: Any) -> bool:
    # An explicit zero value counts as set.
    return value is None
