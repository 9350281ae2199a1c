"""
HTTP status-class predicates.

Ranges are half-open, so a status code belongs to at most one class.
A missing code is treated as 0 and belongs to none.
"""

from typing import Optional


def _in_range(code: Optional[int], low: int) -> bool:
    value = code or 0
    return low <= value < low + 100


def is_2xx(code: Optional[int]) -> bool:
    """Check whether a status code is a success (2xx)."""
    return _in_range(code, 200)


def is_3xx(code: Optional[int]) -> bool:
    """Check whether a status code is a redirection (3xx)."""
    return _in_range(code, 300)


def is_4xx(code: Optional[int]) -> bool:
    """Check whether a status code is a client error (4xx)."""
    return _in_range(code, 400)


def is_5xx(code: Optional[int]) -> bool:
    """Check whether a status code is a server error (5xx)."""
    return _in_range(code, 500)
