"""
Type assertions for values decoded from API responses.

Generated code trusts the response shape; a mismatch is a programming
error, so these raise TypeAssertionError instead of coercing.
"""

from typing import Any, Dict

from ..exceptions import TypeAssertionError


def _fail(value: Any, expected: str) -> TypeAssertionError:
    return TypeAssertionError(
        f"{value!r} is not a {expected}",
        {"expected": expected, "actual": type(value).__name__},
    )


def assert_as_map(value: Any) -> Dict[str, Any]:
    """Return the value if it is a dict, otherwise raise TypeAssertionError."""
    if not isinstance(value, dict):
        raise _fail(value, "map")
    return value


def assert_as_number(value: Any) -> int:
    """Return the value if it is an int, otherwise raise TypeAssertionError."""
    # bool subclasses int but is not a number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise _fail(value, "number")
    return value


def assert_as_boolean(value: Any) -> bool:
    """Return the value if it is a bool, otherwise raise TypeAssertionError."""
    if not isinstance(value, bool):
        raise _fail(value, "boolean")
    return value


def assert_as_string(value: Any) -> str:
    """Return the value if it is a str, otherwise raise TypeAssertionError."""
    if not isinstance(value, str):
        raise _fail(value, "string")
    return value
