"""
Pure functions for JSON serialisation and type sniffing.

``parse_json`` is best effort: it tries each interpretation in a fixed
order and falls back to None instead of raising.
"""

import json
import re
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..config import get_logger

logger = get_logger("json")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_jsonstring(value: Any) -> str:
    """Serialise a value as compact JSON, or "" if it cannot be serialised."""
    try:
        return json.dumps(
            value,
            default=_default,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        logger.debug("Cannot serialise %s: %s", type(value).__name__, e)
        return ""


def _parse_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        result = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None
    if result is None:
        # A JSON null decodes into an empty object.
        return {}
    if isinstance(result, dict):
        return result
    return None


def _parse_integer(text: str) -> Optional[int]:
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    number = int(text)
    if INT64_MIN <= number <= INT64_MAX:
        return number
    return None


def _parse_boolean(text: str) -> Optional[bool]:
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    return None


def _parse_float(text: str) -> Optional[float]:
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)


def parse_json(text: Optional[str]) -> Any:
    """Interpret a string as the most specific value it represents.

    Tries, in order: JSON object, 64-bit integer, boolean, float.
    Returns None when none of them match.
    """
    text = text or ""

    parsed_object = _parse_object(text)
    if parsed_object is not None:
        return parsed_object

    for parser in (_parse_integer, _parse_boolean, _parse_float):
        value = parser(text)
        if value is not None:
            return value

    logger.debug("No interpretation for %r", text[:64])
    return None


def stringify_map_value(mapping: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Convert map values to strings; strings are kept, others JSON encoded."""
    result = {}
    for key, value in (mapping or {}).items():
        if value is None:
            continue
        if isinstance(value, str):
            result[key] = value
        else:
            result[key] = to_jsonstring(value)
    return result


def anyify_map_value(mapping: Optional[Dict[str, Optional[str]]]) -> Dict[str, Any]:
    """Widen a string map, replacing None values with the empty string."""
    return {key: value or "" for key, value in (mapping or {}).items()}
