"""
Form and query string encoding.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote_plus

from .json_utils import to_jsonstring


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return to_jsonstring(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


def to_form_string(mapping: Optional[Dict[str, Any]]) -> str:
    """Encode a map as ``application/x-www-form-urlencoded`` text.

    Pairs keep the mapping's order. None values are skipped.
    """
    if not mapping:
        return ""

    pairs = []
    for key, value in mapping.items():
        if value is None:
            continue
        pairs.append(
            f"{quote_plus(str(key), safe='')}={quote_plus(_format_value(value), safe='')}"
        )
    return "&".join(pairs)
