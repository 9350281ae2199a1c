"""
Pure functions for bytes and string conversion.

Readers accept anything with a ``read()`` method (``httpx.Response``,
file objects, ``io.BytesIO``) as well as raw ``bytes`` or ``str`` bodies.
"""

import json
from typing import Any, Optional, Union

import httpx

from ..config import get_logger
from ..exceptions import BodyReadError, JSONParseError

logger = get_logger("convert")

# bytes, str or any object with a read() method
Body = Any


def to_bytes(text: Optional[str]) -> bytes:
    """Encode a string as UTF-8, None gives empty bytes."""
    return (text or "").encode("utf-8")


def to_string(data: Optional[Union[bytes, bytearray]]) -> str:
    """Decode UTF-8 bytes, None gives the empty string."""
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


def read_as_bytes(body: Body) -> bytes:
    """Read an entire body into bytes."""
    if body is None:
        return b""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")

    read = getattr(body, "read", None)
    if not callable(read):
        raise BodyReadError(
            f"Unreadable body of type {type(body).__name__}",
            {"type": type(body).__name__},
        )

    try:
        data = read()
    except (OSError, httpx.StreamError) as e:
        raise BodyReadError(f"Failed to read body: {e}") from e

    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data or b"")


def read_as_string(body: Body) -> str:
    """Read an entire body and decode it as UTF-8."""
    return to_string(read_as_bytes(body))


def read_as_json(body: Body) -> Any:
    """Read an entire body and decode it as JSON.

    An empty body gives None. Malformed JSON raises JSONParseError.
    """
    text = read_as_string(body)
    if text == "":
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Body is not valid JSON: %s", e)
        raise JSONParseError(
            f"Invalid JSON body: {e.msg}", {"position": e.pos}
        ) from e
    except RecursionError as e:
        logger.debug("Body nests too deeply to decode")
        raise JSONParseError("Invalid JSON body: nesting too deep") from e
