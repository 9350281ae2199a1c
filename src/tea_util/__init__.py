"""
tea-util

Stateless helper functions used by generated SDK clients.
"""

from .core import (
    default_string,
    default_number,
    empty,
    equal_string,
    equal_number,
    is_unset,
    to_bytes,
    to_string,
    read_as_bytes,
    read_as_string,
    read_as_json,
    to_jsonstring,
    parse_json,
    stringify_map_value,
    anyify_map_value,
    assert_as_map,
    assert_as_number,
    assert_as_boolean,
    assert_as_string,
    to_form_string,
    is_2xx,
    is_3xx,
    is_4xx,
    is_5xx,
    DEFAULT_USER_AGENT,
    get_user_agent,
    get_nonce,
    get_date_utcstring,
    validate_model,
    to_map,
)
from .models import RuntimeOptions
from .config import Settings, get_settings
from .exceptions import (
    TeaUtilError,
    TypeAssertionError,
    JSONParseError,
    BodyReadError,
    ModelValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "default_string",
    "default_number",
    "empty",
    "equal_string",
    "equal_number",
    "is_unset",
    "to_bytes",
    "to_string",
    "read_as_bytes",
    "read_as_string",
    "read_as_json",
    "to_jsonstring",
    "parse_json",
    "stringify_map_value",
    "anyify_map_value",
    "assert_as_map",
    "assert_as_number",
    "assert_as_boolean",
    "assert_as_string",
    "to_form_string",
    "is_2xx",
    "is_3xx",
    "is_4xx",
    "is_5xx",
    "DEFAULT_USER_AGENT",
    "get_user_agent",
    "get_nonce",
    "get_date_utcstring",
    "validate_model",
    "to_map",
    "RuntimeOptions",
    "Settings",
    "get_settings",
    "TeaUtilError",
    "TypeAssertionError",
    "JSONParseError",
    "BodyReadError",
    "ModelValidationError",
]
