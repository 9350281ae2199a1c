"""
Core pure functions for generated SDK clients.

Every function here is stateless and safe to call from any thread.
"""

from .optional import (
    default_string,
    default_number,
    empty,
    equal_string,
    equal_number,
    is_unset,
)

from .convert import (
    to_bytes,
    to_string,
    read_as_bytes,
    read_as_string,
    read_as_json,
)

from .json_utils import (
    to_jsonstring,
    parse_json,
    stringify_map_value,
    anyify_map_value,
)

from .assertions import (
    assert_as_map,
    assert_as_number,
    assert_as_boolean,
    assert_as_string,
)

from .form import to_form_string

from .status import is_2xx, is_3xx, is_4xx, is_5xx

from .user_agent import DEFAULT_USER_AGENT, build_default_user_agent, get_user_agent

from .runtime import (
    get_nonce,
    get_date_utcstring,
    validate_model,
    to_map,
)

__all__ = [
    # Optional values
    "default_string",
    "default_number",
    "empty",
    "equal_string",
    "equal_number",
    "is_unset",
    # Conversion
    "to_bytes",
    "to_string",
    "read_as_bytes",
    "read_as_string",
    "read_as_json",
    # JSON
    "to_jsonstring",
    "parse_json",
    "stringify_map_value",
    "anyify_map_value",
    # Assertions
    "assert_as_map",
    "assert_as_number",
    "assert_as_boolean",
    "assert_as_string",
    # Form encoding
    "to_form_string",
    # Status classes
    "is_2xx",
    "is_3xx",
    "is_4xx",
    "is_5xx",
    # User agent
    "DEFAULT_USER_AGENT",
    "build_default_user_agent",
    "get_user_agent",
    # Runtime
    "get_nonce",
    "get_date_utcstring",
    "validate_model",
    "to_map",
]
