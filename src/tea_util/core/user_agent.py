"""
User-Agent construction.

The default prefix is computed once at import and never mutated.
"""

import platform
import sys
from typing import Optional

from ..config import get_settings


def build_default_user_agent(
    core_version: Optional[str] = None, tea_dsl_version: Optional[str] = None
) -> str:
    """Build the platform prefix sent by every generated client."""
    settings = get_settings()
    return (
        f"AlibabaCloud ({sys.platform}; {platform.machine()}) "
        f"Python/{platform.python_version()} "
        f"Core/{core_version or settings.core_version} "
        f"TeaDSL/{tea_dsl_version or settings.tea_dsl_version}"
    )


DEFAULT_USER_AGENT = build_default_user_agent()


def get_user_agent(user_agent: Optional[str] = None) -> str:
    """Return the default User-Agent, with ``user_agent`` appended if given."""
    if user_agent:
        return f"{DEFAULT_USER_AGENT} {user_agent}"
    return DEFAULT_USER_AGENT
