"""
Custom exceptions for tea-util.
"""

from typing import Dict, Any, Optional


class TeaUtilError(Exception):
    """Base exception for utility errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TypeAssertionError(TeaUtilError, TypeError):
    """Raised when a value does not have the asserted type."""

    pass


class JSONParseError(TeaUtilError, ValueError):
    """Raised when a body cannot be decoded as JSON."""

    pass


class BodyReadError(TeaUtilError):
    """Raised when reading a response body fails."""

    pass


class ModelValidationError(TeaUtilError, ValueError):
    """Raised when a model fails validation."""

    pass
