"""
Runtime helpers for request construction: nonces, HTTP dates,
model validation and model-to-map conversion.
"""

import dataclasses
import uuid
from email.utils import formatdate
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError

from ..config import get_logger
from ..exceptions import ModelValidationError

logger = get_logger("runtime")


def get_nonce() -> str:
    """Return a random 32 character hex nonce."""
    return uuid.uuid4().hex


def get_date_utcstring() -> str:
    """Return the current time as an HTTP date, e.g. ``Mon, 02 Jan 2006 15:04:05 GMT``."""
    return formatdate(usegmt=True)


def validate_model(model: Any) -> None:
    """Validate a request model, raising ModelValidationError on failure."""
    if model is None:
        return

    if isinstance(model, BaseModel):
        try:
            type(model).model_validate(model.model_dump(by_alias=True))
        except ValidationError as e:
            logger.debug("%s failed validation: %s", type(model).__name__, e)
            raise ModelValidationError(
                f"{type(model).__name__} is invalid",
                {"errors": e.errors(include_url=False)},
            ) from e
        return

    validate = getattr(model, "validate", None)
    if callable(validate):
        try:
            validate()
        except (TypeError, ValueError) as e:
            raise ModelValidationError(str(e)) from e


def to_map(obj: Any) -> Optional[Dict[str, Any]]:
    """Convert a model to a plain dict keyed by wire names."""
    if obj is None:
        return None
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, exclude_none=True)
    if isinstance(obj, dict):
        return dict(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)

    convert = getattr(obj, "to_map", None)
    if callable(convert):
        return convert()

    raise TypeError(f"Cannot convert {type(obj).__name__} to a map")
