"""JSON helpers for structured values and shaped objects."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from selectorkit.config.settings import get_settings
from selectorkit.exceptions import DecodeError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def get_json(value: Any) -> str:
    """Return the compact JSON text of a structured value.

    Pydantic models are encoded through their ``model_dump``.

    Example::

        get_json([1, 2, 3])  # '[1,2,3]'
        get_json({"width": 10, "height": 20})  # '{"width":10,"height":20}'
    """
    sort_keys = get_settings().json_sort_keys
    return json.dumps(
        value, separators=(",", ":"), sort_keys=sort_keys, default=_encode_default
    )


def from_json(shape: type[T], text: str) -> T:
    """Decode ``text`` and attach the decoded fields to a new ``shape`` instance.

    The instance is created without running ``shape``'s initializer or
    validation, so its data fields are exactly those in the decoded
    object. Methods and properties of ``shape`` then work off those fields.
    Pydantic shapes keep undeclared keys only when the model allows extras.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Malformed JSON: {e}"
        raise DecodeError(msg) from e
    if not isinstance(data, dict):
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise DecodeError(msg)

    if issubclass(shape, BaseModel):
        # _fields_set is model_construct's own parameter, never a field name
        values = {k: v for k, v in data.items() if k != "_fields_set"}
        instance = shape.model_construct(set(values), **values)
    else:
        instance = shape.__new__(shape)
        for key, value in data.items():
            try:
                setattr(instance, key, value)
            except AttributeError as e:
                msg = f"{shape.__name__} cannot hold field {key!r}"
                raise DecodeError(msg) from e
    logger.debug("decoded", shape=shape.__name__, fields=sorted(data))
    return instance
