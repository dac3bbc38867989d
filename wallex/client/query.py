"""Encodes request payloads into query parameters or JSON bodies.

Payloads are pydantic models (encoded by alias, ``None`` fields dropped) or
plain mappings.
"""

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

QueryParams = dict[str, str | list[str]]


def to_query_params(payload: BaseModel | Mapping[str, Any]) -> QueryParams:
    """Flatten a payload into URL query parameters.

    Raises:
        TypeError: if the payload or one of its values cannot be rendered.
    """
    params: QueryParams = {}
    for key, value in _dump(payload).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params[key] = [_render_param(item) for item in value]
        else:
            params[key] = _render_param(value)
    return params


def to_json_body(payload: BaseModel | Mapping[str, Any]) -> bytes:
    """Serialize a payload into a JSON request body.

    Raises:
        TypeError, ValueError: if the payload cannot be serialized.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    if isinstance(payload, Mapping):
        return json.dumps(dict(payload)).encode("utf-8")
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


def _dump(payload: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


def _render_param(value: Any) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int() | float() | Decimal():
            return str(value)
        case _:
            raise TypeError(f"Unsupported query parameter value: {value!r}")
