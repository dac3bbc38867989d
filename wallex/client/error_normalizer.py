"""Builds a NormalizedError from a non-2xx Wallex response body.

Wallex error bodies come in several incompatible shapes:

    {"success": false, "code": 1201, "message": "invalid API key format", "result": {}}
    {"detail": "missing required parameter"}
    {"message": "something went wrong"}
    {...undocumented fields...}

Instead of dispatching on the shape, two best-effort passes run over the same
payload and their results are merged: a typed pass over the documented
envelope keys, then a generic pass that records every top-level key as text.
Envelope keys are validated one at a time, so a mistyped ``code`` does not
cost the ``message``. Neither pass is allowed to fail the normalization.
"""

import json
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from wallex.client.models import NormalizedError
from wallex.types.base import ErrorResponse

_ENVELOPE_KEYS = ("message", "success", "code", "result")
_TOO_DEEP = "<nested too deeply>"


def normalize_error(status_code: int, body: bytes) -> NormalizedError:
    """Extract the most complete error description available from ``body``.

    Args:
        status_code: HTTP status of the response.
        body: Raw response body, JSON or not, possibly empty.

    Returns:
        A fully populated NormalizedError. ``message`` is never empty.
    """
    message = ""
    success = False
    code: int | None = None
    result: bytes | None = None
    fields: dict[str, tuple[str, ...]] = {}

    payload = _decode_object(body)

    envelope = _decode_envelope(payload)
    if "success" in envelope:
        success = envelope["success"]
    if envelope.get("message"):
        message = envelope["message"]
        fields["message"] = (message,)
    if envelope.get("code", 0) > 0:
        code = envelope["code"]
        fields["code"] = (str(code),)
    if envelope.get("result") is not None:
        result = _compact_json(envelope["result"])

    for key, value in payload.items():
        match value:
            case str():
                fields[key] = (value,)
                if key == "detail":
                    result = value.encode("utf-8")
                    if not message:
                        message = value
            case list():
                fields[key] = tuple(_render_text(item) for item in value)
            case _:
                fields[key] = (_render_text(value),)

    if not message:
        message = f"Wallex API error (status {status_code})"

    return NormalizedError(
        status_code=status_code,
        message=message,
        success=success,
        code=code,
        result=result,
        fields=MappingProxyType(fields),
    )


def _decode_object(body: bytes) -> dict[str, Any]:
    try:
        parsed = json.loads(body)
    except (ValueError, RecursionError):
        return {}
    if not isinstance(parsed, dict):
        return {}
    return parsed


def _decode_envelope(payload: dict[str, Any]) -> dict[str, Any]:
    """Validate each documented envelope key on its own against ErrorResponse.

    Keys that are absent, null or mistyped are left out.
    """
    envelope: dict[str, Any] = {}
    for key in _ENVELOPE_KEYS:
        if payload.get(key) is None:
            continue
        try:
            decoded = ErrorResponse.model_validate({key: payload[key]})
        except ValidationError:
            continue
        envelope[key] = getattr(decoded, key)
    return envelope


def _render_text(value: Any) -> str:
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case int() | float():
            return str(value)
        case _:
            try:
                return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
            except RecursionError:
                return _TOO_DEEP


def _compact_json(value: Any) -> bytes:
    try:
        rendered = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except RecursionError:
        rendered = _TOO_DEEP
    return rendered.encode("utf-8")
