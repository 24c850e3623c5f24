"""
Envelope decoding — turns raw response bytes into typed payloads.

Pure functions: the same bytes always decode to the same value.
"""

import json
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from backdrop_admin.errors import InvalidResponseError, ServerError
from backdrop_admin.models.envelope import ActionResult, ApiErrorBody, Envelope

UNKNOWN_ERROR = "Unknown error"


def _load_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidResponseError(f"Response is not valid JSON: {e}")


def parse_envelope(raw: bytes) -> Envelope:
    """Validate the envelope shape. `data` is dropped when success is false."""
    try:
        envelope = Envelope.model_validate(_load_json(raw))
    except ValidationError as e:
        raise InvalidResponseError("Malformed response envelope", details={"errors": e.errors()})
    if not envelope.success:
        envelope.data = None
    return envelope


def decode_envelope(raw: bytes, model: Any = None, *, require_data: bool = False) -> Any:
    """Decode `raw` and return its `data` validated against `model`.

    `model` may be any type pydantic can validate (a model class, `list[Block]`,
    `Page[ContentItem]`, ...). Without a model the JSON value is returned as-is.
    A successful envelope with no data yields None, or InvalidResponseError
    when `require_data` is set.
    """
    envelope = parse_envelope(raw)
    if not envelope.success:
        raise ServerError(envelope.message or UNKNOWN_ERROR)
    if envelope.data is None:
        if require_data:
            raise InvalidResponseError("Response contained no data")
        return None
    if model is None:
        return envelope.data
    try:
        return TypeAdapter(model).validate_python(envelope.data)
    except ValidationError as e:
        raise InvalidResponseError("Unexpected response data", details={"errors": e.errors()})


def decode_action(raw: bytes) -> ActionResult:
    """Decode a payload-less response into an ActionResult."""
    envelope = parse_envelope(raw)
    if not envelope.success:
        raise ServerError(envelope.message or UNKNOWN_ERROR)
    return ActionResult(success=True, message=envelope.message)


def decode_error_body(raw: bytes) -> Optional[ApiErrorBody]:
    """Parse the {error, message, code} body of a non-2xx response. Returns None if absent."""
    try:
        return ApiErrorBody.model_validate_json(raw)
    except ValidationError:
        return None
