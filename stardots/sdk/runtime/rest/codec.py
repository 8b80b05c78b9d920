"""Envelope decoding and request body encoding."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from ...core.exceptions import DecodingError, EncodingError
from ...models.envelope import Envelope


def decode_envelope(raw: bytes | str) -> Envelope:
    """Decode a response body into the common envelope.

    Raises:
        DecodingError: Body is not JSON, or code/message/requestId/success/
            timestamp are absent or mistyped.
    """
    try:
        return Envelope.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodingError(str(exc)) from exc


def encode_request_body(params: BaseModel | Mapping[str, Any]) -> bytes:
    """Serialize outbound parameters to compact JSON using wire names.

    Raises:
        EncodingError: The object graph cannot be represented in JSON.
    """
    if isinstance(params, BaseModel):
        try:
            return params.model_dump_json(by_alias=True).encode()
        except (TypeError, ValueError) as exc:
            raise EncodingError(str(exc)) from exc
    try:
        return json.dumps(params, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode()
    except (TypeError, ValueError) as exc:
        raise EncodingError(str(exc)) from exc
