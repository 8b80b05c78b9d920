"""Common response envelope models."""

from __future__ import annotations

from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_serializer,
    field_validator,
)

from ..core.exceptions import DecodingError
from .json_value import JsonValue


class CommonResponse(BaseModel):
    """Fields shared by every StarDots response body.

    Subclasses narrow ``data`` to the shape a specific endpoint returns.
    """

    code: StrictInt
    message: StrictStr
    request_id: StrictStr = Field(..., alias="requestId")
    success: StrictBool
    timestamp: StrictInt

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def ok(self) -> bool:
        """Business operation succeeded."""
        return self.success and self.code == 0

    @classmethod
    def from_envelope(cls, envelope: Envelope) -> Self:
        """Narrow a decoded envelope into this response type.

        Raises:
            DecodingError: If ``data`` does not have the expected shape.
        """
        payload: dict[str, Any] = {
            "code": envelope.code,
            "message": envelope.message,
            "requestId": envelope.request_id,
            "success": envelope.success,
            "timestamp": envelope.timestamp,
        }
        if "data" in cls.model_fields and envelope.data is not None:
            payload["data"] = envelope.data.to_python()
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise DecodingError(str(exc)) from exc


class Envelope(CommonResponse):
    """Decoded response wrapper with schema-less ``data``."""

    data: JsonValue | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    @field_validator("data", mode="plain")
    @classmethod
    def wrap_data(cls, v: Any) -> JsonValue | None:
        """Wrap arbitrary decoded JSON; ``null`` means no data."""
        if v is None:
            return None
        try:
            return JsonValue.from_python(v)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @field_serializer("data")
    def unwrap_data(self, v: JsonValue | None) -> Any:
        return v.to_python() if v is not None else None
