"""Generic JSON value model.

Architecture:
    The ``data`` field of the common response envelope can hold any JSON
    shape. It is represented as a closed tagged union with one frozen
    dataclass per JSON kind:

    - JsonNull, JsonBool, JsonNumber, JsonString
    - JsonArray (ordered items)
    - JsonObject (string keys, key order irrelevant for equality)

Design Decisions:
    - Structural equality: two values are equal when their shapes are equal
    - Narrowing helpers raise TypeError so callers that expect a specific
      shape fail loudly instead of probing types ad hoc
    - bool is never a JsonNumber, even though bool subclasses int

See Also:
    - Envelope: carries a JsonValue in ``data``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar


class JsonValue(ABC):
    """Base of the closed JSON value union."""

    __slots__ = ()

    kind: ClassVar[str] = "value"

    @staticmethod
    def from_python(value: Any) -> JsonValue:
        """Build a JsonValue from a decoded JSON object graph."""
        if isinstance(value, JsonValue):
            return value
        if value is None:
            return JsonNull()
        if isinstance(value, bool):
            return JsonBool(value)
        if isinstance(value, (int, float)):
            return JsonNumber(value)
        if isinstance(value, str):
            return JsonString(value)
        if isinstance(value, Mapping):
            members: dict[str, JsonValue] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be strings, got {type(key).__name__}")
                members[key] = JsonValue.from_python(item)
            return JsonObject(members)
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return JsonArray(tuple(JsonValue.from_python(item) for item in value))
        raise TypeError(f"Cannot represent {type(value).__name__} as JSON")

    @abstractmethod
    def to_python(self) -> Any:
        """Convert back to plain Python (dict, list, str, int/float, bool, None)."""

    def _narrow(self, expected: type[JsonValue]) -> Any:
        if not isinstance(self, expected):
            raise TypeError(f"Expected JSON {expected.kind}, got {self.kind}")
        return self

    def as_object(self) -> Mapping[str, JsonValue]:
        return self._narrow(JsonObject).members

    def as_array(self) -> tuple[JsonValue, ...]:
        return self._narrow(JsonArray).items

    def as_str(self) -> str:
        return self._narrow(JsonString).value

    def as_number(self) -> int | float:
        return self._narrow(JsonNumber).value

    def as_bool(self) -> bool:
        return self._narrow(JsonBool).value

    def get(self, key: str, default: JsonValue | None = None) -> JsonValue | None:
        """Look up a member of a JSON object."""
        return self.as_object().get(key, default)


@dataclass(frozen=True)
class JsonNull(JsonValue):
    kind: ClassVar[str] = "null"

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class JsonBool(JsonValue):
    value: bool
    kind: ClassVar[str] = "bool"

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JsonNumber(JsonValue):
    value: int | float
    kind: ClassVar[str] = "number"

    def to_python(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class JsonString(JsonValue):
    value: str
    kind: ClassVar[str] = "string"

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonArray(JsonValue):
    items: tuple[JsonValue, ...] = ()
    kind: ClassVar[str] = "array"

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class JsonObject(JsonValue):
    members: Mapping[str, JsonValue] = field(default_factory=dict)
    kind: ClassVar[str] = "object"

    def to_python(self) -> dict[str, Any]:
        return {key: item.to_python() for key, item in self.members.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return dict(self.members) == dict(other.members)

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __len__(self) -> int:
        return len(self.members)
