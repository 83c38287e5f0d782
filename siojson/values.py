"""A handle on one raw JSON value, with typed accessors."""

from __future__ import annotations

import enum
import logging
import re
from typing import TYPE_CHECKING, Any, Iterable

from siojson.binary import binary_of, is_binary
from siojson.convert import json_string_to_value, to_json_string

if TYPE_CHECKING:
    from siojson.jsonobject import JsonObject

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*")
_TRUE_WORDS = frozenset({"true", "yes", "on"})


class JsonType(enum.Enum):
    """The kind of value a JsonValue holds."""

    NONE = 0
    NULL = 1
    NUMBER = 2
    STRING = 3
    BOOLEAN = 4
    ARRAY = 5
    OBJECT = 6
    BINARY = 7


_TYPE_NAMES = {
    JsonType.NONE: "None",
    JsonType.NULL: "Null",
    JsonType.NUMBER: "Number",
    JsonType.STRING: "String",
    JsonType.BINARY: "String",
    JsonType.BOOLEAN: "Boolean",
    JsonType.ARRAY: "Array",
    JsonType.OBJECT: "Object",
}

_MISSING = object()


def _raw_type(raw: Any) -> JsonType:
    if raw is _MISSING:
        return JsonType.NONE
    if raw is None:
        return JsonType.NULL
    if isinstance(raw, bool):
        return JsonType.BOOLEAN
    if isinstance(raw, (int, float)):
        return JsonType.NUMBER
    if isinstance(raw, str):
        return JsonType.STRING
    if is_binary(raw):
        return JsonType.BINARY
    if isinstance(raw, list):
        return JsonType.ARRAY
    if isinstance(raw, dict):
        return JsonType.OBJECT
    return JsonType.NONE


class JsonValue:
    """Wraps a raw JSON value; created without an argument it holds no value."""

    def __init__(self, value: Any = _MISSING) -> None:
        self._raw = value

    @property
    def value(self) -> Any:
        """The raw value, or None when there is none."""
        return None if self._raw is _MISSING else self._raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._raw is other._raw or self._raw == other._raw

    def __repr__(self) -> str:
        if self._raw is _MISSING:
            return "JsonValue()"
        return f"JsonValue({self._raw!r})"

    @classmethod
    def number(cls, number: float) -> JsonValue:
        return cls(float(number))

    @classmethod
    def string(cls, text: str) -> JsonValue:
        return cls(str(text))

    @classmethod
    def boolean(cls, flag: bool) -> JsonValue:
        return cls(bool(flag))

    @classmethod
    def array(cls, values: Iterable[JsonValue]) -> JsonValue:
        return cls([item.value for item in values])

    @classmethod
    def object(cls, json_object: JsonObject) -> JsonValue:
        """A value sharing the fields of a JsonObject."""
        return cls(json_object.values)

    @classmethod
    def binary(cls, data: bytes) -> JsonValue:
        return cls(bytes(data))

    @classmethod
    def from_json_string(cls, text: str) -> JsonValue:
        """The value the text stands for, guessed from its shape."""
        return cls(json_string_to_value(text))

    def type(self) -> JsonType:
        return _raw_type(self._raw)

    def type_name(self) -> str:
        return _TYPE_NAMES[self.type()]

    def is_null(self) -> bool:
        return self._raw is _MISSING or self._raw is None

    def _misuse(self, wanted: str) -> None:
        logger.error("Json Value of type '%s' used as a '%s'.", self.type_name(), wanted)

    def as_number(self) -> float:
        kind = self.type()
        if kind is JsonType.NONE:
            self._misuse("Number")
            return 0.0
        if kind is JsonType.NUMBER:
            return float(self._raw)
        if kind is JsonType.BOOLEAN:
            return 1.0 if self._raw else 0.0
        if kind is JsonType.STRING and _NUMERIC.fullmatch(self._raw):
            return float(self._raw)
        self._misuse("Number")
        return 0.0

    def as_string(self) -> str:
        """The text of a string; other values are rendered as JSON text."""
        if self._raw is _MISSING:
            self._misuse("String")
            return ""
        if isinstance(self._raw, str):
            return self._raw
        return self.encode_json()

    def as_bool(self) -> bool:
        kind = self.type()
        if kind is JsonType.BOOLEAN:
            return self._raw
        if kind is JsonType.NUMBER:
            return self._raw != 0
        if kind is JsonType.STRING:
            text = self._raw.strip().lower()
            if text in _TRUE_WORDS:
                return True
            return bool(_NUMERIC.fullmatch(text)) and float(text) != 0
        self._misuse("Boolean")
        return False

    def as_array(self) -> list[JsonValue]:
        if isinstance(self._raw, list):
            return [JsonValue(item) for item in self._raw]
        self._misuse("Array")
        return []

    def as_object(self) -> JsonObject | None:
        """A JsonObject sharing this value's fields, or None for non-objects."""
        from siojson.jsonobject import JsonObject

        if isinstance(self._raw, dict):
            return JsonObject(self._raw)
        self._misuse("Object")
        return None

    def as_binary(self) -> bytes:
        """Binary payloads as they are, strings read as hex, anything else empty."""
        kind = self.type()
        if kind is JsonType.NONE:
            self._misuse("Binary")
            return b""
        if kind is JsonType.BINARY:
            return binary_of(self._raw)
        if kind is JsonType.STRING:
            text = self._raw
            try:
                return bytes.fromhex(text[: len(text) // 2 * 2])
            except ValueError:
                return b""
        return b""

    def encode_json(self) -> str:
        if self._raw is _MISSING:
            return ""
        return to_json_string(self._raw)