"""A JSON object with typed field accessors."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

from siojson.binary import binary_of
from siojson.convert import to_json_string
from siojson.values import JsonType, JsonValue

logger = logging.getLogger(__name__)


def _is_number(raw: Any) -> bool:
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


class JsonObject:
    """Named fields holding raw JSON values."""

    def __init__(self, values: Optional[dict[str, Any]] = None) -> None:
        self.values: dict[str, Any] = {} if values is None else values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self.values == other.values

    def __repr__(self) -> str:
        return f"JsonObject({self.values!r})"

    def reset(self) -> None:
        """Drop all fields."""
        self.values = {}

    def encode_json(self) -> str:
        return to_json_string(self.values)

    def encode_json_to_single_string(self) -> str:
        return self.encode_json().replace("\r", "").replace("\n", "").replace("\t", "")

    def decode_json(self, text: str) -> bool:
        """Replace the fields with those of a JSON object; clear them on failure."""
        try:
            parsed = json.loads(text, parse_int=float)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            self.values = parsed
            return True
        self.reset()
        logger.error("Json decoding failed for: %s", text)
        return False

    def field_names(self) -> list[str]:
        return list(self.values)

    def has_field(self, name: str) -> bool:
        return bool(name) and name in self.values

    def remove_field(self, name: str) -> None:
        if name:
            self.values.pop(name, None)

    def get_field(self, name: str) -> Optional[JsonValue]:
        if not name or name not in self.values:
            return None
        return JsonValue(self.values[name])

    def set_field(self, name: str, value: JsonValue) -> None:
        if name:
            self.values[name] = value.value

    def _missing(self, name: str, kind: str) -> None:
        logger.warning("No field with name %s of type %s", name, kind)

    def get_number_field(self, name: str) -> float:
        raw = self.values.get(name)
        if not _is_number(raw):
            self._missing(name, "Number")
            return 0.0
        return float(raw)

    def set_number_field(self, name: str, number: float) -> None:
        if name:
            self.values[name] = float(number)

    def get_string_field(self, name: str) -> str:
        raw = self.values.get(name)
        if not isinstance(raw, str):
            self._missing(name, "String")
            return ""
        return raw

    def set_string_field(self, name: str, text: str) -> None:
        if name:
            self.values[name] = str(text)

    def get_bool_field(self, name: str) -> bool:
        raw = self.values.get(name)
        if not isinstance(raw, bool):
            self._missing(name, "Boolean")
            return False
        return raw

    def set_bool_field(self, name: str, flag: bool) -> None:
        if name:
            self.values[name] = bool(flag)

    def _array(self, name: str) -> list[Any]:
        raw = self.values.get(name)
        if not isinstance(raw, list):
            self._missing(name, "Array")
            return []
        return raw if name else []

    def get_array_field(self, name: str) -> list[JsonValue]:
        return [JsonValue(item) for item in self._array(name)]

    def set_array_field(self, name: str, values: Iterable[JsonValue]) -> None:
        """Store copies of the values; empty and binary values are left out."""
        if not name:
            return
        copied: list[Any] = []
        for item in values:
            kind = item.type()
            if kind in (JsonType.NONE, JsonType.BINARY):
                continue
            raw = item.value
            copied.append(list(raw) if kind is JsonType.ARRAY else raw)
        self.values[name] = copied

    def merge_json_object(self, other: JsonObject, overwrite: bool) -> None:
        """Copy the other object's fields in, keeping existing ones unless overwrite."""
        for key in other.field_names():
            if not overwrite and self.has_field(key):
                continue
            field_value = other.get_field(key)
            if field_value is not None:
                self.set_field(key, field_value)

    def get_object_field(self, name: str) -> Optional[JsonObject]:
        """The object under name, sharing its fields, or None."""
        raw = self.values.get(name)
        if not isinstance(raw, dict):
            self._missing(name, "Object")
            return None
        return JsonObject(raw)

    def set_object_field(self, name: str, other: JsonObject) -> None:
        if name:
            self.values[name] = other.values

    def get_binary_field(self, name: str) -> bytes:
        """Binary payloads as they are, strings decoded as base64, else empty."""
        raw = self.values.get(name)
        if not isinstance(raw, str):
            self._missing(name, "String")
        if name not in self.values:
            logger.warning("JsonValue is null for %s, aborting parse.", name)
            return b""
        return binary_of(raw)

    def set_binary_field(self, name: str, data: bytes) -> None:
        if name:
            self.values[name] = bytes(data)

    def _typed_items(self, name: str, check: Any, kind: str) -> list[JsonValue]:
        items = []
        for raw in self._array(name):
            if not check(raw):
                logger.error("Not %s element in array with field name %s", kind, name)
            items.append(JsonValue(raw))
        return items

    def get_number_array_field(self, name: str) -> list[float]:
        return [item.as_number() for item in self._typed_items(name, _is_number, "Number")]

    def set_number_array_field(self, name: str, numbers: Iterable[float]) -> None:
        if name:
            self.values[name] = [float(number) for number in numbers]

    def get_string_array_field(self, name: str) -> list[str]:
        items = self._typed_items(name, lambda raw: isinstance(raw, str), "String")
        return [item.as_string() for item in items]

    def set_string_array_field(self, name: str, strings: Iterable[str]) -> None:
        if name:
            self.values[name] = [str(text) for text in strings]

    def get_bool_array_field(self, name: str) -> list[bool]:
        items = self._typed_items(name, lambda raw: isinstance(raw, bool), "Boolean")
        return [item.as_bool() for item in items]

    def set_bool_array_field(self, name: str, flags: Iterable[bool]) -> None:
        if name:
            self.values[name] = [bool(flag) for flag in flags]

    def get_object_array_field(self, name: str) -> list[JsonObject]:
        """Objects sharing the array's elements; non-objects become empty objects."""
        objects = []
        for raw in self._array(name):
            if isinstance(raw, dict):
                objects.append(JsonObject(raw))
            else:
                logger.error("Not Object element in array with field name %s", name)
                objects.append(JsonObject())
        return objects

    def set_object_array_field(self, name: str, objects: Iterable[JsonObject]) -> None:
        if name:
            self.values[name] = [obj.values for obj in objects]