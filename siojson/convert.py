"""Conversions between JSON text and raw JSON values."""

from __future__ import annotations

import base64
import json
import re
from typing import Any

from siojson.binary import is_binary

_NUMERIC = re.compile(r"[+-]?\d*\.?\d*")


def _encode_default(obj: Any) -> Any:
    if is_binary(obj):
        return base64.b64encode(bytes(obj)).decode("ascii")
    raise TypeError(f"cannot encode {type(obj).__name__} as JSON")


def _dump(value: Any) -> str:
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_encode_default
    )


def _parse(text: str) -> Any:
    """Parse JSON text with every number read as a double."""
    return json.loads(text, parse_int=float)


def to_json_string(value: Any) -> str:
    """Render a raw value as text.

    Null gives an empty string, a string is returned unchanged, numbers are
    printed with six decimals, booleans as ``1`` or ``0``, binary as base64,
    and arrays and objects as condensed JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return f"{float(value):f}"
    if is_binary(value):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (list, tuple, dict)):
        return _dump(value)
    raise TypeError(f"cannot render {type(value).__name__} as JSON text")


def _to_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def json_string_to_value(text: str) -> Any:
    """Guess the raw value a piece of text stands for.

    Empty text is null, numeric text a number, text starting with ``{`` an
    object, text starting with ``[`` that parses an array, ``true`` and
    ``false`` booleans, and anything else the text itself.
    """
    if not text:
        return None
    if _NUMERIC.fullmatch(text):
        return _to_number(text)
    if text.startswith("{"):
        return to_json_object(text)
    if text.startswith("["):
        try:
            parsed = _parse(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return parsed
    if text in ("true", "false"):
        return text == "true"
    return text


def json_string_to_array(text: str) -> list[Any]:
    """Parse a JSON array; anything else gives an empty list."""
    try:
        parsed = _parse(text)
    except ValueError:
        return []
    return parsed if isinstance(parsed, list) else []


def to_json_object(text: str) -> dict[str, Any]:
    """Parse a JSON object; anything else gives an empty object."""
    try:
        parsed = _parse(text)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def make_json_object() -> dict[str, Any]:
    """A new empty JSON object."""
    return {}