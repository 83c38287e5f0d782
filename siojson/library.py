"""Helper functions: percent and base64 encoding, JSON arrays, quick URL calls."""

from __future__ import annotations

import base64
import binascii
from typing import Callable, Optional

from siojson.convert import json_string_to_array
from siojson.jsonobject import JsonObject
from siojson.request import JsonRequest, RequestContentType, RequestVerb
from siojson.values import JsonValue

_PERCENT_TABLE = str.maketrans(
    {
        " ": "%20",
        "!": "%21",
        '"': "%22",
        "#": "%23",
        "$": "%24",
        "&": "%26",
        "'": "%27",
        "(": "%28",
        ")": "%29",
        "*": "%2A",
        "+": "%2B",
        ",": "%2C",
        "/": "%2F",
        ":": "%3A",
        ";": "%3B",
        "=": "%3D",
        "?": "%3F",
        "@": "%40",
        "[": "%5B",
        "]": "%5D",
        "{": "%7B",
        "}": "%7D",
    }
)


def percent_encode(source: str) -> str:
    """Percent-encode the reserved characters of a URL component."""
    return source.translate(_PERCENT_TABLE)


def base64_encode(text: str) -> str:
    """Base64 of the UTF-8 bytes of text."""
    return base64_encode_bytes(text.encode("utf-8"))


def base64_encode_bytes(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode_bytes(source: str) -> bytes:
    """Decode base64 text; raise ValueError when it is not valid base64."""
    try:
        return base64.b64decode(source, validate=True)
    except binascii.Error as error:
        raise ValueError(f"invalid base64: {source!r}") from error


def base64_decode(source: str) -> str:
    """Decode base64 text holding UTF-8; raise ValueError when it cannot."""
    return base64_decode_bytes(source).decode("utf-8")


def string_to_json_value_array(text: str) -> list[JsonValue]:
    """The elements of a JSON array; anything else gives an empty list."""
    return [JsonValue(item) for item in json_string_to_array(text)]


def call_url(
    url: str,
    verb: RequestVerb = RequestVerb.GET,
    content_type: RequestContentType = RequestContentType.X_WWW_FORM_URLENCODED_URL,
    json_object: Optional[JsonObject] = None,
    callback: Optional[Callable[[JsonRequest], None]] = None,
) -> JsonRequest:
    """Send json_object to url and call callback once, on success or failure."""
    request = JsonRequest(verb, content_type)
    request.request_object = json_object if json_object is not None else JsonObject()

    def finished(done: JsonRequest) -> None:
        request.on_request_complete.remove(finished)
        request.on_request_fail.remove(finished)
        if callback is not None:
            callback(done)

    request.on_request_complete.append(finished)
    request.on_request_fail.append(finished)
    request.reset_response_data()
    request.process_url(url)
    return request