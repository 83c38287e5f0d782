"""HTTP requests that send and receive JSON objects."""

from __future__ import annotations

import enum
import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from siojson.jsonobject import JsonObject
from siojson.values import JsonValue

logger = logging.getLogger(__name__)

DEFAULT_BINARY_CONTENT_TYPE = "application/octet-stream"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

RequestCallback = Callable[["JsonRequest"], None]
HeaderSource = Union[Mapping[str, str], Iterable[str]]


class RequestVerb(enum.Enum):
    """The HTTP method of a request."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DEL = "DELETE"
    CUSTOM = "CUSTOM"


class RequestContentType(enum.Enum):
    """How the request data is sent."""

    X_WWW_FORM_URLENCODED_URL = "x_www_form_urlencoded_url"
    X_WWW_FORM_URLENCODED_BODY = "x_www_form_urlencoded_body"
    JSON = "json"
    BINARY = "binary"


@dataclass
class PreparedRequest:
    """Everything needed to put one request on the wire."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


def _form_params(request_object: JsonObject, first_separator: str) -> str:
    # Imported here: the library module imports this one.
    from siojson.library import percent_encode

    parts = []
    for index, (key, raw) in enumerate(request_object.values.items()):
        value = JsonValue(raw).as_string()
        if key and value:
            parts.append(first_separator if index == 0 else "&")
            parts.append(f"{percent_encode(key)}={percent_encode(value)}")
    return "".join(parts)


class JsonRequest:
    """A request carrying a JSON object and collecting a JSON response."""

    def __init__(
        self,
        verb: RequestVerb = RequestVerb.GET,
        content_type: RequestContentType = RequestContentType.X_WWW_FORM_URLENCODED_URL,
    ) -> None:
        self.verb = verb
        self.content_type = content_type
        self.custom_verb = ""
        self.binary_content_type = DEFAULT_BINARY_CONTENT_TYPE
        self.request_bytes = b""
        self.request_headers: dict[str, str] = {}
        self.should_have_binary_response = False
        self.on_process_url_complete: Optional[Callable[[bytes], None]] = None
        self.continuation: Optional[Callable[[JsonObject], None]] = None
        self.on_request_complete: list[RequestCallback] = []
        self.on_request_fail: list[RequestCallback] = []
        self.tags: list[str] = []
        self.timeout = 30.0
        self.request_object = JsonObject()
        self.response_object = JsonObject()
        self.reset_data()

    def set_header(self, name: str, value: str) -> None:
        self.request_headers[name] = value

    # Reset

    def reset_data(self) -> None:
        self.reset_request_data()
        self.reset_response_data()

    def reset_request_data(self) -> None:
        self.request_object.reset()
        self.url = ""

    def reset_response_data(self) -> None:
        self.response_object.reset()
        self.response_headers: dict[str, str] = {}
        self.response_code = -1
        self.response_content = ""
        self.result_binary_data = b""
        self.is_valid_json_response = False

    def cancel(self) -> None:
        """Forget the pending continuation and any response data."""
        self.continuation = None
        self.reset_response_data()

    # Sending

    def _method(self) -> str:
        if self.verb is RequestVerb.CUSTOM:
            return self.custom_verb
        return self.verb.value

    def prepare(self, url: str) -> PreparedRequest:
        """Build the method, URL, headers and body this request would send."""
        prepared = PreparedRequest(method=self._method(), url=url)
        if self.content_type is RequestContentType.X_WWW_FORM_URLENCODED_URL:
            prepared.headers["Content-Type"] = FORM_CONTENT_TYPE
            prepared.url = url + _form_params(self.request_object, "?")
        elif self.content_type is RequestContentType.X_WWW_FORM_URLENCODED_BODY:
            prepared.headers["Content-Type"] = FORM_CONTENT_TYPE
            prepared.body = _form_params(self.request_object, "").encode("utf-8")
        elif self.content_type is RequestContentType.BINARY:
            prepared.headers["Content-Type"] = self.binary_content_type
            prepared.body = bytes(self.request_bytes)
        elif self.content_type is RequestContentType.JSON:
            prepared.headers["Content-Type"] = JSON_CONTENT_TYPE
            prepared.body = self.request_object.encode_json().encode("utf-8")
        prepared.headers.update(self.request_headers)
        self.url = prepared.url
        logger.info("Request (%s): %s %s", self.content_type.value, prepared.method, prepared.url)
        return prepared

    def process_url(self, url: str) -> None:
        """Send the request to url and handle whatever comes back."""
        prepared = self.prepare(url)
        http_request = urllib.request.Request(
            prepared.url,
            data=prepared.body,
            headers=prepared.headers,
            method=prepared.method,
        )
        try:
            with urllib.request.urlopen(http_request, timeout=self.timeout) as response:
                code = response.status
                headers = list(response.headers.items())
                content = response.read()
        except urllib.error.HTTPError as error:
            code = error.code
            headers = list(error.headers.items()) if error.headers else []
            try:
                content = error.read()
            finally:
                error.close()
        except (urllib.error.URLError, OSError, ValueError) as error:
            logger.error("Request failed: %s (%s)", prepared.url, error)
            self.handle_response(None, (), b"", False)
            return
        self.handle_response(code, [f"{key}: {value}" for key, value in headers], content, True)

    # Receiving

    def _broadcast(self, callbacks: list[RequestCallback]) -> None:
        for callback in list(callbacks):
            callback(self)

    def _store_headers(self, headers: HeaderSource) -> None:
        if isinstance(headers, Mapping):
            self.response_headers.update(headers)
            return
        for line in headers:
            key, separator, value = line.partition(": ")
            if separator:
                self.response_headers[key] = value

    def handle_response(
        self,
        code: Optional[int],
        headers: HeaderSource,
        content: Union[bytes, str],
        succeeded: bool,
    ) -> None:
        """Take in a response; a code of None means no response arrived."""
        self.reset_response_data()
        if code is not None:
            self.response_code = code

        if not succeeded or code is None:
            logger.error("Request failed (%d): %s", self.response_code, self.url)
            self._broadcast(self.on_request_fail)
            return

        raw = content.encode("utf-8") if isinstance(content, str) else bytes(content)

        if self.should_have_binary_response:
            self.result_binary_data = raw
            self._broadcast(self.on_request_complete)
            if self.on_process_url_complete is not None:
                self.on_process_url_complete(self.result_binary_data)
            return

        self.response_content = raw.decode("utf-8", errors="replace")
        logger.info("Response (%d): %s", self.response_code, self.response_content)
        self._store_headers(headers)

        parsed: Any
        try:
            parsed = json.loads(self.response_content, parse_int=float)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            self.response_object.values = parsed
            self.is_valid_json_response = True
        else:
            logger.warning("JSON could not be decoded!")

        self._broadcast(self.on_request_complete)

        if self.continuation is not None:
            continuation, self.continuation = self.continuation, None
            continuation(self.response_object)

    def response_header(self, name: str) -> str:
        return self.response_headers.get(name, "")

    def all_response_headers(self) -> list[str]:
        return [f"{key}: {value}" for key, value in self.response_headers.items()]

    # Tags

    def add_tag(self, tag: Optional[str]) -> None:
        if tag and tag not in self.tags:
            self.tags.append(tag)

    def remove_tag(self, tag: Optional[str]) -> int:
        """Remove a tag and return how many were removed."""
        before = len(self.tags)
        self.tags = [existing for existing in self.tags if existing != tag]
        return before - len(self.tags)

    def has_tag(self, tag: Optional[str]) -> bool:
        return bool(tag) and tag in self.tags