# siojson

A small library for JSON data that may carry raw binary payloads. It provides
wrappers for single JSON values and for JSON objects with typed field helpers,
conversions between JSON text and plain Python values, and a simple HTTP
request that sends and receives JSON objects.

Raw JSON values are plain Python objects: `None` for null, `bool`, `float`,
`str`, `list`, `dict`, and `bytes` for binary payloads.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `siojson.binary`: `is_binary(raw)` tells a binary payload (`bytes`) apart
  from other values. `binary_of(raw)` returns binary payloads as they are,
  decodes strings as base64 (empty bytes if that fails) and gives empty bytes
  for anything else.
- `siojson.convert`:
  - `to_json_string(value)` renders null as an empty string, returns strings
    unchanged, prints numbers with six decimals, booleans as `1` or `0`,
    binary as base64, and lists and dicts as condensed JSON.
  - `json_string_to_value(text)` guesses a value from the shape of the text:
    empty text is null, numeric text a number, `{...}` an object, `[...]` an
    array when it parses, `true`/`false` booleans, otherwise the text itself.
  - `json_string_to_array(text)` and `to_json_object(text)` parse an array or
    an object, giving an empty one when the text is not of that kind.
  - `make_json_object()` returns a new empty object.
  - Every number parsed from JSON text is a `float`.
- `siojson.values`: `JsonValue` wraps one raw value and reports its `JsonType`.
  You build it with `JsonValue.number`, `JsonValue.string`,
  `JsonValue.boolean`, `JsonValue.array`, `JsonValue.object`,
  `JsonValue.binary` or `JsonValue.from_json_string`. It reads back with
  `as_number`, `as_string`, `as_bool`, `as_array`, `as_object` and
  `as_binary`:
  - `as_string` renders non-strings as JSON text.
  - `as_binary` reads plain strings as hex.
- `siojson.jsonobject`: `JsonObject` holds named fields and has:
  - typed getters and setters for numbers, strings, booleans, arrays, nested
    objects and binary, and for uniform arrays of numbers, strings, booleans
    and objects;
  - `merge_json_object`, `encode_json`, `encode_json_to_single_string` and
    `decode_json`.

  A getter for a missing or mistyped field logs a warning and returns an empty
  default.
- `siojson.request`: `JsonRequest` is set up with a `RequestVerb` (`GET`,
  `POST`, `PUT`, `DEL`, `CUSTOM`) and a `RequestContentType` (`X_WWW_FORM_URLENCODED_URL`,
  `X_WWW_FORM_URLENCODED_BODY`, `JSON`, `BINARY`).
  - `prepare(url)` builds a `PreparedRequest` with method, URL, headers and
    body.
  - `process_url(url)` sends it with `urllib`.
  - `handle_response(code, headers, content, succeeded)` parses the reply into
    `response_object`.
  - It calls the callbacks in `on_request_complete` or `on_request_fail`.
  - Tags are kept with `add_tag`, `remove_tag` and `has_tag`.
- `siojson.library`:
  - `percent_encode` encodes reserved URL characters.
  - `base64_encode`, `base64_encode_bytes`, `base64_decode` and
    `base64_decode_bytes` handle base64; the decoders raise `ValueError` on
    invalid input.
  - `string_to_json_value_array` parses a JSON array into `JsonValue`s.
  - `call_url(url, verb, content_type, json_object, callback)` sends one
    request and calls `callback` once, on success or failure.

## Example

```python
from siojson.jsonobject import JsonObject
from siojson.values import JsonValue

obj = JsonObject({})
obj.set_string_field("name", "widget")
obj.set_number_field("count", 3)
obj.set_bool_field("enabled", True)
print(obj.encode_json())  # {"name":"widget","count":3.0,"enabled":true}

value = JsonValue.from_json_string("[1, 2, 3]")
print(value.type_name(), [item.as_number() for item in value.as_array()])
# Array [1.0, 2.0, 3.0]
```

```python
from siojson.request import JsonRequest, RequestContentType, RequestVerb

request = JsonRequest(RequestVerb.POST, RequestContentType.JSON)
request.request_object.set_string_field("q", "search")
prepared = request.prepare("http://localhost/api")
print(prepared.method, prepared.headers["Content-Type"], prepared.body)
```

## What it does not do

This package opens no persistent connections and runs no event-based client
or server. Its only network access is the one-off HTTP request made by
`JsonRequest.process_url` and `call_url`. It does not convert JSON to and from
arbitrary Python classes, and it has no command-line tool.