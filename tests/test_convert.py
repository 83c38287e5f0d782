import base64
import json

import pytest

from siojson.binary import binary_of
from siojson.convert import (
    json_string_to_array,
    json_string_to_value,
    make_json_object,
    to_json_object,
    to_json_string,
)


def test_to_json_string_null_is_empty():
    assert to_json_string(None) == ""


def test_to_json_string_string_unchanged():
    assert to_json_string("hello") == "hello"


def test_to_json_string_booleans():
    assert to_json_string(True) == "1"
    assert to_json_string(False) == "0"


def test_to_json_string_number_has_six_decimals():
    assert to_json_string(5.0) == "5.000000"
    assert to_json_string(2) == "2.000000"


def test_to_json_string_object_round_trip_and_condensed():
    value = {"a": 1.5, "b": ["x", True, None], "c": {"d": "e f"}}
    text = to_json_string(value)
    assert json.loads(text) == value
    assert ", " not in text and ": " not in text


def test_to_json_string_array_round_trip():
    value = [1.0, "two", False, {"k": "v"}]
    assert json.loads(to_json_string(value)) == value


def test_to_json_string_binary_inside_object_is_base64():
    data = b"\x01\x02\x03payload"
    parsed = json.loads(to_json_string({"blob": data}))
    assert binary_of(parsed["blob"]) == data


def test_to_json_string_binary_top_level():
    data = b"\xde\xad"
    assert base64.b64decode(to_json_string(data)) == data


def test_to_json_string_unsupported_type():
    with pytest.raises(TypeError):
        to_json_string(object())


def test_json_string_to_value_empty_is_null():
    assert json_string_to_value("") is None


@pytest.mark.parametrize("text, expected", [("42", 42.0), ("-3.5", -3.5), (".5", 0.5)])
def test_json_string_to_value_numbers(text, expected):
    assert json_string_to_value(text) == expected


def test_json_string_to_value_lone_sign_is_zero():
    assert json_string_to_value("-") == 0.0


def test_json_string_to_value_booleans():
    assert json_string_to_value("true") is True
    assert json_string_to_value("false") is False


def test_json_string_to_value_array():
    assert json_string_to_value('[1, "a", null]') == [1.0, "a", None]


def test_json_string_to_value_bad_array_is_string():
    assert json_string_to_value("[not json") == "[not json"


def test_json_string_to_value_object():
    assert json_string_to_value('{"a": "b", "n": 2}') == {"a": "b", "n": 2.0}


def test_json_string_to_value_bad_object_is_empty_object():
    assert json_string_to_value("{broken") == {}


def test_json_string_to_value_plain_text():
    assert json_string_to_value("hello world") == "hello world"


def test_json_string_to_array_valid():
    assert json_string_to_array('[1, "a", [true]]') == [1.0, "a", [True]]


@pytest.mark.parametrize("text", ["{}", "nope", "", "3"])
def test_json_string_to_array_non_array_is_empty(text):
    assert json_string_to_array(text) == []


def test_to_json_object_valid():
    assert to_json_object('{"x": {"y": [1]}}') == {"x": {"y": [1.0]}}


@pytest.mark.parametrize("text", ["[1]", "garbage", "", "true"])
def test_to_json_object_non_object_is_empty(text):
    assert to_json_object(text) == {}


def test_to_json_object_round_trip():
    value = {"name": "event", "args": [1.0, "two"], "flag": False}
    assert to_json_object(to_json_string(value)) == value


def test_make_json_object_is_new_and_empty():
    first = make_json_object()
    second = make_json_object()
    first["a"] = "b"
    assert second == {}
    assert first == {"a": "b"}