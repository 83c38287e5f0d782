import json

import pytest

from siojson.jsonobject import JsonObject
from siojson.values import JsonType, JsonValue


def test_number_round_trip():
    value = JsonValue.number(2.5)
    assert value.type() is JsonType.NUMBER
    assert value.as_number() == 2.5
    assert value.type_name() == "Number"


def test_string_round_trip():
    value = JsonValue.string("hello")
    assert value.type() is JsonType.STRING
    assert value.as_string() == "hello"


def test_boolean_value_and_encoding():
    value = JsonValue.boolean(True)
    assert value.as_bool() is True
    assert value.encode_json() == "1"
    assert value.as_number() == 1.0


def test_number_renders_with_six_decimals():
    assert JsonValue.number(1.5).as_string() == "1.500000"


def test_binary_round_trip_and_type():
    data = b"\x00\x01\xfe"
    value = JsonValue.binary(data)
    assert value.type() is JsonType.BINARY
    assert value.type_name() == "String"
    assert value.as_binary() == data


def test_hex_string_decodes_to_bytes():
    data = b"\x0a\xff\x10"
    assert JsonValue.string(data.hex()).as_binary() == data


def test_bad_hex_gives_empty_bytes():
    assert JsonValue.string("zz").as_binary() == b""


def test_non_string_binary_is_empty():
    assert JsonValue.number(3).as_binary() == b""


def test_missing_value_defaults():
    value = JsonValue()
    assert value.type() is JsonType.NONE
    assert value.is_null()
    assert value.as_number() == 0.0
    assert value.as_string() == ""
    assert value.as_array() == []
    assert value.as_bool() is False
    assert value.encode_json() == ""


def test_null_value():
    value = JsonValue(None)
    assert value.type() is JsonType.NULL
    assert value.type_name() == "Null"
    assert value.is_null()
    assert value.encode_json() == ""


def test_array_round_trip():
    value = JsonValue.array([JsonValue.number(1), JsonValue.string("a")])
    assert value.type() is JsonType.ARRAY
    assert [item.value for item in value.as_array()] == [1.0, "a"]


def test_array_as_string_is_json():
    value = JsonValue.array([JsonValue.number(1), JsonValue.string("a")])
    assert json.loads(value.as_string()) == [1.0, "a"]


def test_object_shares_fields():
    obj = JsonObject()
    obj.set_string_field("k", "v")
    value = JsonValue.object(obj)
    assert value.type() is JsonType.OBJECT
    back = value.as_object()
    assert back.get_string_field("k") == "v"
    back.set_number_field("n", 2)
    assert obj.get_number_field("n") == 2.0


def test_as_object_of_non_object_is_none():
    assert JsonValue.number(1).as_object() is None


def test_from_json_string_shapes():
    assert JsonValue.from_json_string("42").as_number() == 42.0
    assert JsonValue.from_json_string("true").as_bool() is True
    assert JsonValue.from_json_string('{"a":1}').type() is JsonType.OBJECT
    assert JsonValue.from_json_string("hello").as_string() == "hello"
    assert JsonValue.from_json_string("").type() is JsonType.NULL


@pytest.mark.parametrize("text,expected", [("3.25", 3.25), ("word", 0.0)])
def test_string_as_number(text, expected):
    assert JsonValue.string(text).as_number() == expected


def test_equality_compares_raw_values():
    assert JsonValue.number(1) == JsonValue(1.0)
    assert JsonValue.string("a") != JsonValue.string("b")