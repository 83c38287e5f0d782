import base64

import pytest

from siojson.binary import binary_of, is_binary


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"abc", True),
        (bytearray(b"\x00\x01"), True),
        ("abc", False),
        (None, False),
        (True, False),
        (1.0, False),
        ([b"abc"], False),
    ],
)
def test_is_binary(raw, expected):
    assert is_binary(raw) is expected


def test_binary_of_bytes_returned_unchanged():
    assert binary_of(b"\x00\xffdata") == b"\x00\xffdata"


def test_binary_of_bytearray_gives_bytes():
    result = binary_of(bytearray(b"xyz"))
    assert result == b"xyz"
    assert isinstance(result, bytes)


def test_binary_of_base64_string_round_trip():
    data = bytes(range(256))
    assert binary_of(base64.b64encode(data).decode("ascii")) == data


def test_binary_of_invalid_base64_is_empty():
    assert binary_of("not base64!!") == b""


@pytest.mark.parametrize("raw", [None, 3.0, False, [1.0], {"a": "b"}])
def test_binary_of_other_values_is_empty(raw):
    assert binary_of(raw) == b""