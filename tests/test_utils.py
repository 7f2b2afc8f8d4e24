import pytest

from hamqttkit.utils import byte_array_to_str, ends_with


def test_ends_with_match():
    assert ends_with("sensor/state", "/state")
    assert ends_with("abc", "abc")


def test_ends_with_no_match():
    assert not ends_with("sensor/state", "/cmd")
    assert not ends_with("ab", "abc")


@pytest.mark.parametrize("string,suffix", [(None, "a"), ("a", None), ("", ""), ("abc", ""), ("", "a")])
def test_ends_with_empty_or_missing(string, suffix):
    assert ends_with(string, suffix) is False


def test_byte_array_to_str_pinned():
    assert byte_array_to_str(b"\x01\xab\xff") == "01abff"


def test_byte_array_to_str_empty():
    assert byte_array_to_str(b"") == ""


@pytest.mark.parametrize("data", [b"\x00", bytes(range(16)), bytearray(b"\xde\xad\xbe\xef")])
def test_byte_array_round_trip(data):
    text = byte_array_to_str(data)
    assert len(text) == 2 * len(data)
    assert text == text.lower()
    assert bytes.fromhex(text) == bytes(data)