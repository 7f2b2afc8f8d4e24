import json

import pytest

from hamqttkit.serializer_array import SerializerArray


def test_empty_array():
    array = SerializerArray(3)
    assert array.serialize() == "[]"
    assert array.calculate_size() == 2
    assert len(array) == 0


def test_serialize_items():
    array = SerializerArray(2)
    array.add("a")
    array.add("b")
    assert array.serialize() == '["a","b"]'


def test_serialized_output_is_json():
    array = SerializerArray(3)
    for item in ("auto", "low", "high"):
        array.add(item)
    assert json.loads(array.serialize()) == ["auto", "low", "high"]


@pytest.mark.parametrize("items", [[], ["x"], ["one", "two"], ["", "abc", "defgh"]])
def test_size_matches_output(items):
    array = SerializerArray(len(items))
    for item in items:
        array.add(item)
    assert array.calculate_size() == len(array.serialize())


def test_add_beyond_capacity():
    array = SerializerArray(1)
    array.add("first")
    with pytest.raises(OverflowError):
        array.add("second")
    assert list(array) == ["first"]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        SerializerArray(-1)


def test_get_item():
    array = SerializerArray(2)
    array.add("first")
    assert array.get_item(0) == "first"
    assert array.get_item(1) is None
    assert array.get_item(-1) is None


def test_clear():
    array = SerializerArray(2)
    array.add("a")
    array.add("b")
    array.clear()
    assert array.items == ()
    array.add("c")
    assert array.items == ("c",)