import pytest

from hamqttkit.numeric import Numeric


def test_default_is_unset():
    number = Numeric()
    assert not number.is_set
    assert number.calculate_size() == 0
    assert number.to_str() == "0"


def test_precision_base_values():
    assert Numeric(1, 0).precision_base() == 1
    assert Numeric(1, 1).precision_base() == 10
    assert Numeric(1, 2).precision_base() == 100
    assert Numeric(1, 3).precision_base() == 1000
    assert Numeric(1, 4).precision_base() == 1


def test_int_is_scaled_by_precision():
    number = Numeric(12, 2)
    assert number.base_value == 12 * 100
    assert number.precision == 2
    assert number.is_float()


def test_float_truncates_toward_zero():
    assert Numeric(-1.9, 0).base_value == -1
    assert Numeric(1.9, 0).base_value == 1


def test_float_uses_single_precision():
    assert Numeric(0.29, 2).base_value == 29


def test_unsupported_value_type():
    with pytest.raises(TypeError):
        Numeric("12", 0)


def test_from_str_parses_signed_numbers():
    assert Numeric.from_str("-123").to_int() == -123
    assert Numeric.from_str(b"456").to_int() == 456
    assert Numeric.from_str("456").precision == 0


@pytest.mark.parametrize("text", ["", "12a", "1.5", "--1", "1" * 20])
def test_from_str_invalid(text):
    assert not Numeric.from_str(text).is_set


def test_from_str_max_digits():
    text = "1" * Numeric.MAX_DIGITS
    assert Numeric.from_str(text).to_int() == int(text)
    assert Numeric.from_str("-" + text).to_int() == -int(text)


def test_from_str_sign_only_is_zero():
    number = Numeric.from_str("-")
    assert number.is_set
    assert number.to_int() == 0


def test_to_str_with_precision():
    assert Numeric.from_base(12345, 2).to_str() == "123.45"
    assert Numeric.from_base(-5, 2).to_str() == "-0.05"


@pytest.mark.parametrize(
    "base,precision",
    [(0, 0), (0, 2), (7, 0), (-7, 0), (5, 1), (-5, 3), (100, 2), (-1000, 3),
     (123456789, 3), (99, 1), (12345, 4)],
)
def test_size_matches_text(base, precision):
    number = Numeric.from_base(base, precision)
    assert len(number.to_str()) == number.calculate_size()


@pytest.mark.parametrize("base,precision", [(5, 1), (-5, 3), (100, 2), (123456789, 3), (42, 0)])
def test_text_matches_float(base, precision):
    number = Numeric.from_base(base, precision)
    assert float(number.to_str()) == pytest.approx(number.to_float())


def test_round_trip_through_text():
    number = Numeric(-987654, 0)
    assert Numeric.from_str(number.to_str()) == number


def test_reset():
    number = Numeric(3.5, 1)
    number.reset()
    assert number == Numeric()


def test_equality_compares_precision():
    assert Numeric.from_base(10, 1) != Numeric.from_base(10, 2)
    assert Numeric.from_base(10, 1) == Numeric(1, 1)


def test_integer_ranges():
    assert Numeric.from_base(255, 0).is_uint8()
    assert not Numeric.from_base(256, 0).is_uint8()
    assert Numeric.from_base(65535, 0).is_uint16()
    assert not Numeric.from_base(-1, 0).is_uint32()
    assert Numeric.from_base(-128, 0).is_int8()
    assert not Numeric.from_base(-129, 0).is_int8()
    assert Numeric.from_base(-32768, 0).is_int16()
    assert not Numeric.from_base(2147483648, 0).is_int32()
    assert not Numeric.from_base(1, 1).is_int32()
    assert not Numeric().is_uint8()


def test_to_float():
    assert Numeric.from_base(15, 1).to_float() == pytest.approx(1.5)