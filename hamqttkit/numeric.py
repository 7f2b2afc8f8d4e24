"""Fixed-precision numbers as they appear in discovery payloads and MQTT messages."""

from __future__ import annotations

import struct

_DIGITS = "0123456789"

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF
_INT8_RANGE = (-0x80, 0x7F)
_INT16_RANGE = (-0x8000, 0x7FFF)
_INT32_RANGE = (-0x80000000, 0x7FFFFFFF)


def _to_float32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Numeric:
    """A number stored as an integer base value scaled by a decimal precision.

    A base value of ``1234`` with precision ``1`` represents ``123.4``.
    An instance created without a value is "unset".
    """

    MAX_DIGITS = 19

    def __init__(self, value: int | float | None = None, precision: int = 0) -> None:
        self.precision = precision
        if value is None:
            self.is_set = False
            self.base_value = 0
            self.precision = 0
        elif isinstance(value, int):
            self.is_set = True
            self.base_value = value * self.precision_base()
        elif isinstance(value, float):
            self.is_set = True
            # Scaling happens in single precision and truncates toward zero.
            scaled = _to_float32(_to_float32(value) * float(self.precision_base()))
            self.base_value = int(scaled)
        else:
            raise TypeError(f"unsupported numeric value: {value!r}")

    @classmethod
    def from_str(cls, buffer: str | bytes | bytearray) -> Numeric:
        """Parse a base value (optionally negative) from text.

        The parsed number has precision zero. Invalid input gives an unset number.
        """
        text = buffer.decode("latin-1") if isinstance(buffer, (bytes, bytearray)) else buffer
        if not text:
            return cls()

        negative = text.startswith("-")
        digits = text[1:] if negative else text
        if len(digits) > cls.MAX_DIGITS:
            return cls()
        if any(ch not in _DIGITS for ch in digits):
            return cls()

        value = int(digits) if digits else 0
        return cls.from_base(-value if negative else value, 0)

    @classmethod
    def from_base(cls, value: int, precision: int) -> Numeric:
        """Create a number from a base value without scaling it."""
        number = cls()
        number.is_set = True
        number.base_value = value
        number.precision = precision
        return number

    def precision_base(self) -> int:
        """Return the multiplier that corresponds to the precision."""
        return {1: 10, 2: 100, 3: 1000}.get(self.precision, 1)

    def calculate_size(self) -> int:
        """Return the length of the textual representation."""
        if not self.is_set:
            return 0

        value = abs(self.base_value)
        negative = self.base_value < 0
        digits = len(str(value))
        if negative:
            digits += 1

        if self.precision > 0:
            if value == 0:
                return 1
            # one digit + dot + decimal digits (+ sign)
            minimum = self.precision + (3 if negative else 2)
            return digits + 1 if digits >= minimum else minimum

        return digits

    def to_str(self) -> str:
        """Return the number as text with the configured number of decimals."""
        if not self.is_set or self.base_value == 0:
            return "0"

        sign = "-" if self.base_value < 0 else ""
        value = abs(self.base_value)
        if self.precision <= 0:
            return f"{sign}{value}"

        integer, fraction = divmod(value, 10**self.precision)
        return f"{sign}{integer}.{fraction:0{self.precision}d}"

    def reset(self) -> None:
        """Return the number to the unset state."""
        self.is_set = False
        self.base_value = 0
        self.precision = 0

    def _is_integer_in(self, low: int, high: int) -> bool:
        return self.is_set and self.precision == 0 and low <= self.base_value <= high

    def is_uint8(self) -> bool:
        return self._is_integer_in(0, _UINT8_MAX)

    def is_uint16(self) -> bool:
        return self._is_integer_in(0, _UINT16_MAX)

    def is_uint32(self) -> bool:
        return self._is_integer_in(0, _UINT32_MAX)

    def is_int8(self) -> bool:
        return self._is_integer_in(*_INT8_RANGE)

    def is_int16(self) -> bool:
        return self._is_integer_in(*_INT16_RANGE)

    def is_int32(self) -> bool:
        return self._is_integer_in(*_INT32_RANGE)

    def is_float(self) -> bool:
        return self.is_set and self.precision > 0

    def to_int(self) -> int:
        """Return the base value."""
        return self.base_value

    def to_float(self) -> float:
        """Return the value the number represents."""
        return self.base_value / float(self.precision_base())

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        if not self.is_set:
            return "Numeric()"
        return f"Numeric.from_base({self.base_value}, {self.precision})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return (self.is_set, self.base_value, self.precision) == (
            other.is_set,
            other.base_value,
            other.precision,
        )

    __hash__ = None  # type: ignore[assignment]