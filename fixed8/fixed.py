"""Signed fixed-point numbers with eight fractional bits."""

from __future__ import annotations

import math
import struct
from typing import Union

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS

Number = Union[int, float, "Fixed"]


def _float32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _roundf(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_float(value: float) -> str:
    """Format a float the way a default output stream does (six significant digits)."""
    return f"{value:g}"


class Fixed:
    """A 32-bit fixed-point number with eight fractional bits.

    Integers are shifted into place; floats are scaled and rounded in
    single precision. Arithmetic goes through single-precision floats,
    while comparisons use the raw integer.
    """

    __slots__ = ("_raw",)

    def __init__(self, value: Number = 0) -> None:
        if isinstance(value, Fixed):
            self._raw = value._raw
        elif isinstance(value, int):
            self._raw = _wrap32(value << FRACTIONAL_BITS)
        elif isinstance(value, float):
            scaled = _float32(_float32(value) * _SCALE)
            self._raw = _wrap32(_roundf(scaled))
        else:
            raise TypeError(f"cannot build Fixed from {type(value).__name__}")

    @classmethod
    def from_raw(cls, raw: int) -> Fixed:
        """Build a value from its raw fixed-point bits."""
        result = cls()
        result.raw = raw
        return result

    @property
    def raw(self) -> int:
        """The underlying fixed-point integer."""
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        self._raw = _wrap32(int(value))

    def to_int(self) -> int:
        """Integer part, rounded towards negative infinity."""
        return self._raw >> FRACTIONAL_BITS

    def to_float(self) -> float:
        """Value as a single-precision float."""
        return _float32(float(self._raw) / _SCALE)

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return format_float(self.to_float())

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"

    @staticmethod
    def _coerce(other: object) -> Fixed | None:
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return None

    # Comparisons use the raw bits.

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw == rhs._raw

    def __ne__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw != rhs._raw

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw < rhs._raw

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw <= rhs._raw

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw > rhs._raw

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw >= rhs._raw

    __hash__ = None  # mutable through increment/decrement

    # Arithmetic goes through single-precision floats.

    def __add__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_float32(self.to_float() + rhs.to_float()))

    def __radd__(self, other: object) -> Fixed:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_float32(self.to_float() - rhs.to_float()))

    def __rsub__(self, other: object) -> Fixed:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed(_float32(self.to_float() * rhs.to_float()))

    def __rmul__(self, other: object) -> Fixed:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._raw == 0:
            raise ZeroDivisionError("division of Fixed by zero")
        return Fixed(_float32(self.to_float() / rhs.to_float()))

    def __rtruediv__(self, other: object) -> Fixed:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    # Steps of one raw unit (the smallest representable amount).

    def increment(self) -> Fixed:
        """Add one raw unit and return the updated value."""
        self.raw = self._raw + 1
        return self

    def decrement(self) -> Fixed:
        """Subtract one raw unit and return the updated value."""
        self.raw = self._raw - 1
        return self

    def post_increment(self) -> Fixed:
        """Add one raw unit and return a copy of the previous value."""
        previous = Fixed(self)
        self.raw = self._raw + 1
        return previous

    def post_decrement(self) -> Fixed:
        """Subtract one raw unit and return a copy of the previous value."""
        previous = Fixed(self)
        self.raw = self._raw - 1
        return previous

    @staticmethod
    def min(a: Fixed, b: Fixed) -> Fixed:
        """Return ``a`` if it is strictly smaller, otherwise ``b``."""
        return a if a < b else b

    @staticmethod
    def max(a: Fixed, b: Fixed) -> Fixed:
        """Return ``a`` if it is strictly greater, otherwise ``b``."""
        return a if a > b else b