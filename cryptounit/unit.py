"""Satoshi-scaled fixed-point amount type.

All values are stored as integers scaled by 10^8.
Example: 1.5 BTC is stored as 150_000_000

There are two distinct ways in:
- CryptoUnit(x) / CryptoUnit.from_integer(x) take an already-scaled integer
  (int or base-10 integer string) and store it unchanged.
- CryptoUnit.from_decimal(x) parses a decimal literal and applies the scale.

Binary operations coerce raw operands through the first path only, so
``unit.plus(5)`` adds 5 satoshi, not 5 whole units.
"""

from __future__ import annotations

import random as _random
from decimal import Decimal
from typing import Union

import structlog

from cryptounit import codec
from cryptounit.constants import DECIMALS, MAX_RADIX, MIN_RADIX, SCALE
from cryptounit.errors import DivisionByZero, RangeError
from cryptounit.parsing import decimal_to_magnitude, int_to_digits, parse_integer

__all__ = [
    "CryptoUnit",
    "CryptoUnitCompatible",
    "is_crypto_unit",
    "compare",
    "equal_to",
    "gt",
    "gte",
    "lt",
    "lte",
]

logger = structlog.get_logger()

_RADIX_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

CryptoUnitCompatible = Union["CryptoUnit", int, str]


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity; amounts truncate toward zero
    so that -7 / 3 = -2, not -3.
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _to_radix(value: int, radix: int) -> str:
    if radix == 10:
        return int_to_digits(value)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    remaining = abs(value)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, radix)
        digits.append(_RADIX_DIGITS[digit])
    return sign + "".join(reversed(digits))


def _magnitude(value: object) -> int:
    """Extract the scaled magnitude of a raw-path input.

    Raises:
        TypeError: If value is not a CryptoUnit, int or str
        FormatError: If value is a str that is not a base-10 integer
    """
    if isinstance(value, CryptoUnit):
        return value._value
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool):
        raise TypeError("CryptoUnit requires CryptoUnit, int or str, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return parse_integer(value)
    raise TypeError(f"CryptoUnit requires CryptoUnit, int or str, got {type(value).__name__}")


def _operand(value: object) -> int | None:
    """Magnitude for operator overloads, or None if unsupported."""
    if isinstance(value, CryptoUnit):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def is_crypto_unit(value: object) -> bool:
    """Check if value is a CryptoUnit instance."""
    return isinstance(value, CryptoUnit)


class CryptoUnit:
    """Immutable 8-decimal fixed-point amount stored as int.

    Attributes:
        value: The scaled integer magnitude (read-only)
    """

    SCALE = SCALE
    DECIMALS = DECIMALS

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: CryptoUnitCompatible) -> None:
        """Create a CryptoUnit from a raw (already scaled) value.

        Args:
            value: Another CryptoUnit, an int, or a base-10 integer string

        Raises:
            TypeError: If value is of an unsupported kind
            FormatError: If value is a str that is not a base-10 integer
        """
        self._value = _magnitude(value)

    @property
    def value(self) -> int:
        """The scaled integer magnitude."""
        return self._value

    # --- Constructors ---

    @classmethod
    def from_integer(cls, value: int | str) -> CryptoUnit:
        """Create from a raw magnitude (NOT multiplied by the scale)."""
        if isinstance(value, CryptoUnit):
            raise TypeError("from_integer requires int or str, got CryptoUnit")
        return cls(value)

    @classmethod
    def from_decimal(cls, value: int | float | str | Decimal) -> CryptoUnit:
        """Create from a decimal literal or number (scaled by 10^8).

        Examples:
            from_decimal("1.5e5").value == 15_000_000_000_000
            from_decimal(-1.234e-3).value == -123_400

        Raises:
            FormatError: If value does not match the decimal literal grammar
            TypeError: If value is not int, float, str or Decimal
        """
        return cls(decimal_to_magnitude(value))

    @classmethod
    def from_value(cls, other: CryptoUnit) -> CryptoUnit:
        """Create a copy of another CryptoUnit."""
        if not isinstance(other, CryptoUnit):
            raise TypeError(f"from_value requires CryptoUnit, got {type(other).__name__}")
        return cls(other._value)

    @classmethod
    def from_buffer(cls, buffer: bytes | bytearray | memoryview) -> CryptoUnit:
        """Create from an 8-byte big-endian unsigned buffer."""
        return cls(codec.decode(buffer))

    @classmethod
    def zero(cls) -> CryptoUnit:
        return cls(0)

    @classmethod
    def random(cls, upper_bound: CryptoUnitCompatible) -> CryptoUnit:
        """Create a value with magnitude uniform in [0, upper_bound).

        Raises:
            RangeError: If upper_bound is not positive
        """
        bound = _magnitude(upper_bound)
        if bound <= 0:
            raise RangeError("Random upper bound must be positive")
        return cls(_random.randrange(bound))

    @staticmethod
    def max(*values: CryptoUnitCompatible) -> CryptoUnit:
        """Return the largest of the given values (mixed raw and CryptoUnit)."""
        if not values:
            raise ValueError("CryptoUnit.max() requires at least one value")
        result = CryptoUnit(values[0])
        for value in values[1:]:
            candidate = CryptoUnit(value)
            if candidate.gt(result):
                result = candidate
        return result

    @staticmethod
    def min(*values: CryptoUnitCompatible) -> CryptoUnit:
        """Return the smallest of the given values (mixed raw and CryptoUnit)."""
        if not values:
            raise ValueError("CryptoUnit.min() requires at least one value")
        result = CryptoUnit(values[0])
        for value in values[1:]:
            candidate = CryptoUnit(value)
            if candidate.lt(result):
                result = candidate
        return result

    # --- Arithmetic ---

    def plus(self, other: CryptoUnitCompatible) -> CryptoUnit:
        return CryptoUnit(self._value + _magnitude(other))

    def minus(self, other: CryptoUnitCompatible) -> CryptoUnit:
        return CryptoUnit(self._value - _magnitude(other))

    def times(self, other: CryptoUnitCompatible) -> CryptoUnit:
        """Multiply magnitudes (no rescaling)."""
        return CryptoUnit(self._value * _magnitude(other))

    def divided_by(self, other: CryptoUnitCompatible) -> CryptoUnit:
        """Fixed-point division truncated toward zero: (a * 10^8) / b.

        The dividend is rescaled before dividing, so this is not raw magnitude
        division; from_integer(7).divided_by(2) is 350_000_000, not 3. Use
        quotient() (or the // operator) to divide magnitudes directly.

        Example:
            from_decimal("3.19999999").divided_by(from_decimal(10000))
            == from_decimal("0.00031999")

        Raises:
            DivisionByZero: If other is zero
        """
        divisor = _magnitude(other)
        if divisor == 0:
            logger.debug("division_by_zero", operation="divided_by")
            raise DivisionByZero("Fixed-point division by zero")
        return CryptoUnit(_div_trunc(self._value * SCALE, divisor))

    def quotient(self, other: CryptoUnitCompatible) -> CryptoUnit:
        """Raw magnitude division truncated toward zero: a / b.

        Raises:
            DivisionByZero: If other is zero
        """
        divisor = _magnitude(other)
        if divisor == 0:
            raise DivisionByZero("Division by zero")
        return CryptoUnit(_div_trunc(self._value, divisor))

    def mod(self, other: CryptoUnitCompatible) -> CryptoUnit:
        """Remainder of truncating division; sign follows the dividend.

        Raises:
            DivisionByZero: If other is zero
        """
        divisor = _magnitude(other)
        if divisor == 0:
            raise DivisionByZero("Modulo by zero")
        return CryptoUnit(self._value - divisor * _div_trunc(self._value, divisor))

    def pow(self, other: CryptoUnitCompatible) -> CryptoUnit:
        """Raise magnitude to a raw integer power.

        Raises:
            RangeError: If the exponent is negative
        """
        exponent = _magnitude(other)
        if exponent < 0:
            raise RangeError("Negative exponent")
        return CryptoUnit(self._value**exponent)

    def bitwise_and(self, other: CryptoUnitCompatible) -> CryptoUnit:
        return CryptoUnit(self._value & _magnitude(other))

    def bitwise_or(self, other: CryptoUnitCompatible) -> CryptoUnit:
        return CryptoUnit(self._value | _magnitude(other))

    def bitwise_xor(self, other: CryptoUnitCompatible) -> CryptoUnit:
        return CryptoUnit(self._value ^ _magnitude(other))

    def bitshift_left(self, bits: CryptoUnitCompatible) -> CryptoUnit:
        count = _magnitude(bits)
        if count < 0:
            raise RangeError("Negative shift count")
        return CryptoUnit(self._value << count)

    def bitshift_right(self, bits: CryptoUnitCompatible) -> CryptoUnit:
        count = _magnitude(bits)
        if count < 0:
            raise RangeError("Negative shift count")
        return CryptoUnit(self._value >> count)

    def abs(self) -> CryptoUnit:
        return CryptoUnit(abs(self._value))

    absolute_value = abs

    def negate(self) -> CryptoUnit:
        return CryptoUnit(-self._value)

    # --- Comparison ---

    def compare(self, other: CryptoUnitCompatible) -> int:
        """Three-way comparison: -1 if self < other, 0 if equal, 1 if greater."""
        other_value = _magnitude(other)
        return (self._value > other_value) - (self._value < other_value)

    def equal_to(self, other: CryptoUnitCompatible) -> bool:
        return self.compare(other) == 0

    def gt(self, other: CryptoUnitCompatible) -> bool:
        return self.compare(other) > 0

    def gte(self, other: CryptoUnitCompatible) -> bool:
        return self.compare(other) >= 0

    def lt(self, other: CryptoUnitCompatible) -> bool:
        return self.compare(other) < 0

    def lte(self, other: CryptoUnitCompatible) -> bool:
        return self.compare(other) <= 0

    greater_than = gt
    greater_than_or_equal_to = gte
    less_than = lt
    less_than_or_equal_to = lte

    # --- Conversion ---

    def to_string(self, radix: int = 10) -> str:
        """Raw scaled magnitude in the given radix (not a decimal-point form).

        Raises:
            RangeError: If radix is outside 2..36
        """
        if not MIN_RADIX <= radix <= MAX_RADIX:
            raise RangeError(f"Radix must be between {MIN_RADIX} and {MAX_RADIX}")
        return _to_radix(self._value, radix)

    def to_decimal_string(self) -> str:
        """Format as whole.fraction with exactly 8 fractional digits.

        Negative values keep the sign in front of the whole part:
        -123400 renders as "-0.00123400".
        """
        digits = int_to_digits(abs(self._value)).rjust(DECIMALS + 1, "0")
        sign = "-" if self._value < 0 else ""
        return f"{sign}{digits[:-DECIMALS]}.{digits[-DECIMALS:]}"

    def to_decimal(self) -> Decimal:
        """Convert to an exact Decimal for display."""
        return Decimal(self.to_decimal_string())

    def to_number(self) -> float:
        """Lossy float of the raw magnitude."""
        return float(self._value)

    def to_json(self) -> str:
        return self.to_string(10)

    def to_buffer(self) -> bytes:
        """Encode as 8 big-endian unsigned bytes.

        Raises:
            RangeError: If the magnitude is negative or exceeds 2^64-1
        """
        return codec.encode(self._value)

    def __repr__(self) -> str:
        return f"<CryptoUnit {self.to_string()}>"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __float__(self) -> float:
        return self.to_number()

    # --- Operators ---

    def __add__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.plus(other_value)

    def __radd__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).plus(self)

    def __sub__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.minus(other_value)

    def __rsub__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).minus(self)

    def __mul__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.times(other_value)

    def __rmul__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).times(self)

    def __truediv__(self, other: object) -> CryptoUnit:
        """Fixed-point division (see divided_by)."""
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.divided_by(other_value)

    def __rtruediv__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).divided_by(self)

    def __floordiv__(self, other: object) -> CryptoUnit:
        """Raw magnitude division truncated toward zero (see quotient)."""
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.quotient(other_value)

    def __rfloordiv__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).quotient(self)

    def __mod__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.mod(other_value)

    def __rmod__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).mod(self)

    def __pow__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.pow(other_value)

    def __rpow__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).pow(self)

    def __and__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.bitwise_and(other_value)

    __rand__ = __and__

    def __or__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.bitwise_or(other_value)

    __ror__ = __or__

    def __xor__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.bitwise_xor(other_value)

    __rxor__ = __xor__

    def __lshift__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.bitshift_left(other_value)

    def __rlshift__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).bitshift_left(self)

    def __rshift__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self.bitshift_right(other_value)

    def __rrshift__(self, other: object) -> CryptoUnit:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return CryptoUnit(other_value).bitshift_right(self)

    def __neg__(self) -> CryptoUnit:
        return self.negate()

    def __pos__(self) -> CryptoUnit:
        return self

    def __abs__(self) -> CryptoUnit:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self._value == other_value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self._value < other_value

    def __le__(self, other: object) -> bool:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self._value <= other_value

    def __gt__(self, other: object) -> bool:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self._value > other_value

    def __ge__(self, other: object) -> bool:
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return self._value >= other_value


def compare(lhs: CryptoUnitCompatible, rhs: CryptoUnitCompatible) -> int:
    """Three-way comparison of two compatible values."""
    return CryptoUnit(lhs).compare(rhs)


def equal_to(lhs: CryptoUnitCompatible, rhs: CryptoUnitCompatible) -> bool:
    return CryptoUnit(lhs).equal_to(rhs)


def gt(lhs: CryptoUnitCompatible, rhs: CryptoUnitCompatible) -> bool:
    return CryptoUnit(lhs).gt(rhs)


def gte(lhs: CryptoUnitCompatible, rhs: CryptoUnitCompatible) -> bool:
    return CryptoUnit(lhs).gte(rhs)


def lt(lhs: CryptoUnitCompatible, rhs: CryptoUnitCompatible) -> bool:
    return CryptoUnit(lhs).lt(rhs)


def lte(lhs: CryptoUnitCompatible, rhs: CryptoUnitCompatible) -> bool:
    return CryptoUnit(lhs).lte(rhs)
