"""Error classes for amount parsing, arithmetic and encoding."""


class CryptoUnitError(Exception):
    """Base error for CryptoUnit operations."""

    pass


class FormatError(CryptoUnitError, ValueError):
    """Text does not match the decimal or integer literal grammar."""

    pass


class RangeError(CryptoUnitError, OverflowError):
    """Value is outside the range an operation can represent.

    Raised for buffer bounds, invalid radixes, negative exponents or shift
    counts, and non-positive random bounds.
    """

    pass


class DivisionByZero(CryptoUnitError, ZeroDivisionError):
    """Division or modulo by a zero magnitude."""

    pass
