"""Decimal literal parsing and normalization.

Converts textual decimals such as ``1234``, ``-1.234``, ``1.234e3``,
``-1.234e-3``, ``-1.234e+3`` or ``1e5`` into the unscaled digit string of a
satoshi magnitude (value multiplied by 10^8).

The pipeline is:
    text -> parse_decimal() -> ParsedDecimal -> normalize() -> digits_to_int()

Base-10 conversions go through Decimal, which is exact and not subject to
the interpreter's int/str digit limit, so amounts of any length convert.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

import structlog

from cryptounit.constants import DECIMALS, MAX_EXPONENT
from cryptounit.errors import FormatError, RangeError

__all__ = [
    "ParsedDecimal",
    "parse_decimal",
    "normalize",
    "decimal_to_magnitude",
    "parse_integer",
    "digits_to_int",
    "int_to_digits",
]

logger = structlog.get_logger()

# sign, whole digits, then either an exponent or a fraction with its own
# optional exponent
_DECIMAL_RE = re.compile(
    r"(-)?([0-9]*)"  # sign, whole
    r"(?:(e[-+]?[0-9]+)"  # exponent only
    r"|(?:\.([0-9]+))?(?:e([-+]?[0-9]+))?)"  # fraction, exponent
)

_INTEGER_RE = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class ParsedDecimal:
    """Components of a decimal literal.

    Attributes:
        negative: True if the literal starts with '-'
        whole: Digits before the decimal point (may be empty)
        fraction: Digits after the decimal point (may be empty)
        exponent: Signed base-10 exponent, or None if absent
    """

    negative: bool
    whole: str
    fraction: str
    exponent: int | None = None

    @property
    def sign(self) -> str:
        return "-" if self.negative else ""


def parse_decimal(text: str) -> ParsedDecimal:
    """Split a decimal literal into sign, whole, fraction and exponent.

    Args:
        text: Literal matching '-'? digits? ('.' digits)? ('e' ('-'|'+')? digits)?

    Returns:
        ParsedDecimal with digit-only whole and fraction strings

    Raises:
        FormatError: If text does not match the grammar or has no mantissa digits
    """
    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        logger.debug("decimal_parse_rejected", text=text)
        raise FormatError(f"Invalid decimal format: {text!r}")

    negative, whole, exponent_only, fraction, exponent = match.groups()

    if exponent_only is not None:
        # Exponent directly after the whole digits, no fraction present
        parsed = ParsedDecimal(
            negative=negative is not None,
            whole=whole,
            fraction="",
            exponent=digits_to_int(exponent_only[1:]),
        )
    else:
        parsed = ParsedDecimal(
            negative=negative is not None,
            whole=whole,
            fraction=fraction or "",
            exponent=digits_to_int(exponent) if exponent is not None else None,
        )

    if not parsed.whole and not parsed.fraction:
        logger.debug("decimal_parse_rejected", text=text, reason="no_digits")
        raise FormatError(f"Invalid decimal format (no digits): {text!r}")

    return parsed


def normalize(parsed: ParsedDecimal) -> str:
    """Shift the exponent into the digits and fix the fraction at 8 places.

    A negative exponent -k moves the rightmost k whole digits (left-padded
    with zeros) to the front of the fraction. A positive exponent +k moves
    the leftmost k fraction digits (right-padded with zeros) to the end of
    the whole part. Fraction digits past the 8th are truncated.

    Returns:
        Signed base-10 digit string of the scaled magnitude

    Raises:
        RangeError: If the exponent exceeds MAX_EXPONENT
    """
    whole = parsed.whole
    fraction = parsed.fraction
    exponent = parsed.exponent

    if exponent:
        if exponent < 0:
            # A shift past every whole digit plus the kept fraction places
            # truncates to zero, so larger shifts give the same digits
            shift = min(-exponent, len(whole) + DECIMALS)
            whole = whole.rjust(shift, "0")
            fraction = whole[-shift:] + fraction
            whole = whole[:-shift]
        else:
            if exponent > MAX_EXPONENT:
                logger.debug("decimal_exponent_rejected", maximum=MAX_EXPONENT)
                raise RangeError(f"Decimal exponent exceeds maximum of {MAX_EXPONENT}")
            fraction = fraction.ljust(exponent, "0")
            whole = whole + fraction[:exponent]
            fraction = fraction[exponent:]

    if len(fraction) > DECIMALS:
        logger.debug(
            "decimal_fraction_truncated",
            fraction=fraction,
            dropped=fraction[DECIMALS:],
        )
        fraction = fraction[:DECIMALS]

    return f"{parsed.sign}{whole}{fraction.ljust(DECIMALS, '0')}"


def _render(value: int | float | str | Decimal) -> str:
    """Render a decimal-path input as literal text."""
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool):
        raise TypeError("Decimal amount cannot be a bool")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return int_to_digits(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise FormatError(f"Invalid decimal format: {value!r}")
        # repr() is the shortest round-trip form, e.g. 0.554, 1e-05, 1.5e+16
        return repr(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise FormatError(f"Invalid decimal format: {value!r}")
        # Scientific form stays short for huge exponents, e.g. 1.5E+5 -> 1.5e+5
        return str(value).lower()
    raise TypeError(
        f"Decimal amount must be int, float, str or Decimal, got {type(value).__name__}"
    )


def decimal_to_magnitude(value: int | float | str | Decimal) -> int:
    """Convert a decimal literal or number to a satoshi magnitude.

    Raises:
        FormatError: If the rendered text is not a valid decimal literal
        TypeError: If value is not int, float, str or Decimal
    """
    return digits_to_int(normalize(parse_decimal(_render(value))))


def parse_integer(text: str) -> int:
    """Parse a raw (already scaled) base-10 integer string.

    Unlike int(), rejects whitespace, underscores and '+' signs.

    Raises:
        FormatError: If text is not '-'? followed by one or more digits
    """
    if not _INTEGER_RE.fullmatch(text):
        logger.debug("integer_parse_rejected", text=text)
        raise FormatError(f"Invalid integer format: {text!r}")
    return digits_to_int(text)


def digits_to_int(text: str) -> int:
    """Convert a validated base-10 digit string (optional '-') to int.

    Goes through Decimal so strings longer than the interpreter's int/str
    digit limit (4300 digits by default) still convert.
    """
    return int(Decimal(text))


def int_to_digits(value: int) -> str:
    """Render an int in base 10, regardless of the int/str digit limit."""
    return str(Decimal(value))
