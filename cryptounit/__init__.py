"""Satoshi-scaled fixed-point amounts.

This package provides:
- CryptoUnit: immutable 8-decimal fixed-point amount over Python int
- Decimal literal parsing (cryptounit.parsing)
- Sortable 8-byte big-endian encoding (cryptounit.codec)
- Pydantic field types (cryptounit.types)
"""

from cryptounit.constants import BUFFER_SIZE, DECIMALS, SCALE
from cryptounit.errors import CryptoUnitError, DivisionByZero, FormatError, RangeError
from cryptounit.parsing import ParsedDecimal, parse_decimal
from cryptounit.unit import (
    CryptoUnit,
    CryptoUnitCompatible,
    compare,
    equal_to,
    gt,
    gte,
    is_crypto_unit,
    lt,
    lte,
)

__version__ = "0.1.0"
__all__ = [
    "CryptoUnit",
    "CryptoUnitCompatible",
    "CryptoUnitError",
    "FormatError",
    "RangeError",
    "DivisionByZero",
    "ParsedDecimal",
    "parse_decimal",
    "is_crypto_unit",
    "compare",
    "equal_to",
    "gt",
    "gte",
    "lt",
    "lte",
    "BUFFER_SIZE",
    "DECIMALS",
    "SCALE",
    "__version__",
]
