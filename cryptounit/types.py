"""Pydantic field types for models that carry amounts.

Two annotated types mirror the two construction paths of CryptoUnit:

- Amount: raw satoshi magnitude. Accepts a CryptoUnit, an int or a base-10
  integer string, and serializes to the raw integer string (as to_json()).
- DecimalAmount: human-readable amount. Accepts a decimal literal (str, int,
  float or Decimal) and serializes with to_decimal_string().

Usage:
    class Transfer(BaseModel):
        amount: Amount
        fee: DecimalAmount
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from cryptounit.errors import CryptoUnitError
from cryptounit.unit import CryptoUnit

__all__ = ["Amount", "DecimalAmount", "validate_amount", "validate_decimal_amount"]


def validate_amount(value: Any) -> CryptoUnit:
    """Validate a raw satoshi amount.

    Raises:
        ValueError: If value is not a CryptoUnit, int or base-10 integer string
    """
    if isinstance(value, CryptoUnit):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Amount must be int or integer string, got {type(value).__name__}")
    try:
        return CryptoUnit(value)
    except CryptoUnitError as err:
        raise ValueError(f"Amount must be a decimal integer string: '{value}'") from err


def validate_decimal_amount(value: Any) -> CryptoUnit:
    """Validate a decimal literal amount (scaled by 10^8).

    Raises:
        ValueError: If value is not a valid decimal literal
    """
    if isinstance(value, CryptoUnit):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError(
            f"Decimal amount must be str, int, float or Decimal, got {type(value).__name__}"
        )
    try:
        return CryptoUnit.from_decimal(value)
    except CryptoUnitError as err:
        raise ValueError(f"Invalid decimal amount: '{value}'") from err


class _AmountSchema:
    """Core schema for raw satoshi amounts."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_amount,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda unit: unit.to_json(), when_used="json"
            ),
        )


class _DecimalAmountSchema:
    """Core schema for decimal literal amounts."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_decimal_amount,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda unit: unit.to_decimal_string(), when_used="json"
            ),
        )


# Satoshi magnitude, serialized as raw integer string
Amount = Annotated[CryptoUnit, _AmountSchema]

# Decimal literal, serialized as "whole.ffffffff"
DecimalAmount = Annotated[CryptoUnit, _DecimalAmountSchema]
