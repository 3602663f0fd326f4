"""Tests for pydantic Amount and DecimalAmount field types."""

import json
from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from cryptounit import CryptoUnit
from cryptounit.types import Amount, DecimalAmount


class Transfer(BaseModel):
    amount: Amount
    fee: DecimalAmount


class TestValidation:
    def test_raw_and_decimal_strings(self):
        transfer = Transfer(amount="15000", fee="0.0001")
        assert transfer.amount.value == 15_000
        assert transfer.fee.value == 10_000

    def test_numbers(self):
        transfer = Transfer(amount=15000, fee=1.5)
        assert transfer.amount.value == 15_000
        assert transfer.fee.value == 150_000_000

    def test_instances_pass_through(self):
        amount = CryptoUnit(7)
        transfer = Transfer(amount=amount, fee=CryptoUnit(3))
        assert transfer.amount is amount
        assert transfer.fee.value == 3

    @pytest.mark.parametrize("amount", ["1.5", 1.5, True, None, "abc"])
    def test_invalid_amount(self, amount):
        with pytest.raises(ValidationError):
            Transfer(amount=amount, fee="1")

    @pytest.mark.parametrize("fee", ["abc", None, "1,5", [1]])
    def test_invalid_fee(self, fee):
        with pytest.raises(ValidationError):
            Transfer(amount=1, fee=fee)

    @pytest.mark.parametrize("fee", ["1e999999999", Decimal("1E+999999")])
    def test_fee_with_extreme_exponent_rejected(self, fee):
        with pytest.raises(ValidationError):
            Transfer(amount=1, fee=fee)

    def test_fee_with_tiny_exponent_is_zero(self):
        transfer = Transfer(amount=1, fee="1e-9999999999")
        assert transfer.fee.value == 0

    def test_long_values(self):
        transfer = Transfer(amount="1" * 5000, fee="1e5000")
        assert transfer.amount.value == (10**5000 - 1) // 9
        assert transfer.fee.value == 10**5008


class TestSerialization:
    def test_json_forms(self):
        transfer = Transfer(amount="15000", fee="0.0001")
        assert json.loads(transfer.model_dump_json()) == {
            "amount": "15000",
            "fee": "0.00010000",
        }

    def test_python_mode_keeps_instances(self):
        dumped = Transfer(amount=1, fee=1).model_dump()
        assert isinstance(dumped["amount"], CryptoUnit)

    def test_json_round_trip(self):
        transfer = Transfer(amount="-42", fee="-0.5")
        restored = Transfer.model_validate_json(transfer.model_dump_json())
        assert restored.amount == transfer.amount
        assert restored.fee == transfer.fee
