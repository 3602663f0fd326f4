"""Tests for CryptoUnit construction paths."""

from decimal import Decimal

import pytest

from cryptounit import CryptoUnit, FormatError, is_crypto_unit


class TestRawConstruction:
    """Raw values are stored as already-scaled magnitudes."""

    def test_from_int(self):
        assert CryptoUnit(554).value == 554
        assert CryptoUnit(-554).value == -554

    def test_from_str(self):
        assert CryptoUnit("554").value == 554
        assert CryptoUnit("-554").value == -554

    def test_from_crypto_unit(self):
        """Constructing from an instance copies the magnitude."""
        original = CryptoUnit(42)
        copy = CryptoUnit(original)
        assert copy.value == 42
        assert copy is not original

    def test_from_large(self):
        """Magnitudes are not bounded."""
        assert CryptoUnit(10**50).value == 10**50

    def test_from_integer_is_not_scaled(self):
        """from_integer stores the value as-is."""
        assert CryptoUnit.from_integer(10).value == 10
        assert CryptoUnit.from_integer("10").value == 10

    def test_from_integer_rejects_instance(self):
        with pytest.raises(TypeError):
            CryptoUnit.from_integer(CryptoUnit(1))  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [1.5, 3.0, None, b"12", True, False, [1], Decimal("1")])
    def test_invalid_type_raises(self, value):
        """Floats, bytes, bools and other kinds are rejected."""
        with pytest.raises(TypeError):
            CryptoUnit(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["1.5", "1e5", "abc", "", " 12"])
    def test_invalid_integer_string_raises(self, value):
        """Strings on the raw path must be plain integers."""
        with pytest.raises(FormatError):
            CryptoUnit(value)

    def test_zero(self):
        assert CryptoUnit.zero().value == 0


class TestDecimalConstruction:
    """from_decimal is the only path that applies the 10^8 scale."""

    def test_scales_whole_units(self, one_btc):
        assert one_btc.value == 100_000_000
        assert CryptoUnit(1).value == 1

    def test_literal(self):
        assert CryptoUnit.from_decimal("0.554").value == 55_400_000
        assert CryptoUnit.from_decimal(Decimal("2.5")).value == 250_000_000

    def test_invalid_literal_raises(self):
        with pytest.raises(FormatError):
            CryptoUnit.from_decimal("1,5")


class TestFromValue:
    """Tests for copying instances."""

    def test_copy(self):
        original = CryptoUnit(123)
        copy = CryptoUnit.from_value(original)
        assert copy == original
        assert copy is not original

    def test_rejects_raw(self):
        with pytest.raises(TypeError):
            CryptoUnit.from_value(123)  # type: ignore[arg-type]


class TestImmutability:
    """Instances never change after construction."""

    def test_value_is_read_only(self):
        unit = CryptoUnit(5)
        with pytest.raises(AttributeError):
            unit.value = 6  # type: ignore[misc]

    def test_no_extra_attributes(self):
        unit = CryptoUnit(5)
        with pytest.raises(AttributeError):
            unit.scale = 10  # type: ignore[attr-defined]

    def test_operations_return_new_instances(self):
        unit = CryptoUnit(5)
        result = unit.plus(1)
        assert unit.value == 5
        assert result.value == 6
        assert result is not unit


class TestTypeGuard:
    def test_is_crypto_unit(self):
        assert is_crypto_unit(CryptoUnit(1))
        assert not is_crypto_unit(1)
        assert not is_crypto_unit("1")
        assert not is_crypto_unit(None)

    def test_repr(self):
        assert repr(CryptoUnit(123)) == "<CryptoUnit 123>"
        assert repr(CryptoUnit(-5)) == "<CryptoUnit -5>"


class TestLongLiterals:
    """Digit strings longer than the interpreter's int/str limit still parse."""

    def test_raw_string(self):
        assert CryptoUnit("1" * 5000).value == (10**5000 - 1) // 9
        assert CryptoUnit("-" + "9" * 5000).value == -(10**5000 - 1)

    def test_decimal_exponent(self):
        assert CryptoUnit.from_decimal("1e5000").value == 10**5008

    def test_decimal_long_whole(self):
        repunit = (10**5000 - 1) // 9
        assert CryptoUnit.from_decimal("1" * 5000 + ".5").value == repunit * 10**8 + 50_000_000

    def test_decimal_from_large_int(self):
        assert CryptoUnit.from_decimal(10**5000).value == 10**5008
