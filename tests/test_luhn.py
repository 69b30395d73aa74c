"""
Tests for the Luhn check digit.
"""

import random

import pytest

from barcodecheck.barcode import luhn


class TestCollapse:
    """Tests for the digit-sum collapse helper."""

    def test_single_digit_unchanged(self):
        for value in range(10):
            assert luhn.collapse(value) == value

    def test_doubled_values(self):
        assert luhn.collapse(10) == 1
        assert luhn.collapse(12) == 3
        assert luhn.collapse(18) == 9

    def test_same_as_subtracting_nine(self):
        for digit in range(5, 10):
            assert luhn.collapse(2 * digit) == 2 * digit - 9


class TestComputeCheckDigit:
    """Tests for luhn.compute_check_digit."""

    def test_imei(self):
        assert luhn.compute_check_digit("49015420323751") == 8

    def test_known_numbers(self):
        assert luhn.compute_check_digit("7992739871") == 3
        assert luhn.compute_check_digit("411111111111111") == 1

    def test_invalid_payload_raises(self):
        with pytest.raises(ValueError):
            luhn.compute_check_digit("")
        with pytest.raises(ValueError):
            luhn.compute_check_digit("4901542032375X")


class TestValidate:
    """Tests for luhn.validate."""

    def test_valid(self):
        assert luhn.validate("490154203237518", 15)
        assert luhn.validate("79927398713", 11)
        assert luhn.validate("4111111111111111", 16)

    def test_invalid(self):
        assert not luhn.validate("490154203237519", 15)  # Wrong checksum
        assert not luhn.validate("490154203237518", 16)  # Wrong length
        assert not luhn.validate("49015420323751X", 15)  # Non-numeric
        assert not luhn.validate("", 15)

    def test_round_trip(self):
        """Generated 15-digit numbers always validate."""
        rng = random.Random(20240601)
        for _ in range(200):
            payload = "".join(rng.choice("0123456789") for _ in range(14))
            code = payload + str(luhn.compute_check_digit(payload))
            assert luhn.validate(code, 15), f"Expected {code} to be valid"
