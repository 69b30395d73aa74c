"""
Tests for the GS1 weighted modulo-10 check digit.
"""

import pytest

from barcodecheck.barcode import mod10


class TestComputeCheckDigit:
    """Tests for mod10.compute_check_digit."""

    def test_ean13(self):
        """Test checksum calculation for known EAN-13 codes."""
        assert mod10.compute_check_digit("400638133393") == 1
        assert mod10.compute_check_digit("590123412345") == 7
        assert mod10.compute_check_digit("001234567890") == 5
        assert mod10.compute_check_digit("978030640615") == 7

    def test_ean8(self):
        """Test checksum calculation for known EAN-8 codes."""
        assert mod10.compute_check_digit("9638507") == 4
        assert mod10.compute_check_digit("5512345") == 7

    def test_other_lengths(self):
        """UPC-A, EAN-14, GSIN and SSCC payloads."""
        assert mod10.compute_check_digit("03600029145") == 2
        assert mod10.compute_check_digit("0001234560001") == 2
        assert mod10.compute_check_digit("1234567890123456") == 0
        assert mod10.compute_check_digit("10614141123456789") == 7

    def test_weight_three_next_to_check_digit(self):
        """The rightmost payload digit always carries weight 3."""
        assert mod10.weighted_sum("1") == 3
        assert mod10.weighted_sum("10") == 1
        assert mod10.weighted_sum("100") == 3

    def test_all_zero_payload(self):
        assert mod10.compute_check_digit("000000000000") == 0

    def test_invalid_payload_raises(self):
        with pytest.raises(ValueError):
            mod10.compute_check_digit("")
        with pytest.raises(ValueError):
            mod10.compute_check_digit("40063813339A")


class TestValidate:
    """Tests for mod10.validate."""

    def test_valid_codes(self):
        valid_codes = [
            ("4006381333931", 13),
            ("5901234123457", 13),
            ("9780201379624", 13),
            ("96385074", 8),
            ("55123457", 8),
            ("036000291452", 12),
            ("00012345600012", 14),
            ("12345678901234560", 17),
            ("106141411234567897", 18),
        ]
        for code, length in valid_codes:
            assert mod10.validate(code, length), f"Expected {code} to be valid"

    def test_invalid_codes(self):
        invalid_codes = [
            ("4006381333932", 13),  # Wrong checksum
            ("400638133393", 13),  # Too short
            ("40063813339311", 13),  # Too long
            ("400638133393A", 13),  # Non-numeric
            ("", 13),
            ("", 0),
            ("4", 1),
        ]
        for code, length in invalid_codes:
            assert not mod10.validate(code, length), f"Expected {code} to be invalid"

    def test_single_digit_mutation_detected(self):
        """Changing any one digit of a valid code invalidates it."""
        code = "4006381333931"
        for position, original in enumerate(code):
            for digit in "0123456789":
                if digit == original:
                    continue
                mutated = code[:position] + digit + code[position + 1:]
                assert not mod10.validate(mutated, 13), f"{mutated} should be invalid"

    def test_idempotent(self):
        assert [mod10.validate("4006381333931", 13) for _ in range(3)] == [True] * 3
