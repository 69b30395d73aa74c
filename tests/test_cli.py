"""
Tests for the validation CLI.
"""

import json

from click.testing import CliRunner

from barcodecheck.cli import main


class TestValidateCommand:
    """Tests for `barcodecheck validate`."""

    def test_valid_with_family(self):
        result = CliRunner().invoke(main, ["validate", "4006381333931", "--family", "ean13"])
        assert result.exit_code == 0
        assert "valid EAN-13" in result.output

    def test_invalid_with_family(self):
        result = CliRunner().invoke(main, ["validate", "4006381333932", "--family", "EAN13"])
        assert result.exit_code == 1
        assert "checksum" in result.output.lower()

    def test_all_families_lists_only_matches(self):
        """Without --family only the accepting families are printed."""
        result = CliRunner().invoke(main, ["validate", "4006381333931"])
        assert result.exit_code == 0
        assert "EAN-13" in result.output
        assert "GLN" in result.output
        assert "ISBN-13" in result.output
        assert "EAN-8" not in result.output
        assert "wrong_length" not in result.output

    def test_no_family_matches(self):
        result = CliRunner().invoke(main, ["validate", "12345"])
        assert result.exit_code == 1
        assert "no family accepts" in result.output

    def test_all_families_json_lists_only_matches(self):
        result = CliRunner().invoke(main, ["validate", "96385074", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [entry["family"] for entry in data] == ["EAN-8"]

    def test_json_output(self):
        result = CliRunner().invoke(
            main, ["validate", "0-306-40615-2", "--family", "isbn10", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["valid"] is True
        assert data[0]["family"] == "ISBN-10"
        assert data[0]["code"] == "0306406152"

    def test_unknown_family(self):
        result = CliRunner().invoke(main, ["validate", "4006381333931", "--family", "code128"])
        assert result.exit_code == 2


class TestCheckDigitCommand:
    """Tests for `barcodecheck check-digit`."""

    def test_ean13(self):
        result = CliRunner().invoke(main, ["check-digit", "400638133393", "--family", "ean13"])
        assert result.exit_code == 0
        assert "Check digit: 1" in result.output
        assert "Full code: 4006381333931" in result.output

    def test_isbn10_x(self):
        result = CliRunner().invoke(main, ["check-digit", "080442957", "--family", "isbn10"])
        assert result.exit_code == 0
        assert "Check digit: X" in result.output

    def test_upce(self):
        result = CliRunner().invoke(main, ["check-digit", "042526", "--family", "upce"])
        assert result.exit_code == 0
        assert "UPC-A: 004252000061" in result.output

    def test_bad_payload(self):
        result = CliRunner().invoke(main, ["check-digit", "4006381333931", "--family", "ean13"])
        assert result.exit_code == 2

    def test_family_without_check_digit(self):
        result = CliRunner().invoke(main, ["check-digit", "490154203237518", "--family", "imeisv"])
        assert result.exit_code == 2


class TestExpandUpceCommand:
    """Tests for `barcodecheck expand-upce`."""

    def test_expand(self):
        result = CliRunner().invoke(main, ["expand-upce", "0425261"])
        assert result.exit_code == 0
        assert result.output.strip() == "004252000061"

    def test_invalid(self):
        result = CliRunner().invoke(main, ["expand-upce", "10425261"])
        assert result.exit_code == 1
