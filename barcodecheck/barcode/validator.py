"""
Validation entry points, one per barcode family.

Every ``is_valid_*`` function takes a raw code, strips separators according
to the settings and returns a bool. It never raises. ``validate_code``
returns a ValidationResult that says why a code was rejected.
"""

from collections.abc import Callable

import structlog

from barcodecheck.barcode import isbn, luhn, mod10, upce
from barcodecheck.barcode.digits import ASCII_DIGITS, has_shape, is_digits, strip_separators
from barcodecheck.config import get_settings
from barcodecheck.models.family import (
    BarcodeFamily,
    ChecksumAlgorithm,
    get_family_config,
)
from barcodecheck.models.result import ValidationKind, ValidationResult

logger = structlog.get_logger(__name__)


def normalize_code(code: str) -> str:
    """
    Strip configured separators from a code.

    Args:
        code: Raw code, e.g. "978-0-306-40615-7"

    Returns:
        Code without separators
    """
    settings = get_settings()
    return strip_separators(code, settings.separators, settings.strip_whitespace)


def _checked(family: BarcodeFamily, code: str, valid: bool) -> bool:
    if not valid:
        logger.debug("Code rejected", family=family.value, code_length=len(code))
    return valid


def is_valid_ean8(code: str) -> bool:
    """Validate an EAN-8 (GTIN-8) code."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.EAN8, code, mod10.validate(code, 8))


def is_valid_ean13(code: str) -> bool:
    """Validate an EAN-13 (GTIN-13) code."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.EAN13, code, mod10.validate(code, 13))


def is_valid_ean14(code: str) -> bool:
    """Validate an EAN-14 (GTIN-14) code."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.EAN14, code, mod10.validate(code, 14))


def is_valid_upca(code: str) -> bool:
    """Validate a UPC-A (GTIN-12) code."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.UPCA, code, mod10.validate(code, 12))


def is_valid_upce(code: str) -> bool:
    """
    Validate a UPC-E code.

    6-digit codes have no check digit and are always valid. 7-digit codes
    assume number system 0; 8-digit codes must start with 0.
    """
    code = normalize_code(code)
    return _checked(BarcodeFamily.UPCE, code, upce.validate(code))


def is_valid_gsin(code: str) -> bool:
    """Validate a 17-digit Global Shipment Identification Number."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.GSIN, code, mod10.validate(code, 17))


def is_valid_sscc(code: str) -> bool:
    """Validate an 18-digit Serial Shipping Container Code."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.SSCC, code, mod10.validate(code, 18))


def is_valid_gln(code: str) -> bool:
    """Validate a 13-digit Global Location Number."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.GLN, code, mod10.validate(code, 13))


def is_valid_isbn(code: str) -> bool:
    """Validate an ISBN-10 or ISBN-13."""
    code = normalize_code(code)
    valid = isbn.is_valid_isbn(code, accept_x=get_settings().isbn10_accept_x)
    family = BarcodeFamily.ISBN13 if len(code) == 13 else BarcodeFamily.ISBN10
    return _checked(family, code, valid)


def is_valid_isbn10(code: str) -> bool:
    """Validate an ISBN-10 only."""
    code = normalize_code(code)
    valid = isbn.validate_isbn10(code, accept_x=get_settings().isbn10_accept_x)
    return _checked(BarcodeFamily.ISBN10, code, valid)


def is_valid_isbn13(code: str) -> bool:
    """Validate an ISBN-13 only."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.ISBN13, code, isbn.validate_isbn13(code))


def is_valid_imei(code: str) -> bool:
    """
    Validate an IMEI or IMEISV.

    - 14 digits: TAC + serial without check digit, always valid
    - 15 digits: IMEI with Luhn check digit
    - 16 digits: IMEISV, software version instead of check digit, always valid
    """
    code = normalize_code(code)
    if not is_digits(code):
        valid = False
    elif len(code) in (14, 16):
        valid = True
    elif len(code) == 15:
        valid = luhn.validate(code, 15)
    else:
        valid = False
    return _checked(BarcodeFamily.IMEI, code, valid)


def is_valid_imeisv(code: str) -> bool:
    """Validate a 16-digit IMEISV (no check digit)."""
    code = normalize_code(code)
    return _checked(BarcodeFamily.IMEISV, code, has_shape(code, 16))


def isbn10_to_isbn13(code: str) -> str:
    """
    Convert an ISBN-10 to ISBN-13 after stripping separators.

    Raises:
        InvalidCodeError: If the code is not a valid ISBN-10
    """
    return isbn.isbn10_to_isbn13(normalize_code(code), accept_x=get_settings().isbn10_accept_x)


def isbn13_to_isbn10(code: str) -> str:
    """
    Convert a 978 ISBN-13 to ISBN-10 after stripping separators.

    Raises:
        InvalidCodeError: If the code is not a valid 978 ISBN-13
    """
    return isbn.isbn13_to_isbn10(normalize_code(code))


def upce_to_upca(code: str) -> str:
    """
    Convert a UPC-E code to UPC-A after stripping separators.

    Raises:
        InvalidCodeError: If the code is malformed or its check digit is wrong
    """
    return upce.upce_to_upca(normalize_code(code))


FAMILY_VALIDATORS: dict[BarcodeFamily, Callable[[str], bool]] = {
    BarcodeFamily.EAN8: is_valid_ean8,
    BarcodeFamily.EAN13: is_valid_ean13,
    BarcodeFamily.EAN14: is_valid_ean14,
    BarcodeFamily.UPCA: is_valid_upca,
    BarcodeFamily.UPCE: is_valid_upce,
    BarcodeFamily.GLN: is_valid_gln,
    BarcodeFamily.GSIN: is_valid_gsin,
    BarcodeFamily.SSCC: is_valid_sscc,
    BarcodeFamily.ISBN10: is_valid_isbn10,
    BarcodeFamily.ISBN13: is_valid_isbn13,
    BarcodeFamily.IMEI: is_valid_imei,
    BarcodeFamily.IMEISV: is_valid_imeisv,
}


def is_valid(code: str, family: BarcodeFamily | str) -> bool:
    """Validate a code against a family given as enum member or value."""
    return FAMILY_VALIDATORS[BarcodeFamily(family)](code)


def _has_valid_characters(code: str, family: BarcodeFamily) -> bool:
    if family == BarcodeFamily.ISBN10 and get_settings().isbn10_accept_x:
        return is_digits(code[:-1]) and (code[-1] in ASCII_DIGITS or code[-1] in "Xx")
    return is_digits(code)


def _expected_check_digit(payload: str, algorithm: ChecksumAlgorithm) -> str:
    if algorithm == ChecksumAlgorithm.MOD10:
        return str(mod10.compute_check_digit(payload))
    if algorithm == ChecksumAlgorithm.LUHN:
        return str(luhn.compute_check_digit(payload))
    if algorithm == ChecksumAlgorithm.ISBN10:
        return isbn.compute_check_digit10(payload)
    raise ValueError(f"No check digit defined for algorithm {algorithm.value}")


def _rejected(
    code: str,
    family: BarcodeFamily,
    kind: ValidationKind,
    message: str,
    expected: str | None = None,
    actual: str | None = None,
) -> ValidationResult:
    logger.debug(
        "Code rejected",
        family=family.value,
        code_length=len(code),
        reason=kind.value,
    )
    return ValidationResult(
        code=code,
        family=family,
        kind=kind,
        expected_check_digit=expected,
        actual_check_digit=actual,
        message=message,
    )


def validate_code(code: str, family: BarcodeFamily | str) -> ValidationResult:
    """
    Validate a code and report why it failed.

    Checks run in order: length, characters, number system (UPC-E only),
    check digit. The first failing check decides the result kind.

    Args:
        code: Raw code; separators are stripped first
        family: Family to validate against

    Returns:
        ValidationResult whose ``valid`` agrees with ``is_valid(code, family)``
    """
    family = BarcodeFamily(family)
    config = get_family_config(family)
    cleaned = normalize_code(code)

    if not config.accepts_length(len(cleaned)):
        expected_lengths = "/".join(str(length) for length in config.lengths)
        return _rejected(
            cleaned,
            family,
            ValidationKind.WRONG_LENGTH,
            f"{family.value} must have {expected_lengths} characters, got {len(cleaned)}",
        )

    if not _has_valid_characters(cleaned, family):
        return _rejected(
            cleaned,
            family,
            ValidationKind.INVALID_CHARACTERS,
            "Code contains non-numeric characters",
        )

    if family == BarcodeFamily.UPCE:
        if len(cleaned) == 6:
            return ValidationResult(
                code=cleaned,
                family=family,
                kind=ValidationKind.VALID,
                message="No check digit to verify",
            )
        candidate = upce.expand(cleaned)
        if candidate is None:
            return _rejected(
                cleaned,
                family,
                ValidationKind.INVALID_NUMBER_SYSTEM,
                "8-digit UPC-E must start with number system 0",
            )
        payload, algorithm = candidate[:-1], ChecksumAlgorithm.MOD10
    elif config.algorithm == ChecksumAlgorithm.NONE or (
        family == BarcodeFamily.IMEI and len(cleaned) != 15
    ):
        return ValidationResult(
            code=cleaned,
            family=family,
            kind=ValidationKind.VALID,
            message="No check digit to verify",
        )
    else:
        payload, algorithm = cleaned[:-1], config.algorithm

    expected = _expected_check_digit(payload, algorithm)
    actual = cleaned[-1].upper()

    if expected != actual:
        return _rejected(
            cleaned,
            family,
            ValidationKind.CHECKSUM_MISMATCH,
            f"Invalid {family.value} checksum: expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )

    return ValidationResult(
        code=cleaned,
        family=family,
        kind=ValidationKind.VALID,
        expected_check_digit=expected,
        actual_check_digit=actual,
    )


def detect_families(code: str) -> list[BarcodeFamily]:
    """
    List every family that accepts a code.

    Lengths overlap (EAN-13, GLN and ISBN-13 are all 13 digits), so a code
    can match several families.
    """
    return [family for family in BarcodeFamily if validate_code(code, family).valid]


def compute_check_digit(payload: str, family: BarcodeFamily | str) -> str:
    """
    Compute the check digit that completes a payload for a family.

    Args:
        payload: Code without its check digit. For UPC-E pass the 6-digit
            body, optionally preceded by number system 0.
        family: Target family

    Returns:
        The check digit as a single character ("X" is possible for ISBN-10)

    Raises:
        ValueError: If the payload has the wrong shape or the family has no
            check digit
    """
    family = BarcodeFamily(family)
    config = get_family_config(family)
    payload = normalize_code(payload)

    if family == BarcodeFamily.UPCE:
        if len(payload) == 7 and payload[0] == upce.NUMBER_SYSTEM:
            payload = payload[1:]
        return str(mod10.compute_check_digit(upce.expand_body(payload)))

    if family == BarcodeFamily.IMEI:
        if not has_shape(payload, 14):
            raise ValueError(f"IMEI payload must be 14 digits, got {payload!r}")
        return str(luhn.compute_check_digit(payload))

    if config.algorithm == ChecksumAlgorithm.NONE:
        raise ValueError(f"{family.value} has no check digit")

    total_length = config.lengths[0]
    if not has_shape(payload, total_length - 1):
        raise ValueError(
            f"{family.value} payload must be {total_length - 1} digits, got {payload!r}"
        )

    return _expected_check_digit(payload, config.algorithm)
