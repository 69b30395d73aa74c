"""
ISBN check digits.

ISBN-10 uses a modulo-11 scheme whose check value 10 is written as "X".
ISBN-13 is an EAN-13 with a 978/979 prefix and uses the modulo-10 scheme.
"""

from barcodecheck.barcode import mod10
from barcodecheck.barcode.digits import ASCII_DIGITS, has_shape
from barcodecheck.models.family import BarcodeFamily
from barcodecheck.models.result import InvalidCodeError

ISBN10_WEIGHTS = tuple(range(10, 1, -1))

ISBN13_PREFIX_FOR_ISBN10 = "978"


def compute_check_digit10(payload: str) -> str:
    """
    Calculate the ISBN-10 check digit.

    Each of the nine payload digits is multiplied by a weight from 10 down to
    2 and the products are summed. Check value = (11 - (sum mod 11)) mod 11,
    written as "X" when it is 10.

    | ISBN   |  1 |  8 |  4 | 1 |  4 |  6 | 2 | 0 | 1 | Total |
    |--------|----|----|----|---|----|----|---|---|---|-------|
    | Weight | 10 |  9 |  8 | 7 |  6 |  5 | 4 | 3 | 2 |       |
    | Result | 10 | 72 | 32 | 7 | 24 | 30 | 8 | 0 | 2 | 185   |

    (11 - 185 mod 11) mod 11 = 2.

    Args:
        payload: The first nine digits

    Returns:
        "0"-"9" or "X"
    """
    if not has_shape(payload, 9):
        raise ValueError(f"ISBN-10 payload must be 9 digits, got {payload!r}")

    total = sum(int(digit) * weight for digit, weight in zip(payload, ISBN10_WEIGHTS))
    check = (11 - (total % 11)) % 11

    return "X" if check == 10 else str(check)


def compute_check_digit13(payload: str) -> int:
    """Calculate the ISBN-13 check digit (same as EAN-13)."""
    if not has_shape(payload, 12):
        raise ValueError(f"ISBN-13 payload must be 12 digits, got {payload!r}")
    return mod10.compute_check_digit(payload)


def validate_isbn10(code: str, accept_x: bool = True) -> bool:
    """
    Validate an ISBN-10.

    Args:
        code: 10-character ISBN without hyphens
        accept_x: Accept "X"/"x" as the check character. When False only
            digit check characters pass, so ISBNs whose check value is 10
            are always rejected.

    Returns:
        True if the code is well formed and the check character matches
    """
    if len(code) != 10 or not has_shape(code[:9], 9):
        return False

    check = code[9].upper()
    if check not in ASCII_DIGITS and not (accept_x and check == "X"):
        return False

    return compute_check_digit10(code[:9]) == check


def validate_isbn13(code: str) -> bool:
    """Validate an ISBN-13 as a 13-digit modulo-10 code."""
    return mod10.validate(code, 13)


def is_valid_isbn(code: str, accept_x: bool = True) -> bool:
    """
    Validate either ISBN form.

    A 13-character code is checked as ISBN-13; anything else is checked as
    ISBN-10, which rejects every length other than 10.
    """
    if len(code) == 13:
        return validate_isbn13(code)
    return validate_isbn10(code, accept_x=accept_x)


def isbn10_to_isbn13(code: str, accept_x: bool = True) -> str:
    """
    Convert an ISBN-10 to its 978-prefixed ISBN-13.

    Expects a code without separators; see validate_isbn10 for ``accept_x``.

    Raises:
        InvalidCodeError: If the input is not a valid ISBN-10
    """
    if not validate_isbn10(code, accept_x=accept_x):
        raise InvalidCodeError(code, BarcodeFamily.ISBN10, "not a valid ISBN-10")

    payload = ISBN13_PREFIX_FOR_ISBN10 + code[:9]
    return payload + str(mod10.compute_check_digit(payload))


def isbn13_to_isbn10(code: str) -> str:
    """
    Convert a 978-prefixed ISBN-13 back to ISBN-10.

    979-prefixed ISBNs have no ISBN-10 form.

    Raises:
        InvalidCodeError: If the input is not a valid 978 ISBN-13
    """
    if not validate_isbn13(code):
        raise InvalidCodeError(code, BarcodeFamily.ISBN13, "not a valid ISBN-13")
    if not code.startswith(ISBN13_PREFIX_FOR_ISBN10):
        raise InvalidCodeError(
            code,
            BarcodeFamily.ISBN13,
            f"only {ISBN13_PREFIX_FOR_ISBN10}-prefixed ISBNs have an ISBN-10 form",
        )

    payload = code[3:12]
    return payload + compute_check_digit10(payload)
