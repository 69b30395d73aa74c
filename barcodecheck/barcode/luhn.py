"""
Luhn modulo-10 check digit, used by IMEI and payment card numbers.
"""

from barcodecheck.barcode.digits import has_shape, is_digits


def collapse(number: int) -> int:
    """Replace a number by the sum of its decimal digits (18 -> 9)."""
    return sum(int(ch) for ch in str(abs(number)))


def compute_check_digit(payload: str) -> int:
    """
    Calculate the Luhn check digit for a payload.

    Walking the payload from the right, the 1st, 3rd, ... digits are doubled
    and collapsed to their digit sum; the 2nd, 4th, ... digits are added as
    they are. Check digit = (10 - (total mod 10)) mod 10.

    Example: 49015420323751 -> 8 (IMEI 490154203237518).
    """
    if not is_digits(payload):
        raise ValueError(f"Payload must be a non-empty digit string, got {payload!r}")

    doubled = 0
    direct = 0
    for i, digit in enumerate(reversed(payload)):
        if i % 2 == 0:
            doubled += collapse(2 * int(digit))
        else:
            direct += int(digit)

    return (10 - ((doubled + direct) % 10)) % 10


def validate(code: str, expected_length: int) -> bool:
    """
    Validate a Luhn code of a fixed length.

    Args:
        code: Complete code including the check digit
        expected_length: Total length (15 for IMEI, 16 for most cards)

    Returns:
        True if length, characters and check digit are all correct
    """
    if expected_length < 2 or not has_shape(code, expected_length):
        return False

    return compute_check_digit(code[:-1]) == int(code[-1])
