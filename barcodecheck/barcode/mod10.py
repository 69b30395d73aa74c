"""
GS1 weighted modulo-10 check digit.

Shared by EAN-8, EAN-13, EAN-14, UPC-A, GLN, GSIN, SSCC and ISBN-13, and by
UPC-E once it has been expanded to UPC-A.
"""

from barcodecheck.barcode.digits import has_shape, is_digits


def weighted_sum(payload: str) -> int:
    """
    Sum payload digits with alternating weights 3 and 1.

    Weights are assigned from the right so the digit next to the check digit
    always carries weight 3. Counted from the left, that puts weight 3 on the
    odd positions of an even-length code (EAN-8, UPC-A, EAN-14, SSCC) and on
    the even positions of an odd-length one (EAN-13, GLN, GSIN).
    """
    total = 0
    for i, digit in enumerate(reversed(payload)):
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight
    return total


def compute_check_digit(payload: str) -> int:
    """
    Calculate the modulo-10 check digit for a payload.

    Algorithm:
    1. Weight the payload digits 3, 1, 3, ... starting from the right
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        payload: Digits without the check digit

    Returns:
        Check digit (0-9)
    """
    if not is_digits(payload):
        raise ValueError(f"Payload must be a non-empty digit string, got {payload!r}")

    return (10 - (weighted_sum(payload) % 10)) % 10


def validate(code: str, expected_length: int) -> bool:
    """
    Validate a modulo-10 code of a fixed length.

    Args:
        code: Complete code including the check digit
        expected_length: Total length for the family (13 for EAN-13, ...)

    Returns:
        True if length, characters and check digit are all correct
    """
    if expected_length < 2 or not has_shape(code, expected_length):
        return False

    return compute_check_digit(code[:-1]) == int(code[-1])
