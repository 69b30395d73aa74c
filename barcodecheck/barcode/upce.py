"""
UPC-E to UPC-A expansion.

UPC-E compresses a UPC-A code by dropping zeros from the manufacturer and
item numbers. The sixth digit of the compressed body says which zeros were
dropped:

| selector | manufacturer   | item         |
|----------|----------------|--------------|
| 0, 1, 2  | d0 d1 s 0 0    | 0 0 d2 d3 d4 |
| 3        | d0 d1 d2 0 0   | 0 0 0 d3 d4  |
| 4        | d0 d1 d2 d3 0  | 0 0 0 0 d4   |
| 5 - 9    | d0 d1 d2 d3 d4 | 0 0 0 0 s    |

The expanded code is "0" + manufacturer + item + check digit.
"""

from barcodecheck.barcode import mod10
from barcodecheck.barcode.digits import has_shape, is_digits
from barcodecheck.models.family import BarcodeFamily
from barcodecheck.models.result import InvalidCodeError

NUMBER_SYSTEM = "0"


def split(code: str) -> tuple[str, str] | None:
    """
    Separate a 7- or 8-digit UPC-E into its 6-digit body and check digit.

    A 7-digit code has no number system digit and "0" is assumed. An 8-digit
    code must start with "0".

    Returns:
        (body, check_digit), or None if the code cannot be split
    """
    if not is_digits(code):
        return None

    if len(code) == 7:
        return code[:6], code[6]
    if len(code) == 8:
        if code[0] != NUMBER_SYSTEM:
            return None
        return code[1:7], code[7]
    return None


def expand_body(body: str) -> str:
    """
    Expand a 6-digit UPC-E body into the 11-digit UPC-A payload.

    Args:
        body: Compressed body (no number system or check digit)

    Returns:
        Number system digit + manufacturer + item, without check digit
    """
    if not has_shape(body, 6):
        raise ValueError(f"UPC-E body must be 6 digits, got {body!r}")

    selector = body[5]
    if selector in "012":
        manufacturer = body[0:2] + selector + "00"
        item = "00" + body[2:5]
    elif selector == "3":
        manufacturer = body[0:3] + "00"
        item = "000" + body[3:5]
    elif selector == "4":
        manufacturer = body[0:4] + "0"
        item = "0000" + body[4]
    else:
        manufacturer = body[0:5]
        item = "0000" + selector

    return NUMBER_SYSTEM + manufacturer + item


def expand(code: str) -> str | None:
    """
    Expand a 7- or 8-digit UPC-E into a 12-digit UPC-A candidate.

    The candidate keeps the UPC-E check digit, so validating it as UPC-A
    validates the UPC-E. A 6-digit code has no check digit and cannot be
    expanded into a candidate.

    Returns:
        12-digit UPC-A candidate, or None for malformed input
    """
    parts = split(code)
    if parts is None:
        return None

    body, check_digit = parts
    return expand_body(body) + check_digit


def validate(code: str) -> bool:
    """
    Validate a UPC-E code.

    6-digit codes carry no check digit and are always accepted. 7- and
    8-digit codes are expanded and checked as UPC-A.
    """
    if not is_digits(code):
        return False
    if len(code) == 6:
        return True

    candidate = expand(code)
    if candidate is None:
        return False

    return mod10.validate(candidate, 12)


def upce_to_upca(code: str) -> str:
    """
    Convert a UPC-E code to the full 12-digit UPC-A.

    The check digit is computed for 6-digit input and verified otherwise.

    Raises:
        InvalidCodeError: If the code is malformed or its check digit is wrong
    """
    if has_shape(code, 6):
        payload = expand_body(code)
        return payload + str(mod10.compute_check_digit(payload))

    candidate = expand(code)
    if candidate is None:
        raise InvalidCodeError(
            code,
            BarcodeFamily.UPCE,
            "expected 6-8 digits with number system 0",
        )
    if not mod10.validate(candidate, 12):
        raise InvalidCodeError(code, BarcodeFamily.UPCE, "check digit mismatch")

    return candidate
