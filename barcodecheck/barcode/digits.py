"""
Digit-string helpers shared by every checksum module.
"""

ASCII_DIGITS = frozenset("0123456789")

WHITESPACE = frozenset(" \t\r\n")


def is_digits(value: str) -> bool:
    """
    Check that a value is a non-empty string of ASCII digits.

    ``str.isdigit()`` is not enough here: it accepts characters such as
    superscripts that ``int()`` cannot convert.
    """
    return bool(value) and all(ch in ASCII_DIGITS for ch in value)


def has_shape(value: str, length: int) -> bool:
    """Check that a value is exactly ``length`` ASCII digits."""
    return len(value) == length and is_digits(value)


def strip_separators(value: str, separators: str = "-", strip_whitespace: bool = False) -> str:
    """
    Remove separator characters from a code.

    Args:
        value: Raw code as typed or scanned (e.g. ``978-0-306-40615-7``)
        separators: Characters to drop
        strip_whitespace: Also drop spaces, tabs and line breaks

    Returns:
        The code with separators removed
    """
    dropped = set(separators)
    if strip_whitespace:
        dropped |= WHITESPACE
    return "".join(ch for ch in value if ch not in dropped)
