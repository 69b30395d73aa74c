"""
Check digit validation for EAN/UPC/GTIN, ISBN, IMEI, SSCC, GSIN and GLN codes.
"""

from barcodecheck.barcode import (
    compute_check_digit,
    detect_families,
    is_valid,
    is_valid_ean8,
    is_valid_ean13,
    is_valid_ean14,
    is_valid_gln,
    is_valid_gsin,
    is_valid_imei,
    is_valid_isbn,
    is_valid_sscc,
    is_valid_upca,
    is_valid_upce,
    isbn10_to_isbn13,
    isbn13_to_isbn10,
    normalize_code,
    upce_to_upca,
    validate_code,
)
from barcodecheck.models import (
    BarcodeFamily,
    InvalidCodeError,
    ValidationKind,
    ValidationResult,
)

__version__ = "1.0.0"

__all__ = [
    "BarcodeFamily",
    "InvalidCodeError",
    "ValidationKind",
    "ValidationResult",
    "compute_check_digit",
    "detect_families",
    "is_valid",
    "is_valid_ean8",
    "is_valid_ean13",
    "is_valid_ean14",
    "is_valid_gln",
    "is_valid_gsin",
    "is_valid_imei",
    "is_valid_isbn",
    "is_valid_sscc",
    "is_valid_upca",
    "is_valid_upce",
    "isbn10_to_isbn13",
    "isbn13_to_isbn10",
    "normalize_code",
    "upce_to_upca",
    "validate_code",
]
