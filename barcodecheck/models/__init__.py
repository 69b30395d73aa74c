"""
Family configuration and validation result models.
"""

from barcodecheck.models.family import (
    FAMILY_CONFIGS,
    BarcodeFamily,
    ChecksumAlgorithm,
    FamilyConfig,
    get_family_config,
)
from barcodecheck.models.result import (
    InvalidCodeError,
    ValidationKind,
    ValidationResult,
)

__all__ = [
    # Family
    "BarcodeFamily",
    "ChecksumAlgorithm",
    "FamilyConfig",
    "FAMILY_CONFIGS",
    "get_family_config",
    # Result
    "ValidationKind",
    "ValidationResult",
    "InvalidCodeError",
]
