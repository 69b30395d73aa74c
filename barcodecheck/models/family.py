"""
Barcode families and their fixed configuration.
"""

from dataclasses import dataclass
from enum import Enum


class BarcodeFamily(str, Enum):
    """Supported identification code families."""

    EAN8 = "EAN-8"
    EAN13 = "EAN-13"
    EAN14 = "EAN-14"
    UPCA = "UPC-A"
    UPCE = "UPC-E"
    GLN = "GLN"
    GSIN = "GSIN"
    SSCC = "SSCC"
    ISBN10 = "ISBN-10"
    ISBN13 = "ISBN-13"
    IMEI = "IMEI"
    IMEISV = "IMEISV"


class ChecksumAlgorithm(str, Enum):
    """Check digit scheme applied to a family."""

    MOD10 = "mod10"
    LUHN = "luhn"
    ISBN10 = "isbn10"
    UPCE = "upce"
    NONE = "none"


@dataclass(frozen=True)
class FamilyConfig:
    """Accepted total lengths (payload + check digit) and checksum scheme."""

    lengths: tuple[int, ...]
    algorithm: ChecksumAlgorithm

    def accepts_length(self, length: int) -> bool:
        return length in self.lengths


FAMILY_CONFIGS: dict[BarcodeFamily, FamilyConfig] = {
    BarcodeFamily.EAN8: FamilyConfig((8,), ChecksumAlgorithm.MOD10),
    BarcodeFamily.EAN13: FamilyConfig((13,), ChecksumAlgorithm.MOD10),
    BarcodeFamily.EAN14: FamilyConfig((14,), ChecksumAlgorithm.MOD10),
    BarcodeFamily.UPCA: FamilyConfig((12,), ChecksumAlgorithm.MOD10),
    # 6 digits: compressed body only, no check digit to verify
    BarcodeFamily.UPCE: FamilyConfig((6, 7, 8), ChecksumAlgorithm.UPCE),
    BarcodeFamily.GLN: FamilyConfig((13,), ChecksumAlgorithm.MOD10),
    BarcodeFamily.GSIN: FamilyConfig((17,), ChecksumAlgorithm.MOD10),
    BarcodeFamily.SSCC: FamilyConfig((18,), ChecksumAlgorithm.MOD10),
    BarcodeFamily.ISBN10: FamilyConfig((10,), ChecksumAlgorithm.ISBN10),
    BarcodeFamily.ISBN13: FamilyConfig((13,), ChecksumAlgorithm.MOD10),
    # Only the 15-digit form carries a Luhn digit; 14 (TAC + serial) and
    # 16 (IMEISV) are accepted on shape alone.
    BarcodeFamily.IMEI: FamilyConfig((14, 15, 16), ChecksumAlgorithm.LUHN),
    BarcodeFamily.IMEISV: FamilyConfig((16,), ChecksumAlgorithm.NONE),
}


def get_family_config(family: BarcodeFamily | str) -> FamilyConfig:
    """
    Look up the configuration for a family.

    Args:
        family: Family enum member or its value (e.g. "EAN-13")

    Returns:
        The family's FamilyConfig
    """
    return FAMILY_CONFIGS[BarcodeFamily(family)]
