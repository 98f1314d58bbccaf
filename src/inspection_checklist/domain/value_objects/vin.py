"""Vehicle Identification Number validation."""

import re
from dataclasses import dataclass
from typing import Dict, Optional

VIN_LENGTH = 17
CHECK_DIGIT_POSITION = 8

VIN_WEIGHTS = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)

VIN_TRANSLITERATIONS: Dict[str, int] = {
    'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
    'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'P': 7, 'R': 9, 'S': 2,
    'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
    **{str(digit): digit for digit in range(10)},
}

# I, O and Q are never used in a VIN
VIN_STRUCTURE_PATTERN = re.compile(r'^[A-HJ-NPR-Z0-9]{17}$')


@dataclass(frozen=True)
class VinValidationResult:
    """Outcome of validating a VIN."""

    is_valid: bool
    message: Optional[str] = None


def normalize_vin(vin: str) -> str:
    """Uppercase and trim a VIN."""
    return (vin or "").strip().upper()


def calculate_check_digit(vin: str) -> str:
    """Compute the expected check digit for a structurally valid VIN."""
    total = sum(
        VIN_TRANSLITERATIONS[char] * weight
        for position, (char, weight) in enumerate(zip(vin, VIN_WEIGHTS))
        if position != CHECK_DIGIT_POSITION
    )
    remainder = total % 11
    return "X" if remainder == 10 else str(remainder)


def validate_vin(vin: str) -> VinValidationResult:
    """Validate a VIN for length, character set and checksum."""
    candidate = normalize_vin(vin)

    if len(candidate) != VIN_LENGTH:
        return VinValidationResult(False, "VIN must be exactly 17 characters long.")

    if not VIN_STRUCTURE_PATTERN.match(candidate):
        return VinValidationResult(False, "VIN contains invalid characters (I, O, or Q are not allowed).")

    if candidate[CHECK_DIGIT_POSITION] != calculate_check_digit(candidate):
        return VinValidationResult(False, "Invalid VIN. Checksum does not match.")

    return VinValidationResult(True)
