"""
NTN validator (National Tax Number, issued by FBR)

[Accepted shapes]
1. Standard: 7 digits + 1 check digit, e.g. 1234567-8 or 12345678
2. CNIC-based: 13 digits, validated entirely by CnicValidator
"""
import re
from typing import Optional

from .base_validator import BaseValidator
from .cnic_validator import CnicValidator
from ..core.result import ValidationResult


class NtnValidator(BaseValidator):
    """NTN validator"""

    FIELD_NAME = 'NTN'

    NTN_PATTERN = re.compile(r'[0-9]{7}-?[0-9]')

    def __init__(self, cnic_validator: Optional[CnicValidator] = None):
        self.cnic_validator = cnic_validator or CnicValidator()

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a standard (7+1) or CNIC-based (13 digit) NTN"""
        missing = self.required_failure(value)
        if missing:
            return missing

        ntn = value.strip()
        digits = ntn.replace('-', '')

        if not self.is_ascii_digits(digits):
            return ValidationResult.failure("NTN must contain only digits and optional dashes.")

        # CNIC-based NTN
        if len(digits) == 13:
            cnic_result = self.cnic_validator.validate(digits)
            if not cnic_result.is_valid:
                return ValidationResult.failure("CNIC-based NTN has invalid CNIC format.")

            metadata = {
                'Type': 'CNIC-based',
                'Formatted': cnic_result.metadata['Formatted'],
            }
            return ValidationResult.success(digits, metadata)

        # Standard NTN: XXXXXXX-X or XXXXXXXX
        if not self.NTN_PATTERN.fullmatch(ntn):
            return ValidationResult.failure(
                "NTN must be 7+1 digits (e.g., 1234567-8) or a 13-digit CNIC-based NTN.")

        if len(digits) != 8:
            return ValidationResult.failure("Standard NTN must contain exactly 8 digits.")

        if self.is_identical_digits(digits):
            return ValidationResult.failure("NTN cannot contain all identical digits.")

        metadata = {
            'Type': 'Standard',
            'Formatted': f"{digits[:7]}-{digits[7]}",
        }
        return ValidationResult.success(digits, metadata)

    def format(self, value: Optional[str]) -> Optional[str]:
        """XXXXXXX-X (standard) or XXXXX-XXXXXXX-X (CNIC-based), or None"""
        return self.metadata_value(value, 'Formatted')

    def get_type(self, value: Optional[str]) -> Optional[str]:
        """'Standard' or 'CNIC-based', or None"""
        return self.metadata_value(value, 'Type')
