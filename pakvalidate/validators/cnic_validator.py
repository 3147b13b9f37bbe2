"""
CNIC validator (Computerized National Identity Card)

[Format]
- 5 digits - 7 digits - 1 digit, e.g. 35202-1234567-1 or 3520212345671
- 13 digits in total, dashes optional

[Derived metadata]
- Gender: parity of the 13th digit (odd = Male, even = Female)
- LocalityCode: first 5 digits
- Province: first digit, only for the 7 known codes (0, 8, 9 have no entry)
- Formatted: XXXXX-XXXXXXX-X
"""
import re
from types import MappingProxyType
from typing import Optional

from .base_validator import BaseValidator
from ..core.result import ValidationResult


class CnicValidator(BaseValidator):
    """CNIC validator"""

    FIELD_NAME = 'CNIC'

    CNIC_PATTERN = re.compile(r'[0-9]{5}-?[0-9]{7}-?[0-9]')

    # Province by first digit
    PROVINCES = MappingProxyType({
        '1': 'Khyber Pakhtunkhwa',
        '2': 'FATA / Merged Areas',
        '3': 'Punjab',
        '4': 'Sindh',
        '5': 'Balochistan',
        '6': 'Islamabad',
        '7': 'Gilgit-Baltistan / AJK',
    })

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a CNIC. Accepts 3520212345671 and 35202-1234567-1"""
        missing = self.required_failure(value)
        if missing:
            return missing

        cnic = value.strip()

        # Reject non-ASCII early (e.g. Urdu digits)
        if self.has_non_ascii(cnic):
            return ValidationResult.failure("CNIC must contain only ASCII digits and optional dashes.")

        if not self.CNIC_PATTERN.fullmatch(cnic):
            return ValidationResult.failure(
                "CNIC must be 13 digits in format XXXXX-XXXXXXX-X or XXXXXXXXXXXXX.")

        digits = cnic.replace('-', '')

        if len(digits) != 13:
            return ValidationResult.failure("CNIC must contain exactly 13 digits.")

        if self.is_identical_digits(digits):
            return ValidationResult.failure("CNIC cannot contain all identical digits.")

        metadata = {
            'Gender': 'Female' if int(digits[12]) % 2 == 0 else 'Male',
            'LocalityCode': digits[:5],
            'Formatted': self.format_digits(digits),
        }

        province = self.PROVINCES.get(digits[0])
        if province:
            metadata['Province'] = province

        return ValidationResult.success(digits, metadata)

    @staticmethod
    def format_digits(digits: str) -> str:
        """13 digits -> XXXXX-XXXXXXX-X"""
        return f"{digits[:5]}-{digits[5:12]}-{digits[12]}"

    def format(self, value: Optional[str]) -> Optional[str]:
        """Standard XXXXX-XXXXXXX-X form, or None if invalid"""
        return self.metadata_value(value, 'Formatted')

    def get_gender(self, value: Optional[str]) -> Optional[str]:
        return self.metadata_value(value, 'Gender')

    def get_province(self, value: Optional[str]) -> Optional[str]:
        return self.metadata_value(value, 'Province')
