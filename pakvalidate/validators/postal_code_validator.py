"""
Postal code validator (Pakistan)

[Format]
- Exactly 5 digits, e.g. 44000 (Islamabad), 75500 (Karachi)
- Numeric value within 10000-97000
- First 2 digits: postal region
"""
import re
from types import MappingProxyType
from typing import Optional

from .base_validator import BaseValidator
from ..core.result import ValidationResult


class PostalCodeValidator(BaseValidator):
    """Postal code validator with region detection"""

    FIELD_NAME = 'Postal code'

    POSTAL_PATTERN = re.compile(r'[0-9]{5}')

    MIN_CODE = 10000
    MAX_CODE = 97000

    # Region by first 2 digits
    REGION_PREFIXES = MappingProxyType({
        '10': 'Peshawar',
        '12': 'Peshawar Cantonment',
        '17': 'Haripur / Hazara',
        '18': 'Abbottabad',
        '19': 'Mansehra',
        '20': 'Rawalpindi',
        '21': 'Rawalpindi',
        '22': 'Attock',
        '25': 'Murree / Galiyat',
        '30': 'Lahore',
        '31': 'Lahore',
        '33': 'Gujranwala',
        '34': 'Sialkot',
        '35': 'Faisalabad',
        '38': 'Multan',
        '40': 'Sargodha',
        '42': 'Sahiwal',
        '44': 'Islamabad',
        '45': 'Islamabad',
        '46': 'Islamabad / Rawalpindi',
        '47': 'Taxila / Wah',
        '50': 'Bahawalpur',
        '54': 'Lahore (extended)',
        '56': 'Gujrat',
        '60': 'Dera Ghazi Khan',
        '62': 'Rahim Yar Khan',
        '64': 'Vehari',
        '70': 'Hyderabad',
        '71': 'Hyderabad',
        '72': 'Sukkur',
        '74': 'Karachi',
        '75': 'Karachi',
        '76': 'Thatta / Badin',
        '77': 'Larkana',
        '80': 'Quetta',
        '82': 'Zhob / Loralai',
        '84': 'Turbat / Gwadar',
        '86': 'Kalat / Khuzdar',
    })

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a 5-digit postal code"""
        missing = self.required_failure(value)
        if missing:
            return missing

        code = re.sub(r'\s', '', value)

        if self.has_non_ascii(code):
            return ValidationResult.failure("Postal code must contain only ASCII digits.")

        if not self.POSTAL_PATTERN.fullmatch(code):
            return ValidationResult.failure("Postal code must be exactly 5 digits.")

        if not self.MIN_CODE <= int(code) <= self.MAX_CODE:
            return ValidationResult.failure(
                f"Postal code is outside the valid Pakistani range ({self.MIN_CODE}-{self.MAX_CODE}).")

        region_prefix = code[:2]
        metadata = {'RegionPrefix': region_prefix}

        region = self.REGION_PREFIXES.get(region_prefix)
        if region:
            metadata['Region'] = region

        return ValidationResult.success(code, metadata)

    def get_region(self, value: Optional[str]) -> Optional[str]:
        """Region name, or None (invalid or unlisted prefix)"""
        return self.metadata_value(value, 'Region')
