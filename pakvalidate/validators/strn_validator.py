"""
STRN validator (Sales Tax Registration Number, issued by FBR)

[Format]
- 13 digits, dashes/spaces allowed as separators
- First 2 digits: RTO (Regional Tax Office) jurisdiction code
- Formatted: XX-XXXX-XXXX-XXX
"""
import re
from types import MappingProxyType
from typing import Optional

from .base_validator import BaseValidator
from ..core.result import ValidationResult


class StrnValidator(BaseValidator):
    """STRN validator"""

    FIELD_NAME = 'STRN'

    STRN_PATTERN = re.compile(r'[0-9]{13}')

    # RTO jurisdiction by first 2 digits
    RTO_JURISDICTIONS = MappingProxyType({
        '01': 'RTO Karachi (Zone-I)',
        '02': 'RTO Karachi (Zone-II)',
        '03': 'RTO Karachi (Zone-III)',
        '04': 'RTO Hyderabad',
        '05': 'RTO Sukkur',
        '06': 'RTO Lahore (Zone-I)',
        '07': 'RTO Lahore (Zone-II)',
        '08': 'RTO Faisalabad',
        '09': 'RTO Multan',
        '10': 'RTO Gujranwala',
        '11': 'RTO Sialkot',
        '12': 'RTO Rawalpindi',
        '13': 'RTO Islamabad',
        '14': 'RTO Peshawar',
        '15': 'RTO Quetta',
        '16': 'RTO Abbottabad',
        '17': 'RTO Sargodha',
        '18': 'RTO Bahawalpur',
    })

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a STRN"""
        missing = self.required_failure(value)
        if missing:
            return missing

        strn = self.strip_chars(value, '- ')

        if self.has_non_ascii(strn):
            return ValidationResult.failure("STRN must contain only ASCII digits.")

        if not self.STRN_PATTERN.fullmatch(strn):
            return ValidationResult.failure("STRN must be exactly 13 digits.")

        # All zeros checked first so it gets its own message
        if strn == '0' * 13:
            return ValidationResult.failure("STRN cannot be all zeros.")

        if self.is_identical_digits(strn):
            return ValidationResult.failure("STRN cannot contain all identical digits.")

        region_code = strn[:2]

        metadata = {
            'Formatted': f"{strn[:2]}-{strn[2:6]}-{strn[6:10]}-{strn[10:13]}",
            'RegionCode': region_code,
        }

        jurisdiction = self.RTO_JURISDICTIONS.get(region_code)
        if jurisdiction:
            metadata['Jurisdiction'] = jurisdiction

        return ValidationResult.success(strn, metadata)

    def format(self, value: Optional[str]) -> Optional[str]:
        """XX-XXXX-XXXX-XXX, or None if invalid"""
        return self.metadata_value(value, 'Formatted')

    def get_jurisdiction(self, value: Optional[str]) -> Optional[str]:
        return self.metadata_value(value, 'Jurisdiction')
