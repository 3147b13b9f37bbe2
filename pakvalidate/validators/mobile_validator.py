"""
Mobile number validator (Pakistan)

[Accepted formats]
- 03001234567, 0300-1234567, 0300 1234567
- +923001234567, 923001234567, 00923001234567, (+92)3001234567
- Spaces, dashes and parentheses are ignored

[Carrier detection]
- 4-digit prefix (0 + first 3 subscriber digits) looked up in CARRIER_PREFIXES
- Unlisted prefix -> Carrier = "Unknown" (the key is always present)
"""
import re
from types import MappingProxyType
from typing import Optional

from .base_validator import BaseValidator
from ..core.result import ValidationResult


def _prefixes(carrier: str, *prefixes: str) -> dict:
    return {prefix: carrier for prefix in prefixes}


class MobileValidator(BaseValidator):
    """Mobile number validator with carrier detection"""

    FIELD_NAME = 'Mobile number'

    # Optional 0092 / +92 / 92 / 0, then a 10-digit subscriber number starting with 3
    MOBILE_PATTERN = re.compile(r'(?:(?:00|\+)?92|0)?(3[0-9]{9})')

    CARRIER_PREFIXES = MappingProxyType({
        # Jazz (Mobilink + Warid)
        **_prefixes('Jazz', '0300', '0301', '0302', '0303', '0304', '0305',
                    '0306', '0307', '0308', '0309',
                    '0321', '0322', '0323', '0324', '0325'),
        # Zong
        **_prefixes('Zong', '0310', '0311', '0312', '0313', '0314', '0315',
                    '0316', '0317', '0318', '0319'),
        # Ufone
        **_prefixes('Ufone', '0330', '0331', '0332', '0333', '0334', '0335',
                    '0336', '0337', '0338', '0339'),
        # Telenor
        **_prefixes('Telenor', '0340', '0341', '0342', '0343', '0344', '0345',
                    '0346', '0347', '0348', '0349'),
        # SCO (Special Communications Organization, AJK/GB)
        **_prefixes('SCO', '0355', '0356', '0357'),
    })

    UNKNOWN_CARRIER = 'Unknown'

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a mobile number and detect its carrier"""
        missing = self.required_failure(value)
        if missing:
            return missing

        mobile = self.strip_chars(value, ' -()')

        # Reject non-ASCII early (e.g. Urdu digits)
        if self.has_non_ascii(mobile):
            return ValidationResult.failure("Mobile number must contain only ASCII digits.")

        match = self.MOBILE_PATTERN.fullmatch(mobile)
        if not match:
            return ValidationResult.failure(
                "Invalid Pakistani mobile number. Expected format: 03XXXXXXXXX, +923XXXXXXXXX.")

        subscriber = match.group(1)
        local = '0' + subscriber
        international = '+92' + subscriber
        prefix = local[:4]

        metadata = {
            'LocalFormat': local,
            'InternationalFormat': international,
            'E164': international,
            'Prefix': prefix,
            'Carrier': self.CARRIER_PREFIXES.get(prefix, self.UNKNOWN_CARRIER),
        }

        return ValidationResult.success(local, metadata)

    def get_carrier(self, value: Optional[str]) -> Optional[str]:
        """Carrier name ("Unknown" for unlisted prefixes), or None if invalid"""
        return self.metadata_value(value, 'Carrier')

    def to_international(self, value: Optional[str]) -> Optional[str]:
        """E.164 form (+923XXXXXXXXX), or None if invalid"""
        return self.metadata_value(value, 'E164')
