"""
Landline number validator (Pakistan)

[Accepted formats]
- 021-12345678, 051-1234567, 0992-1234567
- +92-21-12345678, +92511234567, 92-51-1234567
- Spaces, dashes and parentheses are ignored

[Validation strategy]
1. Strip formatting characters
2. Normalize +92 / 92 / 0 prefixes to a local form starting with 0
3. Local form must be 10-12 digits
4. Look up the area code, 4-digit codes first, then 3-digit codes
   (0992 Abbottabad must win over any 3-digit code sharing its first digits)
5. A known area code fixes the subscriber length (7 or 8 digits)
6. Unknown area code: still accepted at 10-11 digits with AreaCode = "Unknown"
"""
from collections import namedtuple
from types import MappingProxyType
from typing import Optional

from .base_validator import BaseValidator
from ..core.result import ValidationResult

AreaCodeInfo = namedtuple('AreaCodeInfo', ['city', 'subscriber_digits'])


class LandlineValidator(BaseValidator):
    """Landline number validator with city detection"""

    FIELD_NAME = 'Landline number'

    MIN_LENGTH = 10
    MAX_LENGTH = 12

    # Unknown area codes are accepted only at these lengths
    FALLBACK_LENGTHS = (10, 11)

    # Longest match first
    AREA_CODE_LENGTHS = (4, 3)

    UNKNOWN_AREA_CODE = 'Unknown'

    # Area code -> (city, subscriber digit count)
    AREA_CODES = MappingProxyType({
        # 3-digit codes, 8-digit subscriber (major metros)
        '021': AreaCodeInfo('Karachi', 8),
        '042': AreaCodeInfo('Lahore', 8),

        # 3-digit codes, 7-digit subscriber
        '041': AreaCodeInfo('Faisalabad', 7),
        '051': AreaCodeInfo('Islamabad / Rawalpindi', 7),
        '052': AreaCodeInfo('Sialkot', 7),
        '053': AreaCodeInfo('Gujrat', 7),
        '055': AreaCodeInfo('Gujranwala', 7),
        '061': AreaCodeInfo('Multan', 7),
        '062': AreaCodeInfo('Bahawalpur', 7),
        '068': AreaCodeInfo('Rahim Yar Khan', 7),
        '071': AreaCodeInfo('Sukkur', 7),
        '022': AreaCodeInfo('Hyderabad', 7),
        '081': AreaCodeInfo('Quetta', 7),
        '091': AreaCodeInfo('Peshawar', 7),
        '092': AreaCodeInfo('Mardan', 7),
        '044': AreaCodeInfo('Okara', 7),
        '046': AreaCodeInfo('Sargodha', 7),
        '047': AreaCodeInfo('Mianwali', 7),
        '048': AreaCodeInfo('Jhang', 7),
        '056': AreaCodeInfo('Jhelum', 7),
        '057': AreaCodeInfo('Attock', 7),
        '063': AreaCodeInfo('Dera Ghazi Khan', 7),
        '064': AreaCodeInfo('Vehari', 7),
        '066': AreaCodeInfo('Sahiwal', 7),
        '074': AreaCodeInfo('Larkana', 7),

        # 4-digit codes, 7-digit subscriber
        '0992': AreaCodeInfo('Abbottabad', 7),
        '0943': AreaCodeInfo('Muzaffarabad', 7),
        '0946': AreaCodeInfo('Swat', 7),
        '0995': AreaCodeInfo('Haripur', 7),
        '0997': AreaCodeInfo('Mansehra', 7),
    })

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a landline number and detect its city"""
        missing = self.required_failure(value)
        if missing:
            return missing

        # Step 1: strip formatting characters
        stripped = self.strip_chars(value, ' -()')

        if self.has_non_ascii(stripped):
            return ValidationResult.failure("Landline number must contain only ASCII digits.")

        # Step 2: digits only, apart from a leading +
        digits_part = stripped[1:] if stripped.startswith('+') else stripped
        if not self.is_ascii_digits(digits_part):
            return ValidationResult.failure(
                "Landline number must contain only digits, spaces, dashes, and optional +92 prefix.")

        # Step 3: normalize to a local form starting with 0
        local = self.to_local(stripped)
        if local is None:
            return ValidationResult.failure("Landline must start with 0, +92, or 92.")

        # Step 4: total length
        if not self.MIN_LENGTH <= len(local) <= self.MAX_LENGTH:
            return ValidationResult.failure(
                f"Landline number has invalid length ({len(local)} digits). "
                f"Expected {self.MIN_LENGTH}-{self.MAX_LENGTH} digits including area code.")

        international = '+92' + local[1:]

        # Step 5: known area codes, longest first
        for code_length in self.AREA_CODE_LENGTHS:
            area_code = local[:code_length]
            info = self.AREA_CODES.get(area_code)
            if info is None:
                continue

            subscriber = local[code_length:]
            if len(subscriber) != info.subscriber_digits:
                return ValidationResult.failure(
                    f"Landline for {info.city} ({area_code}) requires "
                    f"{info.subscriber_digits} subscriber digits, got {len(subscriber)}.")

            metadata = {
                'AreaCode': area_code,
                'City': info.city,
                'SubscriberNumber': subscriber,
                'LocalFormat': f"{area_code}-{subscriber}",
                'InternationalFormat': international,
            }
            return ValidationResult.success(local, metadata)

        # Step 6: unknown area code, structurally plausible length
        if len(local) in self.FALLBACK_LENGTHS:
            metadata = {
                'LocalFormat': local,
                'InternationalFormat': international,
                'AreaCode': self.UNKNOWN_AREA_CODE,
            }
            return ValidationResult.success(local, metadata)

        return ValidationResult.failure("Invalid Pakistani landline number format.")

    @staticmethod
    def to_local(stripped: str) -> Optional[str]:
        """
        Normalize the country-code forms to a local number starting with 0

        Returns:
            str: local form, e.g. "+92511234567" -> "0511234567"
            None: no recognized prefix
        """
        if stripped.startswith('+92'):
            return '0' + stripped[3:]
        # Bare 92 only counts as a country code when the length implies one
        if stripped.startswith('92') and len(stripped) >= 11:
            return '0' + stripped[2:]
        if stripped.startswith('0'):
            return stripped
        return None

    def get_city(self, value: Optional[str]) -> Optional[str]:
        """City of a known area code, or None (invalid or unknown area code)"""
        return self.metadata_value(value, 'City')

    def get_area_code(self, value: Optional[str]) -> Optional[str]:
        """Area code, "Unknown" for unlisted codes, or None if invalid"""
        return self.metadata_value(value, 'AreaCode')
