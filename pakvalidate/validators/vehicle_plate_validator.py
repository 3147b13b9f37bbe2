"""
Vehicle registration plate validator (Pakistan)

[Common formats]
- LEA-1234, RI-5678, ISB-123, K-1234 (letters, optional dash/space, digits)
- Government/Diplomatic: G-12, GS-123, GN-123, DN-1234, UN-123

[Validation strategy]
- 1-4 letters, 2-5 digits, letters are case-insensitive
- Government/Diplomatic prefixes need at least 2 digits, others at least 3
- Registration city: exact prefix, then the first 3, 2 and 1 letters
"""
import re
from types import MappingProxyType
from typing import Optional

from .base_validator import BaseValidator
from ..core.result import ValidationResult


class VehiclePlateValidator(BaseValidator):
    """Vehicle registration plate validator"""

    FIELD_NAME = 'Vehicle plate number'

    # re.ASCII keeps IGNORECASE from matching non-ASCII letters such as the Kelvin sign
    PLATE_PATTERN = re.compile(r'([A-Z]{1,4})\s*(?:-\s*)?([0-9]{2,5})', re.IGNORECASE | re.ASCII)

    GOVERNMENT_PREFIXES = frozenset({'G', 'GS', 'GN', 'DN', 'UN'})

    MIN_DIGITS = 3
    MIN_GOVERNMENT_DIGITS = 2
    MAX_DIGITS = 5

    REGISTRATION_PREFIXES = MappingProxyType({
        # Islamabad
        'ISB': 'Islamabad',

        # Punjab
        'L': 'Lahore', 'LE': 'Lahore', 'LEA': 'Lahore',
        'LEB': 'Lahore', 'LEC': 'Lahore', 'LED': 'Lahore',
        'LEE': 'Lahore', 'LEF': 'Lahore',
        'R': 'Rawalpindi', 'RI': 'Rawalpindi', 'RIA': 'Rawalpindi',
        'RIB': 'Rawalpindi', 'RIC': 'Rawalpindi',
        'F': 'Faisalabad', 'FSD': 'Faisalabad',
        'MN': 'Multan', 'MUL': 'Multan',
        'GJ': 'Gujranwala', 'GRW': 'Gujranwala',
        'SK': 'Sialkot', 'SGD': 'Sargodha',
        'BWP': 'Bahawalpur', 'JH': 'Jhang',
        'RYK': 'Rahim Yar Khan', 'SWL': 'Sahiwal',
        'DGK': 'Dera Ghazi Khan', 'JHL': 'Jhelum',
        'ATK': 'Attock', 'MWI': 'Mianwali',

        # Sindh
        'K': 'Karachi', 'KA': 'Karachi',
        'AJK': 'Karachi (new)', 'AKA': 'Karachi (new)',
        'HYD': 'Hyderabad', 'SKR': 'Sukkur',
        'LRK': 'Larkana', 'NWS': 'Nawabshah',

        # Khyber Pakhtunkhwa
        'P': 'Peshawar', 'PES': 'Peshawar',
        'A': 'Peshawar (old)', 'ABT': 'Abbottabad',
        'MRD': 'Mardan', 'SWT': 'Swat',

        # Balochistan
        'Q': 'Quetta', 'QTA': 'Quetta',

        # AJK & GB
        'AJ': 'Azad Jammu & Kashmir',
        'GB': 'Gilgit-Baltistan',

        # Government & Diplomatic
        'G': 'Government (Federal)',
        'GS': 'Government (Senate)',
        'GN': 'Government (National Assembly)',
        'DN': 'Diplomatic',
        'UN': 'United Nations',
    })

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Validate a plate number and detect the registration city"""
        missing = self.required_failure(value)
        if missing:
            return missing

        plate = value.strip()

        if self.has_non_ascii(plate):
            return ValidationResult.failure("Vehicle plate number must contain only ASCII letters and digits.")

        match = self.PLATE_PATTERN.fullmatch(plate)
        if not match:
            return ValidationResult.failure(
                "Invalid plate format. Expected: ABC-1234, AB-1234, or similar Pakistani plate format.")

        letters = match.group(1).upper()
        digits = match.group(2)

        is_government = letters in self.GOVERNMENT_PREFIXES
        min_digits = self.MIN_GOVERNMENT_DIGITS if is_government else self.MIN_DIGITS

        if len(digits) < min_digits:
            return ValidationResult.failure(
                f"Plate number requires at least {min_digits} digits, got {len(digits)}.")

        if len(digits) > self.MAX_DIGITS:
            return ValidationResult.failure(f"Plate number cannot exceed {self.MAX_DIGITS} digits.")

        formatted = f"{letters}-{digits}"
        metadata = {
            'Prefix': letters,
            'Number': digits,
            'Formatted': formatted,
        }

        if is_government:
            metadata['Type'] = 'Government/Diplomatic'

        city = self.find_registration_city(letters)
        if city:
            metadata['RegistrationCity'] = city

        return ValidationResult.success(formatted, metadata)

    def find_registration_city(self, letters: str) -> Optional[str]:
        """Longest match first: full prefix, then its first 3, 2 and 1 letters"""
        candidates = [letters] + [letters[:n] for n in (3, 2, 1) if n < len(letters)]
        for candidate in candidates:
            city = self.REGISTRATION_PREFIXES.get(candidate)
            if city:
                return city
        return None

    def get_city(self, value: Optional[str]) -> Optional[str]:
        """Registration city, or None (invalid or unlisted prefix)"""
        return self.metadata_value(value, 'RegistrationCity')

    def format(self, value: Optional[str]) -> Optional[str]:
        """LETTERS-DIGITS, or None if invalid"""
        return self.metadata_value(value, 'Formatted')
