"""
IBAN validator (Pakistan)

[Format]
- PK + 2 check digits + 4-letter bank code + 16-digit account = 24 characters
- Spaces and dashes are ignored, letters are case-insensitive

[Checksum: ISO 13616 MOD-97]
1. Move the first 4 characters to the end
2. Replace each letter with its base-36 value (A=10 ... Z=35)
3. The resulting decimal numeral mod 97 must equal 1
The numeral runs past 60 digits; Python int handles it without overflow.
"""
import re
from typing import Optional

from .bank_codes import get_bank_name
from .base_validator import BaseValidator
from ..core.result import ValidationResult


class IbanValidator(BaseValidator):
    """IBAN validator (MOD-97 verified, with bank identification)"""

    FIELD_NAME = 'IBAN'

    COUNTRY_CODE = 'PK'
    IBAN_LENGTH = 24

    IBAN_PATTERN = re.compile(r'PK[0-9]{2}[A-Z]{4}[0-9]{16}')

    def validate(self, value: Optional[str]) -> ValidationResult:
        """Format check, MOD-97 verification and bank lookup"""
        missing = self.required_failure(value)
        if missing:
            return missing

        iban = self.strip_chars(value, ' -')

        if self.has_non_ascii(iban):
            return ValidationResult.failure("IBAN must contain only ASCII letters and digits.")

        iban = iban.upper()

        if not iban.startswith(self.COUNTRY_CODE):
            return ValidationResult.failure("Pakistani IBAN must start with 'PK'.")

        if len(iban) != self.IBAN_LENGTH:
            return ValidationResult.failure("Pakistani IBAN must be exactly 24 characters.")

        if not self.IBAN_PATTERN.fullmatch(iban):
            return ValidationResult.failure(
                "Invalid IBAN format. Expected: PK## XXXX ################.")

        if not self.verify_mod97(iban):
            return ValidationResult.failure("IBAN check digits are invalid (MOD-97 failed).")

        bank_code = iban[4:8]

        metadata = {
            'BankCode': bank_code,
            'AccountNumber': iban[8:],
            'CheckDigits': iban[2:4],
            'Formatted': ' '.join(iban[i:i + 4] for i in range(0, self.IBAN_LENGTH, 4)),
        }

        bank_name = get_bank_name(bank_code)
        if bank_name:
            metadata['BankName'] = bank_name

        return ValidationResult.success(iban, metadata)

    @staticmethod
    def verify_mod97(iban: str) -> bool:
        """
        ISO 13616 MOD-97 check

        Args:
            iban: Compact, uppercase IBAN (letters A-Z and digits only)

        Returns:
            bool: True if the rearranged numeral is congruent to 1 mod 97
        """
        rearranged = iban[4:] + iban[:4]
        numeral = ''.join(str(int(c, 36)) for c in rearranged)
        return int(numeral) % 97 == 1

    def get_bank_name(self, value: Optional[str]) -> Optional[str]:
        """Bank name of a valid IBAN, or None (invalid or unlisted bank)"""
        return self.metadata_value(value, 'BankName')

    def format(self, value: Optional[str]) -> Optional[str]:
        """Space-grouped form (PK36 SCBL 0000 ...), or None if invalid"""
        return self.metadata_value(value, 'Formatted')
