"""
Validator base class

[Role]
- Shared input guards (required value, ASCII-only, identical digits)
- Common interface: validate() -> ValidationResult, is_valid() -> bool
- Metadata projection helper for the format-specific accessors
"""
import re
from abc import ABC, abstractmethod
from typing import Optional

from ..core.result import ValidationResult

ASCII_DIGITS_RE = re.compile(r'[0-9]+')


class BaseValidator(ABC):
    """Validator base class"""

    # Display name used in "<Field> is required."
    FIELD_NAME = 'Value'

    # =========================================================
    # Input guards
    # =========================================================

    def required_failure(self, value: Optional[str]) -> Optional[ValidationResult]:
        """
        Failure for None, non-string, empty or all-whitespace input

        Returns:
            ValidationResult: failure result when the value is missing
            None: value is present, continue validating
        """
        if not isinstance(value, str) or not value.strip():
            return ValidationResult.failure(f"{self.FIELD_NAME} is required.")
        return None

    @staticmethod
    def has_non_ascii(value: str) -> bool:
        """True if any character is outside ASCII (e.g. Urdu/Arabic-Indic digits)"""
        return any(ord(c) > 127 for c in value)

    @staticmethod
    def is_ascii_digits(value: str) -> bool:
        """True if value is non-empty and made of 0-9 only (str.isdigit also accepts Unicode digits)"""
        return ASCII_DIGITS_RE.fullmatch(value) is not None

    @staticmethod
    def is_identical_digits(digits: str) -> bool:
        """All characters the same (0000000000000, 1111111, ...)"""
        return len(set(digits)) == 1

    @staticmethod
    def strip_chars(value: str, chars: str) -> str:
        """Trim, then remove every character in chars"""
        value = value.strip()
        for c in chars:
            value = value.replace(c, '')
        return value

    # =========================================================
    # Interface
    # =========================================================

    @abstractmethod
    def validate(self, value: Optional[str]) -> ValidationResult:
        """
        Validate a value

        Args:
            value: Input to validate (None allowed)

        Returns:
            ValidationResult: never raises
        """
        pass

    def is_valid(self, value: Optional[str]) -> bool:
        """Quick check, same as validate(value).is_valid"""
        return self.validate(value).is_valid

    def metadata_value(self, value: Optional[str], key: str) -> Optional[str]:
        """Validate and return one metadata key, or None if invalid/absent"""
        result = self.validate(value)
        if not result.is_valid:
            return None
        return result.metadata.get(key)

    def __call__(self, value: Optional[str]) -> ValidationResult:
        return self.validate(value)
