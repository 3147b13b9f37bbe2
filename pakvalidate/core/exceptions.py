"""
Fail-fast helpers

Validators never raise. Callers that prefer an exception over checking
is_valid opt in through ensure_valid() or BatchValidationResult.raise_if_invalid().
"""
from typing import Dict, Optional, Sequence

from .result import ValidationResult
from ..utils.logger import logger


class ValidationError(Exception):
    """Raised only by the opt-in fail-fast helpers.

    Attributes:
        fields: Names of the failing fields (may be empty).
        errors: Failing field name -> error message.
    """

    def __init__(self, message: str, fields: Sequence[str] = (),
                 errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields)
        self.errors = dict(errors or {})

    @property
    def field(self) -> Optional[str]:
        """First failing field, if any"""
        return self.fields[0] if self.fields else None


def ensure_valid(result: ValidationResult, field: Optional[str] = None) -> ValidationResult:
    """
    Return the result unchanged if valid, otherwise raise ValidationError

    Args:
        result: Result of any validator
        field: Optional field name used in the message

    Raises:
        ValidationError: when result.is_valid is False
    """
    if result.is_valid:
        return result

    reason = result.error_message or "Validation failed"
    if field:
        message = f"{field}: {reason}"
        errors = {field: reason}
        fields = [field]
    else:
        message = reason
        errors = {}
        fields = []

    logger.warning(f"Validation failed - {message}")
    raise ValidationError(message, fields=fields, errors=errors)
