"""
Batch validation

Runs several named validations and collects the failures:

    batch = validate_all(
        ("Cnic", lambda: Pak.cnic.validate(form["cnic"])),
        ("Mobile", lambda: Pak.mobile.validate(form["mobile"])),
    )
    if not batch.is_valid:
        for field, error in batch.get_errors():
            print(f"{field}: {error}")
"""
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from .exceptions import ValidationError
from .result import ValidationResult
from ..utils.logger import logger

DEFAULT_ERROR_MESSAGE = "Validation failed"

ValidationThunk = Callable[[], ValidationResult]


class BatchValidationResult:
    """Results of several validations, keyed by field name (input order kept)"""

    def __init__(self, validations: Iterable[Tuple[str, ValidationResult]]):
        results = {}
        errors = {}
        for field_name, result in validations:
            results[field_name] = result
            if not result.is_valid:
                errors[field_name] = result.error_message or DEFAULT_ERROR_MESSAGE
            else:
                errors.pop(field_name, None)

        self._results: Mapping[str, ValidationResult] = MappingProxyType(results)
        self._errors: Mapping[str, str] = MappingProxyType(errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    @property
    def results(self) -> Mapping[str, ValidationResult]:
        """All results, field name -> ValidationResult"""
        return self._results

    @property
    def errors(self) -> Mapping[str, str]:
        """Failing fields only, field name -> error message"""
        return self._errors

    def get_error(self, field_name: str) -> Optional[str]:
        """Error message for field_name, or None if it passed (or was not validated)"""
        return self._errors.get(field_name)

    def get_errors(self) -> List[Tuple[str, str]]:
        """(field, error) pairs in input order"""
        return list(self._errors.items())

    def raise_if_invalid(self) -> None:
        """
        Raise ValidationError if any field failed

        Raises:
            ValidationError: message "Validation failed for: <fields>"
        """
        if self.is_valid:
            return

        fields = list(self._errors.keys())
        message = f"Validation failed for: {', '.join(fields)}"
        logger.warning(message)
        raise ValidationError(message, fields=fields, errors=dict(self._errors))

    def __repr__(self) -> str:
        return f"BatchValidationResult(is_valid={self.is_valid}, errors={dict(self._errors)!r})"


def validate_all(*validations: Tuple[str, ValidationThunk]) -> BatchValidationResult:
    """
    Run each (field_name, thunk) pair and aggregate the results

    Args:
        validations: (field name, zero-argument callable returning ValidationResult)

    Returns:
        BatchValidationResult
    """
    collected = []
    for field_name, thunk in validations:
        result = thunk()
        if not result.is_valid:
            logger.debug(f"{field_name} failed: {result.error_message}")
        collected.append((field_name, result))

    batch = BatchValidationResult(collected)
    logger.debug(f"Batch validated {len(batch.results)} field(s), {len(batch.errors)} failed")
    return batch
