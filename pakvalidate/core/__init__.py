"""
Core package: result contract, batch aggregation, fail-fast helpers, entry point
"""
from .result import ValidationResult
from .config import Config
from .exceptions import ValidationError, ensure_valid
from .batch import BatchValidationResult, validate_all
from .pak import Pak
# accessors is imported as a module: from pakvalidate.core import accessors

__all__ = [
    'ValidationResult',
    'Config',
    'ValidationError',
    'ensure_valid',
    'BatchValidationResult',
    'validate_all',
    'Pak',
]
