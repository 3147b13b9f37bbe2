"""
PakValidate: validation of Pakistani identifiers

CNIC, NTN, STRN, IBAN, mobile and landline numbers, postal codes and
vehicle plates. Every validator returns a ValidationResult with a verdict,
a sanitized value and metadata derived from the input.

    from pakvalidate import Pak

    result = Pak.iban.validate("PK36SCBL0000001123456702")
    result.is_valid                  # True
    result.metadata["BankName"]      # Standard Chartered Pakistan
"""
from .core import (
    BatchValidationResult,
    Config,
    Pak,
    ValidationError,
    ValidationResult,
    ensure_valid,
    validate_all,
)
from .core import accessors
from .validators import (
    BaseValidator,
    CnicValidator,
    IbanValidator,
    LandlineValidator,
    MobileValidator,
    NtnValidator,
    PostalCodeValidator,
    StrnValidator,
    VehiclePlateValidator,
)

__version__ = '1.0.0'

__all__ = [
    'Pak',
    'ValidationResult',
    'BatchValidationResult',
    'ValidationError',
    'ensure_valid',
    'validate_all',
    'Config',
    'accessors',
    'BaseValidator',
    'CnicValidator',
    'NtnValidator',
    'StrnValidator',
    'IbanValidator',
    'MobileValidator',
    'LandlineValidator',
    'PostalCodeValidator',
    'VehiclePlateValidator',
]
