"""
Validator package

[Usage]
    from pakvalidate.validators import CnicValidator, MobileValidator

    validator = CnicValidator()
    result = validator.validate("35202-1234567-1")
    if result.is_valid:
        print(result.metadata["Gender"])    # Male

Most callers go through pakvalidate.Pak, which holds one shared instance per validator.
"""
from .base_validator import BaseValidator
from .cnic_validator import CnicValidator
from .ntn_validator import NtnValidator
from .strn_validator import StrnValidator
from .iban_validator import IbanValidator
from .mobile_validator import MobileValidator
from .landline_validator import LandlineValidator, AreaCodeInfo
from .postal_code_validator import PostalCodeValidator
from .vehicle_plate_validator import VehiclePlateValidator
from .bank_codes import BANK_CODES, get_bank_name, get_bank_codes

__all__ = [
    # ============================================
    # Validators
    # ============================================
    'BaseValidator',
    'CnicValidator',
    'NtnValidator',
    'StrnValidator',
    'IbanValidator',
    'MobileValidator',
    'LandlineValidator',
    'PostalCodeValidator',
    'VehiclePlateValidator',

    # ============================================
    # Lookup tables
    # ============================================
    'AreaCodeInfo',
    'BANK_CODES',
    'get_bank_name',
    'get_bank_codes',
]
