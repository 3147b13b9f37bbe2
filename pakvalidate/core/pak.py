"""
Single entry point for all validators

[Usage]
    from pakvalidate import Pak

    result = Pak.cnic.validate("35202-1234567-1")
    if result.is_valid:
        print(result.metadata["Gender"])        # Male

    Pak.mobile.is_valid("03001234567")          # True
    Pak.mobile.get_carrier("03001234567")       # Jazz

    Pak.validate("iban", "PK36SCBL0000001123456702")

    batch = Pak.validate_all(
        ("Cnic", lambda: Pak.cnic.validate("35202-1234567-1")),
        ("Mobile", lambda: Pak.mobile.validate("03001234567")),
    )
"""
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from .batch import BatchValidationResult, ValidationThunk, validate_all
from .result import ValidationResult
from ..validators import (
    CnicValidator,
    IbanValidator,
    LandlineValidator,
    MobileValidator,
    NtnValidator,
    PostalCodeValidator,
    StrnValidator,
    VehiclePlateValidator,
)

ValidateFunc = Callable[[Optional[str]], ValidationResult]


class Pak:
    """Shared validator instances (stateless, safe to use from any thread)"""

    cnic = CnicValidator()
    ntn = NtnValidator(cnic)
    strn = StrnValidator()
    iban = IbanValidator()
    mobile = MobileValidator()
    landline = LandlineValidator()
    postal_code = PostalCodeValidator()
    vehicle_plate = VehiclePlateValidator()

    # Uniform (value) -> ValidationResult capability, by short name
    VALIDATORS: Mapping[str, ValidateFunc] = MappingProxyType({
        'cnic': cnic.validate,
        'ntn': ntn.validate,
        'strn': strn.validate,
        'iban': iban.validate,
        'mobile': mobile.validate,
        'landline': landline.validate,
        'postal_code': postal_code.validate,
        'vehicle_plate': vehicle_plate.validate,
    })

    @classmethod
    def validate(cls, kind: str, value: Optional[str]) -> ValidationResult:
        """
        Validate value with the validator registered under kind

        Raises:
            KeyError: unknown kind
        """
        return cls.VALIDATORS[kind](value)

    @classmethod
    def is_valid(cls, kind: str, value: Optional[str]) -> bool:
        return cls.validate(kind, value).is_valid

    @staticmethod
    def validate_all(*validations: Tuple[str, ValidationThunk]) -> BatchValidationResult:
        """Run (field_name, thunk) pairs and collect failures"""
        return validate_all(*validations)
