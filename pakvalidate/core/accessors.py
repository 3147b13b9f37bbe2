"""
Metadata accessors

Shortcuts for reading well-known metadata keys from a ValidationResult:

    from pakvalidate.core import accessors

    result = Pak.cnic.validate("35202-1234567-1")
    accessors.gender(result)      # "Male"
    accessors.province(result)    # "Punjab"

Every accessor returns None when the key is absent (including on failure).
"""
from typing import Callable, Optional

from .result import ValidationResult

# =========================================================
# Metadata keys
# =========================================================
GENDER = 'Gender'
PROVINCE = 'Province'
LOCALITY_CODE = 'LocalityCode'
FORMATTED = 'Formatted'
CARRIER = 'Carrier'
LOCAL_FORMAT = 'LocalFormat'
INTERNATIONAL_FORMAT = 'InternationalFormat'
E164 = 'E164'
PREFIX = 'Prefix'
TYPE = 'Type'
BANK_CODE = 'BankCode'
BANK_NAME = 'BankName'
ACCOUNT_NUMBER = 'AccountNumber'
CHECK_DIGITS = 'CheckDigits'
REGION = 'Region'
REGION_PREFIX = 'RegionPrefix'
AREA_CODE = 'AreaCode'
CITY = 'City'
SUBSCRIBER_NUMBER = 'SubscriberNumber'
REGISTRATION_CITY = 'RegistrationCity'
NUMBER = 'Number'
JURISDICTION = 'Jurisdiction'
REGION_CODE = 'RegionCode'


def get_metadata(result: ValidationResult, key: str) -> Optional[str]:
    """Any metadata value by key"""
    if result is None or not result.metadata:
        return None
    return result.metadata.get(key)


def _accessor(key: str, doc: str) -> Callable[[ValidationResult], Optional[str]]:
    def accessor(result: ValidationResult) -> Optional[str]:
        return get_metadata(result, key)

    accessor.__doc__ = doc
    return accessor


gender = _accessor(GENDER, "Male/Female from a CNIC result")
province = _accessor(PROVINCE, "Province from a CNIC result")
locality_code = _accessor(LOCALITY_CODE, "First five CNIC digits")
formatted = _accessor(FORMATTED, "Display form (CNIC, NTN, STRN, IBAN, plate)")
carrier = _accessor(CARRIER, "Mobile operator, 'Unknown' for unlisted prefixes")
local_format = _accessor(LOCAL_FORMAT, "Local form of a mobile or landline number")
international_format = _accessor(INTERNATIONAL_FORMAT, "+92 form of a mobile or landline number")
e164 = _accessor(E164, "E.164 form of a mobile number")
prefix = _accessor(PREFIX, "Mobile prefix (03XX)")
ntn_type = _accessor(TYPE, "NTN type: Standard or CNIC-based")
bank_code = _accessor(BANK_CODE, "Four-letter IBAN bank code")
bank_name = _accessor(BANK_NAME, "Bank name for a known IBAN bank code")
account_number = _accessor(ACCOUNT_NUMBER, "Last 16 IBAN characters")
check_digits = _accessor(CHECK_DIGITS, "IBAN check digits")
region = _accessor(REGION, "Postal region")
region_prefix = _accessor(REGION_PREFIX, "First two postal code digits")
area_code = _accessor(AREA_CODE, "Landline area code, 'Unknown' for unlisted codes")
city = _accessor(CITY, "Landline city")
subscriber_number = _accessor(SUBSCRIBER_NUMBER, "Landline subscriber digits")
registration_city = _accessor(REGISTRATION_CITY, "Vehicle registration city")
plate_prefix = _accessor(PREFIX, "Vehicle plate letters")
plate_number = _accessor(NUMBER, "Vehicle plate digits")
plate_type = _accessor(TYPE, "Government/Diplomatic for official plates")
jurisdiction = _accessor(JURISDICTION, "RTO jurisdiction from a STRN result")
region_code = _accessor(REGION_CODE, "First two STRN digits")
