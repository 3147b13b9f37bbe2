"""
Pakistani IBAN bank codes

[Usage]
    from pakvalidate.validators.bank_codes import BANK_CODES, get_bank_name

    get_bank_name("SCBL")   # "Standard Chartered Pakistan"
    get_bank_name("scbl")   # same, lookup is case-insensitive

The key is the 4-letter bank identifier at IBAN positions 5-8.
"""
from types import MappingProxyType
from typing import List, Optional

BANK_CODES = MappingProxyType({
    'ABPA': 'Allied Bank Limited',
    'ALFH': 'Alfalah Bank Limited',
    'AIIN': 'Al Baraka Bank Pakistan',
    'ASCM': 'Askari Bank Limited',
    'BAHL': 'Bank Al Habib Limited',
    'BKIP': 'Bank Islami Pakistan',
    'BPUN': 'Bank of Punjab',
    'DUIB': 'Dubai Islamic Bank',
    'FAYS': 'Faysal Bank Limited',
    'HABB': 'Habib Bank Limited',
    'HBZM': 'Habib Metropolitan Bank',
    'JSBL': 'JS Bank Limited',
    'KLBL': 'Khushhali Microfinance Bank',
    'MCBL': 'Muslim Commercial Bank',
    'MEZN': 'Meezan Bank Limited',
    'MPBL': 'Mobilink Microfinance Bank',
    'MUCB': 'MCB Bank Limited',
    'NBPA': 'National Bank of Pakistan',
    'PRSA': 'The Bank of Khyber',
    'SCBL': 'Standard Chartered Pakistan',
    'SNDB': 'Sindh Bank Limited',
    'SBPL': 'State Bank of Pakistan',
    'SONE': 'Soneri Bank Limited',
    'SMBL': 'Summit Bank Limited',
    'UNIL': 'United Bank Limited',
    'ZCBL': 'Zarai Taraqiati Bank Limited',
})


def get_bank_name(bank_code: str) -> Optional[str]:
    """Bank name for a 4-letter code, or None if unlisted"""
    if not bank_code:
        return None
    return BANK_CODES.get(bank_code.strip().upper())


def get_bank_codes() -> List[str]:
    """All known bank codes, sorted"""
    return sorted(BANK_CODES.keys())
