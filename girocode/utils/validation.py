"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/utils/validation.py
Version:        1.1.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Checksum and pattern helpers shared by the IBAN and creditor
                reference models (ISO 13616 / ISO 11649 MOD 97-10).
------------------------------------------------------------------------------
"""

import re
from typing import Dict

BIC_PATTERN = re.compile(r'[A-Z]{6}[A-Z0-9]{2}([A-Z0-9]{3})?')
ALNUM_PATTERN = re.compile(r'[A-Z0-9]+')
CHECK_DIGITS_PATTERN = re.compile(r'[0-9]{2}')

# ISO 13616 registry: country code -> total IBAN length
IBAN_LENGTHS: Dict[str, int] = {
    "AD": 24, "AE": 23, "AL": 28, "AT": 20, "AZ": 28, "BA": 20,
    "BE": 16, "BG": 22, "BH": 22, "BR": 29, "BY": 28, "CH": 21,
    "CR": 22, "CY": 28, "CZ": 24, "DE": 22, "DK": 18, "DO": 28,
    "EE": 20, "EG": 29, "ES": 24, "FI": 18, "FO": 18, "FR": 27,
    "GB": 22, "GE": 22, "GI": 23, "GL": 18, "GR": 27, "GT": 28,
    "HR": 21, "HU": 28, "IE": 22, "IL": 23, "IQ": 23, "IS": 26,
    "IT": 27, "JO": 30, "KW": 30, "KZ": 20, "LB": 28, "LC": 32,
    "LI": 21, "LT": 20, "LU": 20, "LV": 21, "MC": 27, "MD": 24,
    "ME": 22, "MK": 19, "MR": 27, "MT": 31, "MU": 30, "NL": 18,
    "NO": 15, "PK": 24, "PL": 28, "PS": 29, "PT": 25, "QA": 29,
    "RO": 24, "RS": 22, "SA": 24, "SC": 31, "SE": 24, "SI": 19,
    "SK": 24, "SM": 27, "ST": 25, "SV": 28, "TL": 23, "TN": 24,
    "TR": 26, "UA": 29, "VA": 22, "VG": 24, "XK": 20, "YE": 30,
}


def normalize(value: str) -> str:
    """Removes all whitespace and uppercases the remainder."""
    return "".join(value.split()).upper()


def mod97(value: str) -> int:
    """
    Computes the MOD 97-10 residue of an alphanumeric string.

    Letters count as two-digit numbers (A=10 ... Z=35). Only the running
    remainder is carried, so the numeric form is never materialized.

    Args:
        value: Uppercase string of [A-Z0-9].

    Returns:
        The residue in range 0..96.

    Raises:
        ValueError: If the string contains anything outside [A-Z0-9].
    """
    remainder = 0
    for char in value:
        if "0" <= char <= "9":
            remainder = (remainder * 10 + ord(char) - 48) % 97
        elif "A" <= char <= "Z":
            remainder = (remainder * 100 + ord(char) - 55) % 97
        else:
            raise ValueError(f"Character {char!r} is not allowed in a MOD 97-10 input")
    return remainder


def iban_residue(iban: str) -> int:
    """Moves the first four characters to the end and returns the residue."""
    return mod97(iban[4:] + iban[:4])


def validate_iban(iban: str) -> bool:
    """
    Validates an IBAN according to ISO 13616.

    Args:
        iban: The IBAN string to validate (spaces are allowed).

    Returns:
        True if the IBAN is valid, False otherwise.
    """
    from girocode.exceptions import GiroCodeError
    from girocode.models.iban import Iban
    try:
        Iban.parse(iban)
    except GiroCodeError:
        return False
    return True


def validate_bic(bic: str) -> bool:
    """
    Performs a simple regex check for BIC (8 or 11 characters).
    """
    if not bic:
        return False
    return bool(BIC_PATTERN.fullmatch(normalize(bic)))


def creditor_reference_check_digits(body: str) -> str:
    """Returns the two ISO 11649 check digits for an (uppercase) reference body."""
    return f"{98 - mod97(body + 'RF00'):02d}"


def validate_creditor_reference(reference: str) -> bool:
    """
    Validates a structured creditor reference (RF) according to ISO 11649.
    """
    from girocode.exceptions import GiroCodeError
    from girocode.models.creditor_reference import CreditorReference
    try:
        CreditorReference.parse(reference)
    except GiroCodeError:
        return False
    return True
