"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           tests/unit/test_validation.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the MOD 97-10 helper and the boolean IBAN,
                BIC and creditor reference validators.
------------------------------------------------------------------------------
"""

import pytest

from girocode.utils.validation import (
    creditor_reference_check_digits,
    iban_residue,
    mod97,
    normalize,
    validate_bic,
    validate_creditor_reference,
    validate_iban,
)


def test_mod97_matches_big_integer_arithmetic():
    """Running remainder equals the residue of the full numeric form."""
    # DE68210501700012345678 rearranged and mapped to digits
    assert mod97("210501700012345678DE68") == 210501700012345678131468 % 97
    assert mod97("WEST12345698765432GB82") == 3214282912345698765432161182 % 97


def test_mod97_rejects_foreign_characters():
    with pytest.raises(ValueError):
        mod97("DE02-1203")


@pytest.mark.parametrize("iban", [
    "DE02120300000000202051",
    "DE90 8306 5408 0004 1042 42",
    "GB82WEST12345698765432",
    "NL91ABNA0417164300",
    "FR1420041010050500013M02606",
    "NO9386011117947",
    "de89 3704 0044 0532 0130 00",
])
def test_validate_iban_accepts_valid(iban):
    assert validate_iban(iban)
    assert iban_residue(normalize(iban)) == 1


@pytest.mark.parametrize("iban", [
    "",
    "DE90830654080004104243",  # checksum
    "DE0212030000000020205",   # too short for DE
    "1E02120300000000202051",  # no country code
    "DEXX120300000000202051",  # check digits not numeric
    "DE02-1203-0000-0000-2020-51",
])
def test_validate_iban_rejects_invalid(iban):
    assert not validate_iban(iban)


def test_validate_bic():
    assert validate_bic("GENODEF1SLR")
    assert validate_bic("BHBLDEHH")
    assert validate_bic("genode f1 slr")
    assert not validate_bic("")
    assert not validate_bic("GENODEF1SL")
    assert not validate_bic("1ENODEF1SLR")


def test_creditor_reference_check_digits():
    assert creditor_reference_check_digits("539007547034") == "18"
    assert creditor_reference_check_digits("G72UUR") == "45"
    assert creditor_reference_check_digits("A") == "25"


def test_validate_creditor_reference():
    assert validate_creditor_reference("RF45G72UUR")
    assert validate_creditor_reference("RF18 5390 0754 7034")
    assert not validate_creditor_reference("")
    assert not validate_creditor_reference("RF55G72UUR")
    assert not validate_creditor_reference("XX45G72UUR")
    assert not validate_creditor_reference("RF4X5G72UUR")


def test_validators_agree_with_models():
    assert validate_creditor_reference("RF9854")
    assert not validate_creditor_reference("RF0154")
    assert not validate_iban(None)
    assert not validate_creditor_reference(4711)
