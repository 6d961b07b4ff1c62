"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           tests/unit/test_creditor_reference.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for ISO 11649 structured creditor references.
------------------------------------------------------------------------------
"""

import pydantic
import pytest

from girocode import CreditorReference, InvalidChecksum, InvalidFormat


def test_parse_strips_spaces_and_keeps_check_digits():
    ref = CreditorReference.parse("RF18 5390 0754 7034")

    assert str(ref) == "RF18539007547034"
    assert " " not in str(ref)
    assert ref.check_digits == "18"
    assert ref.body == "539007547034"


@pytest.mark.parametrize("spaced, compact", [
    ("RF18 5390 0754 7034", "RF18539007547034"),
    ("RF45 G72U UR", "RF45G72UUR"),
    (" RF47 1234 5678 90 ", "RF471234567890"),
])
def test_parsing_is_space_insensitive(spaced, compact):
    assert CreditorReference.parse(spaced) == CreditorReference.parse(compact)


def test_lowercase_input_is_normalized():
    assert str(CreditorReference.parse("rf45g72uur")) == "RF45G72UUR"


def test_wrong_check_digits_fail_checksum():
    with pytest.raises(InvalidChecksum) as exc:
        CreditorReference.parse("RF55G72UUR")
    assert exc.value.field == "reference"
    assert "RF45" in str(exc.value)


@pytest.mark.parametrize("raw", [
    "XX45G72UUR",                 # missing RF prefix
    "RF4",                        # incomplete check digits
    "RFA5G72UUR",                 # check digits not numeric
    "RF45",                       # no body
    "RF45G72-UUR",                # disallowed character
    "RF401234567890123456789012",  # 26 characters
])
def test_structural_violations(raw):
    with pytest.raises(InvalidFormat):
        CreditorReference.parse(raw)


def test_length_boundaries():
    """Five characters is the shortest, 25 the longest reference."""
    assert str(CreditorReference.parse("RF25A")) == "RF25A"
    assert len(str(CreditorReference.parse("RF40123456789012345678901"))) == 25


def test_create_computes_check_digits():
    ref = CreditorReference.create("5390 0754 7034")

    assert str(ref) == "RF18539007547034"
    assert CreditorReference.parse(str(ref)) == ref


def test_create_rejects_bad_body():
    with pytest.raises(InvalidFormat):
        CreditorReference.create("")
    with pytest.raises(InvalidFormat):
        CreditorReference.create("1234567890123456789012")


def test_formatted():
    assert CreditorReference.parse("RF18539007547034").formatted() == "RF18 5390 0754 7034"


def test_direct_construction_runs_checks():
    with pytest.raises(pydantic.ValidationError):
        CreditorReference(check_digits="55", body="G72UUR")


def test_only_canonical_check_digits_are_accepted():
    """RF0154 leaves residue 1 like RF9854, but 01 is outside the 02-98 range."""
    assert str(CreditorReference.parse("RF9854")) == "RF9854"

    with pytest.raises(InvalidChecksum) as exc:
        CreditorReference.parse("RF0154")
    assert "RF98" in str(exc.value)

    with pytest.raises(pydantic.ValidationError):
        CreditorReference(check_digits="01", body="54")
