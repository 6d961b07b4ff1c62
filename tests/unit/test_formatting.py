import pytest

from girocode.utils.formatting import format_cents, group_blocks


def test_group_blocks_iban():
    """Verifies the printed IBAN layout."""
    assert group_blocks("DE02120300000000202051") == "DE02 1203 0000 0000 2020 51"


def test_group_blocks_custom_separator():
    assert group_blocks("RF18539007547034", sep="-") == "RF18-5390-0754-7034"
    assert group_blocks("ABCDEF", size=3) == "ABC DEF"


def test_group_blocks_empty():
    assert group_blocks("") == ""


@pytest.mark.parametrize("cents, expected", [
    (1, "0.01"),
    (2500, "25.00"),
    (2550, "25.50"),
    (99_999_999_999, "999999999.99"),
])
def test_format_cents(cents, expected):
    assert format_cents(cents) == expected
