"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/iban.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Immutable International Bank Account Number (ISO 13616).
                Parsed from loosely formatted input, stored normalized.
------------------------------------------------------------------------------
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from girocode.exceptions import InvalidChecksum, InvalidFormat
from girocode.logger import get_logger, mask
from girocode.utils.formatting import group_blocks
from girocode.utils.validation import (
    ALNUM_PATTERN,
    CHECK_DIGITS_PATTERN,
    IBAN_LENGTHS,
    iban_residue,
    normalize,
)

logger = get_logger("models.iban")

IBAN_MIN_LENGTH = 15
IBAN_MAX_LENGTH = 34


def check_iban(iban: str) -> None:
    """
    Raises InvalidFormat or InvalidChecksum unless `iban` is a valid,
    already normalized IBAN.
    """
    if not (IBAN_MIN_LENGTH <= len(iban) <= IBAN_MAX_LENGTH):
        raise InvalidFormat(
            f"IBAN must have {IBAN_MIN_LENGTH}-{IBAN_MAX_LENGTH} characters, got {len(iban)}",
            field="iban"
        )
    if not ALNUM_PATTERN.fullmatch(iban):
        raise InvalidFormat("IBAN may only contain letters A-Z and digits", field="iban")
    if not iban[:2].isalpha():
        raise InvalidFormat(f"IBAN must start with a country code, got '{iban[:2]}'", field="iban")
    if not CHECK_DIGITS_PATTERN.fullmatch(iban[2:4]):
        raise InvalidFormat(f"IBAN check digits must be numeric, got '{iban[2:4]}'", field="iban")

    expected = IBAN_LENGTHS.get(iban[:2])
    if expected is not None and expected != len(iban):
        raise InvalidFormat(
            f"IBAN for {iban[:2]} must have {expected} characters, got {len(iban)}",
            field="iban"
        )

    if iban_residue(iban) != 1:
        raise InvalidChecksum(f"IBAN checksum mismatch for {iban}", field="iban")


class Iban(BaseModel):
    """
    A checksum-validated IBAN.

    Use Iban.parse() for user input. Direct construction runs the same
    checks and fails with a pydantic ValidationError.
    """
    model_config = ConfigDict(frozen=True)

    country_code: str
    check_digits: str
    bban: str

    @classmethod
    def parse(cls, raw: Any) -> "Iban":
        """
        Parses an IBAN such as 'DE02 1203 0000 0000 2020 51'.

        Raises:
            InvalidFormat: Structural violation (length, characters, prefix).
            InvalidChecksum: MOD 97-10 residue is not 1.
        """
        if not isinstance(raw, str):
            raise InvalidFormat(f"IBAN must be text, got {type(raw).__name__}", field="iban")

        iban = normalize(raw)
        try:
            check_iban(iban)
        except (InvalidFormat, InvalidChecksum) as e:
            logger.debug(f"Rejected IBAN input {mask(iban)}: {e.kind.value}")
            raise

        return cls(country_code=iban[:2], check_digits=iban[2:4], bban=iban[4:])

    @model_validator(mode="after")
    def verify(self) -> "Iban":
        check_iban(str(self))
        return self

    def formatted(self) -> str:
        """Print form in blocks of four characters."""
        return group_blocks(str(self))

    def __str__(self) -> str:
        return f"{self.country_code}{self.check_digits}{self.bban}"
