"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/creditor_reference.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Structured creditor reference ("RF reference", ISO 11649).
                Accepts the usual space-grouped input, stores it unspaced.
------------------------------------------------------------------------------
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from girocode.exceptions import InvalidChecksum, InvalidFormat
from girocode.logger import get_logger
from girocode.utils.formatting import group_blocks
from girocode.utils.validation import (
    ALNUM_PATTERN,
    CHECK_DIGITS_PATTERN,
    creditor_reference_check_digits,
    normalize,
)

logger = get_logger("models.reference")

RF_PREFIX = "RF"
RF_MAX_LENGTH = 25
RF_MAX_BODY_LENGTH = RF_MAX_LENGTH - 4


def check_creditor_reference(reference: str) -> None:
    """Raises InvalidFormat or InvalidChecksum for a normalized RF reference."""
    if not reference.startswith(RF_PREFIX):
        raise InvalidFormat("Creditor reference must start with 'RF'", field="reference")
    if len(reference) > RF_MAX_LENGTH:
        raise InvalidFormat(
            f"Creditor reference exceeds {RF_MAX_LENGTH} characters ({len(reference)})",
            field="reference"
        )

    check, body = reference[2:4], reference[4:]
    if not CHECK_DIGITS_PATTERN.fullmatch(check):
        raise InvalidFormat("Creditor reference needs two check digits after 'RF'", field="reference")
    if not body:
        raise InvalidFormat("Creditor reference has no reference body", field="reference")
    if not ALNUM_PATTERN.fullmatch(body):
        raise InvalidFormat("Creditor reference body may only contain A-Z and 0-9", field="reference")

    # Check digits range 02-98; 00, 01 and 99 would also leave residue 1
    expected = creditor_reference_check_digits(body)
    if check != expected:
        raise InvalidChecksum(
            f"Creditor reference checksum mismatch, expected RF{expected}",
            field="reference"
        )


class CreditorReference(BaseModel):
    """A checksum-validated ISO 11649 creditor reference."""
    model_config = ConfigDict(frozen=True)

    check_digits: str
    body: str

    @classmethod
    def parse(cls, raw: Any) -> "CreditorReference":
        """
        Parses references like 'RF18 5390 0754 7034'.

        Raises:
            InvalidFormat: Missing prefix/check digits, bad characters, too long.
            InvalidChecksum: Check digits differ from the computed ones.
        """
        if not isinstance(raw, str):
            raise InvalidFormat(
                f"Creditor reference must be text, got {type(raw).__name__}", field="reference"
            )

        reference = normalize(raw)
        try:
            check_creditor_reference(reference)
        except (InvalidFormat, InvalidChecksum) as e:
            logger.debug(f"Rejected creditor reference input: {e}")
            raise

        return cls(check_digits=reference[2:4], body=reference[4:])

    @classmethod
    def create(cls, body: str) -> "CreditorReference":
        """
        Generates a reference with freshly computed check digits,
        e.g. '539007547034' -> RF18539007547034.
        """
        body = normalize(body)
        if not body or len(body) > RF_MAX_BODY_LENGTH or not ALNUM_PATTERN.fullmatch(body):
            raise InvalidFormat(
                f"Reference body must be 1-{RF_MAX_BODY_LENGTH} characters of A-Z and 0-9",
                field="reference"
            )
        return cls(check_digits=creditor_reference_check_digits(body), body=body)

    @model_validator(mode="after")
    def verify(self) -> "CreditorReference":
        check_creditor_reference(str(self))
        return self

    def formatted(self) -> str:
        """Print form in blocks of four characters."""
        return group_blocks(str(self))

    def __str__(self) -> str:
        return f"{RF_PREFIX}{self.check_digits}{self.body}"
