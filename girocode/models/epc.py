"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/epc.py
Version:        1.1.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    The validated EPC QR payload (SEPA Credit Transfer). Frozen
                once built; serializing it has no side effects.
------------------------------------------------------------------------------
"""

from typing import TYPE_CHECKING, List, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from girocode.exceptions import InvalidFormat, MissingRequiredField, TextTooLong
from girocode.models.amount import Amount
from girocode.models.iban import Iban
from girocode.models.purpose import PurposeCode
from girocode.models.remittance import StructuredRemittance, UnstructuredRemittance
from girocode.models.types import CharacterSet, Identification, ServiceTag, Version
from girocode.utils.validation import BIC_PATTERN

if TYPE_CHECKING:
    from girocode.builder import EpcBuilder
    from girocode.config import GiroCodeConfig

MAX_NAME_LENGTH = 70
MAX_INFORMATION_LENGTH = 70


def check_single_line(value: str, field: str) -> None:
    if "\n" in value or "\r" in value:
        raise InvalidFormat(f"{field} must be a single line", field=field)


def check_beneficiary(name: str) -> None:
    """Raises unless `name` is a non-blank single line of at most 70 characters."""
    if not name.strip():
        raise MissingRequiredField("Beneficiary name is missing", field="beneficiary")
    check_single_line(name, "beneficiary")
    if len(name) > MAX_NAME_LENGTH:
        raise TextTooLong(
            f"Beneficiary name exceeds {MAX_NAME_LENGTH} characters ({len(name)})",
            field="beneficiary"
        )


def check_bic(bic: Optional[str], version: Optional[Version] = None) -> None:
    """
    Raises InvalidFormat for a malformed (normalized) BIC and
    MissingRequiredField when version 001 gets none.
    """
    if not bic:
        if version == Version.V1:
            raise MissingRequiredField("BIC is mandatory for version 001", field="bic")
        return
    if not BIC_PATTERN.fullmatch(bic):
        raise InvalidFormat(
            f"BIC '{bic}' must have 8 or 11 characters (e.g. GENODEF1SLR)", field="bic"
        )


def check_information(information: Optional[str]) -> None:
    if not information:
        return
    check_single_line(information, "information")
    if len(information) > MAX_INFORMATION_LENGTH:
        raise TextTooLong(
            f"Information exceeds {MAX_INFORMATION_LENGTH} characters ({len(information)})",
            field="information"
        )


class Epc(BaseModel):
    """
    A complete, validated EPC QR payload.

    Use Epc.builder()...build(), which reports violations as GiroCodeError
    subclasses. Direct construction runs the same checks and fails with a
    pydantic ValidationError. str(epc) renders the payload text.
    """
    model_config = ConfigDict(frozen=True)

    service_tag: ServiceTag = ServiceTag.BCD
    version: Version = Version.V2
    character_set: CharacterSet = CharacterSet.UTF8
    identification: Identification = Identification.SCT
    # BIC of the beneficiary PSP, mandatory for version 001
    bic: Optional[str] = None
    # Name of the beneficiary (creditor)
    beneficiary: str
    iban: Iban
    # None leaves the amount to the payer
    amount: Optional[Amount] = None
    purpose: Optional[PurposeCode] = None
    remittance: Optional[Union[StructuredRemittance, UnstructuredRemittance]] = None
    # Beneficiary to originator information
    information: Optional[str] = None

    @model_validator(mode="after")
    def verify(self) -> "Epc":
        from girocode.serializer import check_payload

        check_beneficiary(self.beneficiary)
        check_bic(self.bic, self.version)
        if self.purpose is not None:
            self.purpose.check()
        check_information(self.information)
        check_payload(self)
        return self

    @classmethod
    def builder(cls, config: Optional["GiroCodeConfig"] = None) -> "EpcBuilder":
        """Entry point for building a payload: Epc.builder().beneficiary(...)..."""
        from girocode.builder import EpcBuilder
        return EpcBuilder(config)

    def lines(self) -> List[str]:
        from girocode.serializer import payload_lines
        return payload_lines(self)

    def to_bytes(self) -> bytes:
        """Payload encoded in the declared character set."""
        from girocode.serializer import encode
        return encode(self)

    def __str__(self) -> str:
        from girocode.serializer import serialize
        return serialize(self)
