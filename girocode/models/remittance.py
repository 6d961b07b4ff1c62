"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/remittance.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Remittance information: either free text (unstructured) or a
                creditor reference (structured), never both.
------------------------------------------------------------------------------
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, model_validator

from girocode.exceptions import InvalidFormat, TextTooLong
from girocode.models.creditor_reference import CreditorReference
from girocode.models.types import ReferenceType

MAX_UNSTRUCTURED_LENGTH = 140
MAX_STRUCTURED_LENGTH = 35


class Remittance(BaseModel):
    """Common base of the two remittance variants."""
    model_config = ConfigDict(frozen=True)

    @staticmethod
    def unstructured(text: str) -> "UnstructuredRemittance":
        """
        Free-text remittance of at most 140 characters.

        Raises:
            TextTooLong: The text has more than 140 characters.
        """
        check_unstructured(text)
        return UnstructuredRemittance(text=text)

    @staticmethod
    def structured(
        reference: Union[CreditorReference, str],
        reference_type: ReferenceType = ReferenceType.SCOR
    ) -> "StructuredRemittance":
        """Structured remittance. Raw text is parsed as RF reference first."""
        if isinstance(reference, str):
            reference = CreditorReference.parse(reference)
        elif not isinstance(reference, CreditorReference):
            raise InvalidFormat(
                f"Reference must be text or CreditorReference, got {type(reference).__name__}",
                field="reference"
            )
        return StructuredRemittance(reference=reference, reference_type=reference_type)

    @property
    def reference_line(self) -> str:
        return ""

    @property
    def text_line(self) -> str:
        return ""


class UnstructuredRemittance(Remittance):
    text: str

    @model_validator(mode="after")
    def verify(self) -> "UnstructuredRemittance":
        check_unstructured(self.text)
        return self

    @property
    def text_line(self) -> str:
        return self.text


class StructuredRemittance(Remittance):
    reference: CreditorReference
    reference_type: ReferenceType = ReferenceType.SCOR

    @property
    def reference_line(self) -> str:
        return str(self.reference)


def check_unstructured(text: str) -> None:
    if not isinstance(text, str):
        raise InvalidFormat(
            f"Remittance text must be text, got {type(text).__name__}", field="remittance"
        )
    if "\n" in text or "\r" in text:
        raise InvalidFormat("Remittance text must be a single line", field="remittance")
    if len(text) > MAX_UNSTRUCTURED_LENGTH:
        raise TextTooLong(
            f"Remittance text exceeds {MAX_UNSTRUCTURED_LENGTH} characters ({len(text)})",
            field="remittance"
        )
