"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/builder.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Staging structure for EPC payloads. Setters only record raw
                input; build() validates everything in one pass and returns
                an immutable Epc.
------------------------------------------------------------------------------
"""

from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pydantic

from girocode.config import GiroCodeConfig
from girocode.exceptions import (
    GiroCodeError,
    InvalidFormat,
    InvalidPurposeCode,
    MissingRequiredField,
    TextTooLong,
)
from girocode.logger import get_logger, mask
from girocode.models.amount import Amount
from girocode.models.creditor_reference import CreditorReference
from girocode.models.epc import Epc, check_beneficiary, check_bic, check_information
from girocode.models.iban import Iban
from girocode.models.purpose import Purpose, PurposeCode
from girocode.models.remittance import (
    MAX_STRUCTURED_LENGTH,
    Remittance,
    StructuredRemittance,
    UnstructuredRemittance,
)
from girocode.models.types import CharacterSet, Identification, Version, header_value
from girocode.utils.validation import normalize

logger = get_logger("builder")


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class EpcBuilder:
    """
    Collects payload fields in any order. Nothing is checked before build(),
    which stops at the first violation; errors() reports all of them.

        epc = (Epc.builder()
               .beneficiary("Codeberg e.V.")
               .iban("DE90 8306 5408 0004 1042 42")
               .amount("10.00")
               .text("for the good cause")
               .build())
    """

    def __init__(self, config: Optional[GiroCodeConfig] = None) -> None:
        self.config = config or GiroCodeConfig()
        self._version: Any = self.config.version
        self._character_set: Any = self.config.character_set
        self._identification: Any = self.config.identification
        self._bic: Optional[str] = None
        self._beneficiary: Optional[str] = None
        self._iban: Any = None
        self._amount: Any = None
        self._purpose: Any = None
        self._remittance: Optional[Remittance] = None
        self._reference: Any = None
        self._text: Optional[str] = None
        self._information: Optional[str] = None

    # --- Setters ---

    def version(self, version: Union[Version, str, int]) -> "EpcBuilder":
        self._version = version
        return self

    def character_set(self, character_set: Union[CharacterSet, str, int]) -> "EpcBuilder":
        self._character_set = character_set
        return self

    def identification(self, identification: Union[Identification, str]) -> "EpcBuilder":
        self._identification = identification
        return self

    def bic(self, bic: Optional[str]) -> "EpcBuilder":
        self._bic = bic
        return self

    def beneficiary(self, name: Optional[str]) -> "EpcBuilder":
        self._beneficiary = name
        return self

    creditor_name = beneficiary

    def iban(self, iban: Union[Iban, str, None]) -> "EpcBuilder":
        self._iban = iban
        return self

    def amount(self, amount: Union[Amount, str, int, Decimal, float, None]) -> "EpcBuilder":
        self._amount = amount
        return self

    def purpose(self, purpose: Union[PurposeCode, Purpose, str, None]) -> "EpcBuilder":
        self._purpose = purpose
        return self

    def remittance(self, remittance: Optional[Remittance]) -> "EpcBuilder":
        self._remittance = remittance
        return self

    def reference(self, reference: Union[CreditorReference, str, None]) -> "EpcBuilder":
        """Structured remittance from an RF reference."""
        self._reference = reference
        return self

    def text(self, text: Optional[str]) -> "EpcBuilder":
        """Unstructured remittance text."""
        self._text = text
        return self

    def information(self, information: Optional[str]) -> "EpcBuilder":
        self._information = information
        return self

    # --- Validation ---

    def build(self) -> Epc:
        """
        Validates all staged fields and assembles the Epc.

        Raises:
            GiroCodeError: The first violation found (see girocode.exceptions).
        """
        try:
            values = {name: step() for name, step in self._steps()}
            epc = self._assemble(values)
        except GiroCodeError as e:
            logger.info(f"EPC payload rejected: {e.kind.value} in field '{e.field}'")
            raise
        logger.debug(f"Built EPC payload for IBAN {mask(str(epc.iban))}")
        return epc

    def errors(self) -> List[GiroCodeError]:
        """
        Runs every check and returns all violations, empty if build() would
        succeed. Payload size is only checked once all fields are valid.
        """
        found: List[GiroCodeError] = []
        values: Dict[str, Any] = {}
        for name, step in self._steps():
            try:
                values[name] = step()
            except GiroCodeError as e:
                found.append(e)
        if not found:
            try:
                self._assemble(values)
            except GiroCodeError as e:
                found.append(e)
        return found

    def is_valid(self) -> bool:
        return not self.errors()

    def _steps(self) -> List[Tuple[str, Callable[[], Any]]]:
        return [
            ("_required_beneficiary", self._require_beneficiary),
            ("_required_iban", self._require_iban),
            ("version", self._build_version),
            ("character_set", self._build_character_set),
            ("identification", self._build_identification),
            ("beneficiary", self._build_beneficiary),
            ("bic", self._build_bic),
            ("iban", self._build_iban),
            ("amount", self._build_amount),
            ("purpose", self._build_purpose),
            ("remittance", self._build_remittance),
            ("information", self._build_information),
        ]

    def _assemble(self, values: Dict[str, Any]) -> Epc:
        """Constructs the Epc; its own checks cover encoding and payload size."""
        try:
            return Epc(**{k: v for k, v in values.items() if not k.startswith("_")})
        except pydantic.ValidationError as e:
            for error in e.errors():
                cause = error.get("ctx", {}).get("error")
                if isinstance(cause, GiroCodeError):
                    raise cause from None
            raise

    def _require_beneficiary(self) -> None:
        if _blank(self._beneficiary):
            raise MissingRequiredField("Beneficiary name is missing", field="beneficiary")

    def _require_iban(self) -> None:
        if _blank(self._iban):
            raise MissingRequiredField("IBAN is missing", field="iban")

    def _build_version(self) -> Version:
        try:
            return header_value(Version, self._version)
        except ValueError:
            raise InvalidFormat(f"Unknown version {self._version!r}", field="version")

    def _build_character_set(self) -> CharacterSet:
        try:
            return header_value(CharacterSet, self._character_set)
        except ValueError:
            raise InvalidFormat(
                f"Unknown character set {self._character_set!r}", field="character_set"
            )

    def _build_identification(self) -> Identification:
        try:
            return header_value(Identification, self._identification)
        except ValueError:
            raise InvalidFormat(
                f"Unknown identification {self._identification!r}", field="identification"
            )

    def _build_beneficiary(self) -> Optional[str]:
        if _blank(self._beneficiary):
            return None  # reported by _require_beneficiary
        if not isinstance(self._beneficiary, str):
            raise InvalidFormat("Beneficiary name must be text", field="beneficiary")
        name = self._beneficiary.strip()
        check_beneficiary(name)
        return name

    def _build_bic(self) -> Optional[str]:
        if _blank(self._bic):
            try:
                version = self._build_version()
            except InvalidFormat:
                return None  # reported by _build_version
            check_bic(None, version)
            return None

        if not isinstance(self._bic, str):
            raise InvalidFormat("BIC must be text", field="bic")
        bic = normalize(self._bic)
        check_bic(bic)
        return bic

    def _build_iban(self) -> Optional[Iban]:
        if _blank(self._iban):
            return None  # reported by _require_iban
        if isinstance(self._iban, Iban):
            return self._iban
        return Iban.parse(self._iban)

    def _build_amount(self) -> Optional[Amount]:
        if self._amount is None or isinstance(self._amount, Amount):
            return self._amount
        return Amount.parse(self._amount)

    def _build_purpose(self) -> Optional[PurposeCode]:
        if _blank(self._purpose):
            return None
        if isinstance(self._purpose, PurposeCode):
            purpose = self._purpose
        elif isinstance(self._purpose, (str, Purpose)):
            purpose = PurposeCode.from_code(self._purpose)
        else:
            raise InvalidPurposeCode("Purpose code must be text", field="purpose")
        purpose.check()
        return purpose

    def _build_remittance(self) -> Optional[Remittance]:
        staged = [
            value for value in (self._remittance, self._reference, self._text)
            if not _blank(value)
        ]
        if len(staged) > 1:
            raise InvalidFormat(
                "Use either a structured reference or unstructured text, not both",
                field="remittance"
            )
        if not staged:
            return None

        if isinstance(self._remittance, (StructuredRemittance, UnstructuredRemittance)):
            remittance = self._remittance
        elif self._remittance is not None:
            raise InvalidFormat("Remittance must be structured or unstructured", field="remittance")
        elif not _blank(self._reference):
            remittance = Remittance.structured(self._reference)
        else:
            remittance = Remittance.unstructured(self._text)

        if len(remittance.reference_line) > MAX_STRUCTURED_LENGTH:
            raise TextTooLong(
                f"Structured reference exceeds {MAX_STRUCTURED_LENGTH} characters",
                field="remittance"
            )
        return remittance

    def _build_information(self) -> Optional[str]:
        if _blank(self._information):
            return None
        if not isinstance(self._information, str):
            raise InvalidFormat("Information must be text", field="information")
        check_information(self._information)
        return self._information
