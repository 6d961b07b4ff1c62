"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/purpose.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    SEPA purpose codes (ISO 20022 ExternalPurpose1Code). Known
                codes are enumerated, anything else passes through as-is.
------------------------------------------------------------------------------
"""

import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from girocode.exceptions import InvalidPurposeCode

PURPOSE_PATTERN = re.compile(r'[A-Z]{4}')


class Purpose(str, Enum):
    """Commonly used purpose codes."""
    ACCT = "ACCT"  # Account management
    BENE = "BENE"  # Unemployment / disability benefit
    BONU = "BONU"  # Bonus payment
    CASH = "CASH"  # Cash management transfer
    CBFF = "CBFF"  # Capital building (savings)
    CHAR = "CHAR"  # Charity payment
    COMC = "COMC"  # Commercial payment
    DIVI = "DIVI"  # Dividend
    ELEC = "ELEC"  # Electricity bill
    GASB = "GASB"  # Gas bill
    GDDS = "GDDS"  # Purchase / sale of goods
    GOVT = "GOVT"  # Government payment
    INSU = "INSU"  # Insurance premium
    INTE = "INTE"  # Interest
    LOAN = "LOAN"  # Loan
    OTHR = "OTHR"  # Other
    PENS = "PENS"  # Pension payment
    PHON = "PHON"  # Telephone bill
    RENT = "RENT"  # Rent
    SALA = "SALA"  # Salary
    SCVE = "SCVE"  # Purchase / sale of services
    SUPP = "SUPP"  # Supplier payment
    TAXS = "TAXS"  # Tax payment
    TRAD = "TRAD"  # Trade services
    VATX = "VATX"  # Value added tax payment
    WTER = "WTER"  # Water bill


class PurposeCode(BaseModel):
    """
    Either a known Purpose (known is set) or a caller supplied code
    (known is None). Unknown codes are checked by check(), which the
    builder and Epc call during validation.
    """
    model_config = ConfigDict(frozen=True)

    code: str
    known: Optional[Purpose] = None

    @classmethod
    def from_code(cls, text: Union[str, Purpose]) -> "PurposeCode":
        if isinstance(text, Purpose):
            return cls.of(text)
        try:
            return cls.of(Purpose(text))
        except ValueError:
            return cls(code=text)

    @classmethod
    def of(cls, purpose: Purpose) -> "PurposeCode":
        return cls(code=purpose.value, known=purpose)

    @property
    def is_known(self) -> bool:
        return self.known is not None

    def check(self) -> None:
        if not PURPOSE_PATTERN.fullmatch(self.code):
            raise InvalidPurposeCode(
                f"Purpose code must be four letters A-Z, got '{self.code}'", field="purpose"
            )

    def __str__(self) -> str:
        return self.code
