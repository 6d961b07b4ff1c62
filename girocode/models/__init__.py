"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for the payload value types. Exports Epc,
                Iban, CreditorReference and friends for easy access.
------------------------------------------------------------------------------
"""

from .amount import Amount
from .creditor_reference import CreditorReference
from .epc import Epc
from .iban import Iban
from .purpose import Purpose, PurposeCode
from .remittance import Remittance, StructuredRemittance, UnstructuredRemittance
from .types import CharacterSet, Identification, ReferenceType, ServiceTag, Version
