"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Builds and validates EPC QR ("GiroCode") payloads for SEPA
                credit transfers. Exports the public API.
------------------------------------------------------------------------------
"""

from .builder import EpcBuilder
from .config import GiroCodeConfig
from .exceptions import (
    ErrorKind,
    GiroCodeError,
    InvalidAmount,
    InvalidChecksum,
    InvalidFormat,
    InvalidPurposeCode,
    MissingRequiredField,
    TextTooLong,
)
from .generator import GiroCodeGenerator
from .models import (
    Amount,
    CharacterSet,
    CreditorReference,
    Epc,
    Iban,
    Identification,
    Purpose,
    PurposeCode,
    ReferenceType,
    Remittance,
    ServiceTag,
    StructuredRemittance,
    UnstructuredRemittance,
    Version,
)
from .serializer import encode, serialize

__version__ = "1.0.0"
