"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/types.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Header enumerations of the EPC QR payload (EPC069-12).
------------------------------------------------------------------------------
"""

from enum import Enum


class ServiceTag(str, Enum):
    BCD = "BCD"


class Version(str, Enum):
    """Payload version. 001 requires a BIC, 002 makes it optional (EEA)."""
    V1 = "001"
    V2 = "002"


class CharacterSet(str, Enum):
    """Character set identifier with its Python codec name."""
    UTF8 = "1"
    ISO8859_1 = "2"
    ISO8859_2 = "3"
    ISO8859_4 = "4"
    ISO8859_5 = "5"
    ISO8859_7 = "6"
    ISO8859_10 = "7"
    ISO8859_15 = "8"

    @property
    def codec(self) -> str:
        return _CODECS[self]


_CODECS = {
    CharacterSet.UTF8: "utf-8",
    CharacterSet.ISO8859_1: "iso-8859-1",
    CharacterSet.ISO8859_2: "iso-8859-2",
    CharacterSet.ISO8859_4: "iso-8859-4",
    CharacterSet.ISO8859_5: "iso-8859-5",
    CharacterSet.ISO8859_7: "iso-8859-7",
    CharacterSet.ISO8859_10: "iso-8859-10",
    CharacterSet.ISO8859_15: "iso-8859-15",
}


class Identification(str, Enum):
    SCT = "SCT"    # SEPA Credit Transfer
    INST = "INST"  # SEPA Instant Credit Transfer


class ReferenceType(str, Enum):
    """Scheme of a structured remittance reference."""
    SCOR = "SCOR"  # ISO 11649 creditor reference


def header_value(enum_cls, value):
    """
    Resolves a header setting to its enum member. Accepts the member itself,
    its code ('002', '1', 'SCT') or a plain number for version and
    character set (2 -> Version.V2, 1 -> CharacterSet.UTF8).

    Raises:
        ValueError: The value is not a code of enum_cls.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        value = f"{value:03d}" if enum_cls is Version else str(value)
    if isinstance(value, str):
        value = value.strip().upper()
    return enum_cls(value)
