"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/exceptions.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Error taxonomy for payload validation. Every rejected input
                raises exactly one of these, each mapping to one actionable
                user-facing message.
------------------------------------------------------------------------------
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of validation failures."""
    INVALID_FORMAT = "InvalidFormat"
    INVALID_CHECKSUM = "InvalidChecksum"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_PURPOSE_CODE = "InvalidPurposeCode"
    TEXT_TOO_LONG = "TextTooLong"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"


class GiroCodeError(ValueError):
    """Base class for all validation failures."""
    kind: ErrorKind = ErrorKind.INVALID_FORMAT

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field!r}, message={self.message!r})"


class InvalidFormat(GiroCodeError):
    """Structural violation: length, disallowed characters, missing prefix."""
    kind = ErrorKind.INVALID_FORMAT


class InvalidChecksum(GiroCodeError):
    """Well-formed IBAN or creditor reference whose MOD 97-10 check fails."""
    kind = ErrorKind.INVALID_CHECKSUM


class InvalidAmount(GiroCodeError):
    """Malformed amount text or value outside the permitted range."""
    kind = ErrorKind.INVALID_AMOUNT


class InvalidPurposeCode(GiroCodeError):
    """Purpose code that is not four uppercase letters."""
    kind = ErrorKind.INVALID_PURPOSE_CODE


class TextTooLong(GiroCodeError):
    """Free-text field (or the whole payload) exceeds its maximum length."""
    kind = ErrorKind.TEXT_TOO_LONG


class MissingRequiredField(GiroCodeError):
    """Mandatory field was never set on the builder."""
    kind = ErrorKind.MISSING_REQUIRED_FIELD
