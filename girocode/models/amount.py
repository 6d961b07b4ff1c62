"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/models/amount.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Euro amount for the transfer. Keeps the validated input text
                for output and does all range checks on integer cents.
------------------------------------------------------------------------------
"""

import re
from decimal import Decimal
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, model_validator

from girocode.exceptions import InvalidAmount
from girocode.logger import get_logger
from girocode.utils.formatting import format_cents

logger = get_logger("models.amount")

AMOUNT_PATTERN = re.compile(r'([0-9]+)(?:\.([0-9]{1,2}))?')
MIN_CENTS = 1
MAX_CENTS = 99_999_999_999  # EUR 999999999.99
CURRENCY = "EUR"


def to_cents(text: str) -> int:
    """
    Converts validated amount text to integer cents.
    '25' -> 2500, '25.5' -> 2550, '25.05' -> 2505.

    Raises:
        InvalidAmount: Text is not digits with an optional 1-2 digit fraction.
    """
    match = AMOUNT_PATTERN.fullmatch(text)
    if not match:
        raise InvalidAmount(
            f"Amount '{text}' must be digits with up to two decimals (e.g. 12.50)",
            field="amount"
        )
    whole, fraction = match.group(1), match.group(2) or ""
    return int(whole) * 100 + int(fraction.ljust(2, "0"))


def amount_text(raw: Union[str, int, Decimal, float]) -> str:
    """Turns supported input types into amount text without rounding."""
    if isinstance(raw, bool):
        raise InvalidAmount("Amount must be a number, got bool", field="amount")
    if isinstance(raw, str):
        return raw.strip()
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, Decimal):
        if not raw.is_finite():
            raise InvalidAmount(f"Amount must be finite, got {raw}", field="amount")
        return format(raw, "f")
    if isinstance(raw, float):
        # repr() yields the shortest text that round-trips, i.e. what was typed
        return repr(raw)
    raise InvalidAmount(f"Unsupported amount type {type(raw).__name__}", field="amount")


class Amount(BaseModel):
    """A positive euro amount of at most 999,999,999.99."""
    model_config = ConfigDict(frozen=True)

    value: str

    @classmethod
    def parse(cls, raw: Any) -> "Amount":
        """
        Parses '25', '25.5' or '25.00'. Empty text, zero, negative values and
        anything above 999999999.99 raise InvalidAmount.
        """
        text = amount_text(raw)
        if not text:
            raise InvalidAmount("Amount must not be empty; omit it instead", field="amount")
        try:
            check_amount(text)
        except InvalidAmount as e:
            logger.debug(f"Rejected amount input: {e}")
            raise
        return cls(value=text)

    @model_validator(mode="after")
    def verify(self) -> "Amount":
        check_amount(self.value)
        return self

    @property
    def cents(self) -> int:
        return to_cents(self.value)

    def as_decimal(self) -> Decimal:
        return Decimal(self.cents).scaleb(-2)

    def formatted(self) -> str:
        """Two-decimal form, e.g. '25.50'."""
        return format_cents(self.cents)

    def __str__(self) -> str:
        return self.value


def check_amount(text: str) -> None:
    cents = to_cents(text)
    if cents < MIN_CENTS:
        raise InvalidAmount(f"Amount must be at least 0.01, got '{text}'", field="amount")
    if cents > MAX_CENTS:
        raise InvalidAmount(f"Amount must not exceed 999999999.99, got '{text}'", field="amount")
