"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/utils/formatting.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Display helpers for account identifiers and amounts.
------------------------------------------------------------------------------
"""

from decimal import Decimal


def group_blocks(value: str, size: int = 4, sep: str = " ") -> str:
    """
    Splits a normalized identifier into blocks for printing.
    DE02120300000000202051 -> DE02 1203 0000 0000 2020 51
    """
    return sep.join(value[i:i + size] for i in range(0, len(value), size))


def format_cents(cents: int) -> str:
    """Renders integer minor units as a plain two-decimal string (2500 -> '25.00')."""
    return f"{Decimal(cents).scaleb(-2):.2f}"
