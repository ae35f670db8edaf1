"""pt-BR display strings for figures surfaced in gates and advisories."""

from __future__ import annotations

import math


def format_number(value: float, max_decimals: int = 2) -> str:
    """Render ``value`` with pt-BR separators: 1234567.5 -> '1.234.567,5'."""
    rounded = round(value, max_decimals)
    if float(rounded).is_integer():
        text = f"{int(rounded):,}"
    else:
        text = f"{rounded:,.{max_decimals}f}".rstrip("0")
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_brl(value: float) -> str:
    return f"R$ {format_number(value)}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{format_number(round(value, decimals), decimals)}%"


def round_half_up(value: float) -> int:
    """Round halves toward +inf (2.5 -> 3, -2.5 -> -2), unlike ``round``."""
    return int(math.floor(value + 0.5))
