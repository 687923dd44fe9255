"""Utility helpers for kalkulator pajak."""

import math
from decimal import Decimal, ROUND_HALF_UP

__all__ = ["round_half_up", "format_number"]


def round_half_up(value: float) -> int:
    """Round value to nearest integer using the HALF_UP rule. inf and nan pass through unchanged."""
    if not math.isfinite(value):
        return value
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """
    Format an amount with comma thousands separators.
    Whole amounts are shown without decimals, others with at most two.
    """
    value = float(value)
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")
