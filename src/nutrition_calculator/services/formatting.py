"""Numeric formatting helpers for display."""

import math


def format_number(value: float | None, digits: int = 0) -> str:
    """Format with a fixed number of decimals and thousands grouping.

    Missing or non-finite values render as "0".
    """
    if value is None or not math.isfinite(value):
        return "0"
    text = f"{value:,.{digits}f}"
    if text.startswith("-") and float(text.replace(",", "")) == 0:
        return text[1:]
    return text


def format_percent(value: float | None, digits: int = 1) -> str:
    """Format a percentage value with a trailing percent sign."""
    return f"{format_number(value, digits)}%"
