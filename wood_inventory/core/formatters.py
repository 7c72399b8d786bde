"""Display helpers for volumes, amounts and dates."""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union

import pandas as pd

from .constants import CURRENCY_CODE

__all__ = ["calculate_volume", "format_currency", "format_date"]

_LEADING_FLOAT = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _parse_float(value: Any) -> float:
    """Parse ``value`` the way a browser's ``parseFloat`` does.

    Only the leading numeric part of the text is used; anything that does
    not start with a number gives ``nan``.
    """
    if isinstance(value, bool):
        value = str(value).lower()
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def _to_fixed(number: float, digits: int = 2) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if abs(number) >= 1e21:
        return repr(number)
    # Ties round away from zero, as in a browser's toFixed.
    fixed = Decimal(abs(number)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    sign = "-" if number < 0 else ""
    return f"{sign}{fixed}"


def calculate_volume(length: Any, width: Any, thickness: Any) -> str:
    """Return ``length * width * thickness`` as text with two decimals.

    Non-numeric input yields ``"NaN"`` instead of raising.

    >>> calculate_volume(2, 3, 0.5)
    '3.00'
    """
    product = _parse_float(length) * _parse_float(width) * _parse_float(thickness)
    return _to_fixed(product)


def format_currency(amount: Union[int, float, str]) -> str:
    """Format ``amount`` as Sri Lankan Rupees using en-LK grouping.

    ``amount`` goes through ``float()``, so a non-numeric string raises
    ``ValueError`` rather than rendering ``"LKR NaN"``.

    >>> format_currency(1000)
    'LKR 1,000.00'
    """
    value = float(amount)
    if math.isnan(value):
        return f"{CURRENCY_CODE} NaN"
    if math.isinf(value):
        return f"{'-' if value < 0 else ''}{CURRENCY_CODE} ∞"
    sign = "-" if value < 0 and round(abs(value), 2) != 0 else ""
    return f"{sign}{CURRENCY_CODE} {abs(value):,.2f}"


def format_date(value: Union[str, date, datetime, pd.Timestamp]) -> str:
    """Format ``value`` as ``"Mon D, YYYY"``.

    Strings are parsed with pandas; unparseable input raises ``ValueError``.

    >>> format_date("2024-01-05")
    'Jan 5, 2024'
    """
    stamp = pd.Timestamp(value)
    if pd.isna(stamp):
        raise ValueError(f"Invalid date: {value!r}")
    return f"{_MONTH_ABBR[stamp.month - 1]} {stamp.day}, {stamp.year}"
