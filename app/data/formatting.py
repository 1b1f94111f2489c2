from __future__ import annotations

from decimal import Decimal
from typing import Any

import pandas as pd


CURRENCY_SYMBOL = "₱"


def _minor_units(amount: Any) -> Decimal:
    # NULL aggregates arrive as None, or NaN once they pass through a DataFrame
    if amount is None or pd.isna(amount):
        return Decimal(0)
    return Decimal(str(amount))


def format_currency(amount: Any) -> str:
    """Minor units -> display string, e.g. 150000 -> '₱1,500.00'."""
    major = _minor_units(amount) / 100
    sign = "-" if major < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(major):,.2f}"


def to_major_units(amount: Any) -> float:
    """Minor units -> form value, e.g. 100000 -> 1000.0."""
    return float(_minor_units(amount) / 100)
