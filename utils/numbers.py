"""
utils/numbers.py
----------------
Conversions for NUMERIC values returned by psycopg2 as Decimal.
"""

from decimal import Decimal
from typing import Optional


def optional_float(value: Optional[Decimal]) -> Optional[float]:
    """Convert a nullable NUMERIC column to float, keeping None."""
    return float(value) if value is not None else None


def format_grade(value: Optional[float]) -> str:
    """Render a grade with two decimals, or '-' when it is not set yet."""
    return f"{value:.2f}" if value is not None else "-"
