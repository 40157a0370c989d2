"""
Table Formatting

Column widths and number rendering for the fixed-width text tables.

Numbers are written the way the downstream diff/parse tooling expects them:
shortest round-trip digits, no exponent, no trailing ``.0`` on integral
values, and ``NaN`` / ``inf`` / ``-inf`` for the non-finite cases.
"""

import math
from decimal import Decimal
from typing import Any

COLUMN_WIDTH = 14
PERCENT_WIDTH = COLUMN_WIDTH - 2


def format_float(value: Any) -> str:
    """Render a number as table text. Never raises."""
    if isinstance(value, bool) or not isinstance(value, float):
        return str(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = float.__repr__(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
