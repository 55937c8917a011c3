"""
Cell coercion helpers.

Raw cells arrive as whatever the spreadsheet library produced.  These
helpers turn them into plain numbers and strings and never raise: a cell
that cannot be read as a number is 0, a missing cell is "".
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_WHITESPACE_RE = re.compile(r"\s+")

_MINUTES_PER_DAY = 24 * 60


def to_number(value: Any) -> float:
    """
    Coerce a raw cell to a finite float.

    ``"1 234,50"`` → 1234.5, ``True`` → 1.0, ``""`` → 0.0, ``"n/a"`` → 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float, Decimal)):
        try:
            num = float(value)
        except (OverflowError, ValueError):
            return 0.0
        return num if math.isfinite(num) else 0.0
    if not isinstance(value, str):
        return 0.0

    cleaned = _WHITESPACE_RE.sub("", value).replace(",", ".", 1)
    if not _NUMERIC_RE.match(cleaned):
        return 0.0
    try:
        num = float(cleaned)
    except (OverflowError, ValueError):
        return 0.0
    return num if math.isfinite(num) else 0.0


def to_text(value: Any) -> str:
    """Coerce a raw cell to trimmed text.  Integral floats lose their ``.0``."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def format_time_cell(value: Any) -> str:
    """
    Render a timeline time cell as ``HH:MM``.

    Numbers are Excel day fractions (0.4375 → "10:30"); any whole-day part
    is ignored.  Date-time and time values keep their wall-clock time.
    Everything else is returned as text.
    """
    if isinstance(value, (datetime, time)):
        return f"{value.hour:02d}:{value.minute:02d}"
    if isinstance(value, date):
        return to_text(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            return ""
        total_minutes = int(math.floor((value % 1) * _MINUTES_PER_DAY + 0.5))
        total_minutes %= _MINUTES_PER_DAY
        return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
    return to_text(value)

