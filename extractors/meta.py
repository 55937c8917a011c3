"""
Metadata Extractor: event name, date, location and guest count from the
top of the main sheet.

Only column A of the first ``META_SCAN_ROWS`` rows is read:

    row 1   the event name
    "Date: 12.09.2025" / "Data: …"
    "Location: Riverside Hall"
    "Number of people" with the count in column C
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Sequence

from detection import constants
from dto.records import EventMeta
from dto.workbook import Row, cell_at
from utils.cells import to_number, to_text

NAME_ROW = 1
COL_LABEL = 0
COL_GUESTS = 2

_DATE_PREFIX_RE = re.compile(r"^(?:date|data):\s*", re.IGNORECASE)
_LOCATION_PREFIX_RE = re.compile(r"^location:\s*", re.IGNORECASE)
_GUESTS_MARKER = "number of people"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def extract_meta(rows: Sequence[Row]) -> EventMeta:
    fields: Dict[str, Any] = {}

    for i in range(min(len(rows), constants.META_SCAN_ROWS)):
        row = rows[i] or []
        label = to_text(cell_at(row, COL_LABEL))
        if not label:
            continue

        if i == NAME_ROW:
            fields["name"] = label
        if _DATE_PREFIX_RE.match(label):
            fields["date"] = _DATE_PREFIX_RE.sub("", label).strip()
        if _LOCATION_PREFIX_RE.match(label):
            fields["location"] = _LOCATION_PREFIX_RE.sub("", label).strip()
        if _GUESTS_MARKER in label.lower():
            guests = to_number(cell_at(row, COL_GUESTS))
            if guests:
                fields["guests"] = _round_half_up(guests)

    return EventMeta(**fields)
