"""
Header-row location.

Templates move their tables around freely, so a table is anchored by the
first row that mentions one of its column labels ("Position", "Позиция",
"Статья расходов", …) rather than by a fixed row number.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from dto.workbook import Row, cell_at

Markers = Union[str, Iterable[str]]


def _normalise_markers(markers: Markers) -> List[str]:
    if isinstance(markers, str):
        markers = [markers]
    return [m.lower() for m in markers if m]


def find_header_row(
    rows: Sequence[Row],
    markers: Markers,
    *,
    column: Optional[int] = None,
    max_rows: Optional[int] = None,
) -> Optional[int]:
    """
    Return the index of the first row with a text cell that contains any
    of *markers* (case-insensitive), or ``None`` when no row matches.

    With *column* set only that column is inspected.  *max_rows* bounds
    the scan to the top of the sheet.
    """
    needles = _normalise_markers(markers)
    if not needles:
        return None

    limit = len(rows) if max_rows is None else min(len(rows), max_rows)
    for i in range(limit):
        row = rows[i] or []
        cells = [cell_at(row, column)] if column is not None else row
        # Only genuine text cells can carry a column label.
        for text in (c.lower() for c in cells if isinstance(c, str)):
            if any(n in text for n in needles):
                return i
    return None
