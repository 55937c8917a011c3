"""
Table-region detection below a located header row.

Heuristic rules:
  - A row is a *candidate blank* when the extractor's blank test says its
    key columns are all empty / zero.
  - At a candidate blank row, count the run of consecutive blank rows
    starting there, looking at most ``EMPTY_STREAK_LOOKAHEAD`` rows ahead.
    A run of ``EMPTY_STREAK_MIN`` or more ends the table (the row itself
    and everything after it are excluded).
  - A shorter run is a spacer inside the table: the blank row is skipped
    and scanning continues.
  - A row with a label but only zero numbers is a section marker: it names
    the group that following data rows belong to.

Templates pad tables with single spacer rows but always finish with a long
blank tail (or with notes far below it), which is what the streak test
tells apart.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, Sequence, Tuple

from detection import constants
from dto.workbook import Row

logger = logging.getLogger(__name__)

BlankTest = Callable[[Row], bool]


def is_section_marker(label: str, numbers: Iterable[float]) -> bool:
    """A label-only row: non-empty text and every numeric field zero."""
    return bool(label) and all(n == 0 for n in numbers)


class TableRegionDetector:
    """
    Walks a table body and decides where it ends.

    Usage::

        detector = TableRegionDetector(is_blank_row=my_blank_test)
        for i, row in detector.iter_body(rows, start=header + 1):
            ...
    """

    def __init__(
        self,
        is_blank_row: BlankTest,
        *,
        lookahead: Optional[int] = None,
        min_streak: Optional[int] = None,
    ) -> None:
        self._is_blank_row = is_blank_row
        self.lookahead = (
            constants.EMPTY_STREAK_LOOKAHEAD if lookahead is None else lookahead
        )
        self.min_streak = (
            constants.EMPTY_STREAK_MIN if min_streak is None else min_streak
        )

    # ------------------------------------------------------------------
    # Heuristic helpers
    # ------------------------------------------------------------------

    def is_blank(self, row: Optional[Row]) -> bool:
        return self._is_blank_row(row or [])

    def blank_streak(self, rows: Sequence[Row], start: int) -> int:
        """Length of the blank run starting at *start*, capped at the lookahead."""
        streak = 0
        for k in range(start, min(start + self.lookahead, len(rows))):
            if not self.is_blank(rows[k]):
                break
            streak += 1
        return streak

    def ends_table(self, rows: Sequence[Row], index: int) -> bool:
        return self.blank_streak(rows, index) >= self.min_streak

    # ------------------------------------------------------------------
    # Body iteration
    # ------------------------------------------------------------------

    def iter_body(
        self, rows: Sequence[Row], start: int
    ) -> Iterator[Tuple[int, Row]]:
        """
        Yield ``(index, row)`` for every non-blank row from *start* until
        the end-of-table streak (or the end of the sheet).
        """
        for i in range(max(start, 0), len(rows)):
            row = rows[i] or []
            if not self.is_blank(row):
                yield i, row
                continue
            if self.ends_table(rows, i):
                logger.debug("Table ends at row %d (blank streak)", i)
                return
