"""
Rider Extractor: prose sheets with no table structure.

A rider (the artist's technical / hospitality requirements) is prose
spread over cells.  Cells in the same row are joined with spaces, rows
with newlines, and every reasonably long line becomes a rider item.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from detection import constants
from dto.output import SheetExtraction
from dto.records import RiderDocument, RiderItem
from dto.workbook import Row
from extractors.base import BaseExtractor
from utils.cells import to_text

CRITICAL_RE = re.compile(r"must|required|mandatory|обязательно", re.IGNORECASE)

DEFAULT_SECTION = "General"


def row_to_line(row: Row) -> str:
    return " ".join(t for t in (to_text(c) for c in row or []) if t).strip()


class RiderExtractor(BaseExtractor):

    def extract(self, sheet_name: str, rows: Sequence[Row]) -> SheetExtraction:
        return SheetExtraction(rider_docs=[self.extract_document(sheet_name, rows)])

    @staticmethod
    def extract_document(sheet_name: str, rows: Sequence[Row]) -> RiderDocument:
        lines: List[str] = [line for line in map(row_to_line, rows) if line]

        items = [
            RiderItem(
                section=DEFAULT_SECTION,
                text=line,
                severity="critical" if CRITICAL_RE.search(line) else "normal",
            )
            for line in lines
            if len(line) >= constants.RIDER_MIN_LINE_LENGTH
        ][: constants.RIDER_MAX_ITEMS]

        return RiderDocument(title=sheet_name, raw_text="\n".join(lines), items=items)
