"""
WorkbookData: the in-memory workbook every extractor reads from.

A workbook is an ordered list of named sheets; a sheet is a list of rows
of raw cell values exactly as the spreadsheet library handed them over
(numbers, strings, booleans, date/time objects or ``None``).  Rows may be
ragged, so always read cells through ``cell_at``.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from pydantic import BaseModel


Row = Sequence[Any]


def cell_at(row: Optional[Row], col: int) -> Any:
    """Return the raw value at 0-based *col*, or ``None`` past the row end."""
    if not row or col >= len(row):
        return None
    return row[col]


class SheetData(BaseModel):
    """One named grid of raw cell values."""

    name: str
    rows: List[List[Any]] = []

    model_config = {"arbitrary_types_allowed": True}

    @property
    def num_rows(self) -> int:
        return len(self.rows)


class WorkbookData(BaseModel):
    """Ordered collection of sheets."""

    sheets: List[SheetData] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[Row]]) -> "WorkbookData":
        """Build from an ordered ``{sheet_name: rows}`` mapping."""
        return cls(
            sheets=[
                SheetData(name=name, rows=[list(r or []) for r in rows])
                for name, rows in mapping.items()
            ]
        )

    # ------------------------------------------------------------------
    # Sheet access
    # ------------------------------------------------------------------

    @property
    def sheet_names(self) -> List[str]:
        return [s.name for s in self.sheets]

    def get_sheet(self, name: str) -> Optional[SheetData]:
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None

    def rows(self, name: str) -> List[List[Any]]:
        """
        Return the rows of sheet *name*, or an empty list when the
        workbook has no such sheet.
        """
        sheet = self.get_sheet(name)
        return sheet.rows if sheet is not None else []
