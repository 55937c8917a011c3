"""
Workbook reading: turns an .xlsx file into ``WorkbookData``.

The workbook is opened with ``data_only=True`` so formula cells carry
Excel's own cached results; formulas are never evaluated here.  Date and
time cells come through as ``datetime`` / ``time`` objects.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO, List, Union

import openpyxl

from dto.workbook import SheetData, WorkbookData

logger = logging.getLogger(__name__)

WorkbookSource = Union[str, Path, bytes, BinaryIO]


class WorkbookLoadError(ValueError):
    """The source could not be opened as a spreadsheet workbook."""


def _trim_row(values: tuple) -> List[Any]:
    row = list(values)
    while row and row[-1] is None:
        row.pop()
    return row


def load_workbook_data(source: WorkbookSource) -> WorkbookData:
    """
    Load every worksheet of *source* (a path, raw bytes or a binary file
    object) into memory.

    Chart sheets are skipped.  Raises ``WorkbookLoadError`` when the
    source is not a readable workbook.
    """
    handle = io.BytesIO(source) if isinstance(source, bytes) else source

    try:
        wb = openpyxl.load_workbook(handle, data_only=True, read_only=True)
    except Exception as exc:
        raise WorkbookLoadError(f"Could not open workbook: {exc}") from exc

    try:
        sheets: List[SheetData] = []
        for ws in wb.worksheets:
            # Some writers store a stale dimension; read whatever is there.
            ws.reset_dimensions()
            rows = [_trim_row(r) for r in ws.iter_rows(values_only=True)]
            sheets.append(SheetData(name=ws.title, rows=rows))
    finally:
        wb.close()

    logger.info(
        "Loaded workbook with %d sheet(s): %s",
        len(sheets),
        [s.name for s in sheets],
    )
    return WorkbookData(sheets=sheets)
