"""
Workbook Orchestrator.

Reads the event metadata once, then sends every worksheet to the
extractor its name routes to and concatenates the results into one
``ParsedWorkbook``.  No deduplication and no cross-sheet checks: records
come out in sheet order.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from dto.output import ParsedWorkbook, SheetExtraction
from dto.records import EventMeta
from dto.workbook import WorkbookData
from extractors import extract_meta
from routing import META_SHEET, SHEET_ROUTES, SheetRoute, exact, route_sheet

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Dispatches each worksheet to the matching extractor and collects the
    results.
    """

    def __init__(self, routes: Optional[List[SheetRoute]] = None) -> None:
        self._routes = list(SHEET_ROUTES if routes is None else routes)

    @staticmethod
    def _meta_rows(workbook: WorkbookData) -> List[List[Any]]:
        is_meta_sheet = exact(META_SHEET)
        for name in workbook.sheet_names:
            if is_meta_sheet(name):
                return workbook.rows(name)
        return []

    def parse(
        self,
        workbook: WorkbookData,
        sheet_name_filter: Optional[str] = None,
    ) -> ParsedWorkbook:
        """
        Extract everything recognisable from *workbook*.

        If *sheet_name_filter* is given only that worksheet is routed
        (metadata still comes from the main sheet).
        """
        if sheet_name_filter and sheet_name_filter not in workbook.sheet_names:
            logger.error(
                "Worksheet '%s' not found. Available sheets: %s",
                sheet_name_filter,
                workbook.sheet_names,
            )
            raise ValueError(
                f"Worksheet '{sheet_name_filter}' not found in workbook"
            )

        meta_rows = self._meta_rows(workbook)
        meta = extract_meta(meta_rows) if meta_rows else EventMeta()
        result = ParsedWorkbook(meta=meta)

        sheet_names = (
            [sheet_name_filter] if sheet_name_filter else workbook.sheet_names
        )
        for sheet_name in sheet_names:
            route = route_sheet(sheet_name, self._routes)
            if route is None:
                logger.debug("Skipping sheet '%s': no matching route", sheet_name)
                continue

            logger.info("Processing sheet '%s' as %s", sheet_name, route.label)
            try:
                extraction = route.extractor.extract(
                    sheet_name, workbook.rows(sheet_name)
                )
            except Exception:
                logger.exception(
                    "Failed to process sheet '%s'; it contributes nothing",
                    sheet_name,
                )
                extraction = SheetExtraction()

            result.absorb(extraction)
            logger.info("  -> %d record(s)", extraction.record_count)

        return result


def parse_workbook_data(
    workbook: WorkbookData,
    sheet_name_filter: Optional[str] = None,
) -> ParsedWorkbook:
    """Convenience wrapper around ``Orchestrator().parse``."""
    return Orchestrator().parse(workbook, sheet_name_filter=sheet_name_filter)
