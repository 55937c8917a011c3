"""
Budget Extractor: estimate sheets laid out as

    #  |  Position  |  Units  |  Quantity  |  Price  |  Total

("Main", "Drinks", "Staff and Staff Food", "Staff from venue").  The table
is anchored on the "Position" header; label-only rows without an index
start a new category.
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from detection import TableRegionDetector, find_header_row, is_section_marker
from dto.output import SheetExtraction
from dto.records import BudgetItem
from dto.workbook import Row, cell_at
from extractors.base import BaseExtractor
from utils.cells import to_number, to_text

logger = logging.getLogger(__name__)

HEADER_MARKERS = ("position",)

COL_INDEX, COL_TITLE, COL_UNIT, COL_QTY, COL_PRICE, COL_TOTAL = range(6)


def _is_blank_row(row: Row) -> bool:
    return (
        not to_text(cell_at(row, COL_INDEX))
        and not to_text(cell_at(row, COL_TITLE))
        and not to_text(cell_at(row, COL_UNIT))
        and to_number(cell_at(row, COL_QTY)) == 0
        and to_number(cell_at(row, COL_PRICE)) == 0
        and to_number(cell_at(row, COL_TOTAL)) == 0
    )


class BudgetExtractor(BaseExtractor):

    def __init__(self, default_category: str = "Main") -> None:
        self.default_category = default_category
        self._region = TableRegionDetector(_is_blank_row)

    def __repr__(self) -> str:
        return f"BudgetExtractor(default_category={self.default_category!r})"

    def extract(self, sheet_name: str, rows: Sequence[Row]) -> SheetExtraction:
        return SheetExtraction(budget_items=self.extract_items(sheet_name, rows))

    def extract_items(self, sheet_name: str, rows: Sequence[Row]) -> List[BudgetItem]:
        header = find_header_row(rows, HEADER_MARKERS)
        if header is None:
            logger.debug("No 'Position' header in sheet '%s'", sheet_name)
            return []

        items: List[BudgetItem] = []
        category = self.default_category

        for _, row in self._region.iter_body(rows, header + 1):
            index = to_text(cell_at(row, COL_INDEX))
            title = to_text(cell_at(row, COL_TITLE))
            qty = to_number(cell_at(row, COL_QTY))
            price = to_number(cell_at(row, COL_PRICE))
            total = to_number(cell_at(row, COL_TOTAL)) or qty * price

            # Category rows carry no index number and no amounts.
            if not index and is_section_marker(title, (qty, price, total)):
                category = re.sub(r":$", "", title).strip() or category
                continue

            if not title:
                continue

            items.append(
                BudgetItem(
                    category=category,
                    title=title,
                    unit=to_text(cell_at(row, COL_UNIT)) or None,
                    qty=qty,
                    price=price,
                    total_amount=total,
                )
            )

        return items
