"""
Decor Extractor: the decorator's cost sheet:

    Статья расходов  |  Price  |  Quantity  |  Total  |  Paid  |  Remaining

Unlike the budget layout the price precedes the quantity and there is no
index column.  The header row is followed by a sub-header row, so data
starts two rows below it.  Each item may also produce up to two payments:
a ``paid`` one for the paid column and a ``planned`` one for the remainder.
"""

from __future__ import annotations

import logging
from typing import Sequence

from detection import TableRegionDetector, find_header_row, is_section_marker
from dto.output import SheetExtraction
from dto.records import BudgetItem, Payment
from dto.workbook import Row, cell_at
from extractors.base import BaseExtractor
from linking import budget_key
from utils.cells import to_number, to_text

logger = logging.getLogger(__name__)

HEADER_MARKERS = ("статья", "expense category")
DEFAULT_CATEGORY = "Decor"
SECTION_PREFIX = "Decor / "

COL_TITLE, COL_PRICE, COL_QTY, COL_TOTAL, COL_PAID, COL_REMAINING = range(6)

# Rows between the header and the first data row.
_HEADER_SPAN = 2


def _is_blank_row(row: Row) -> bool:
    return not to_text(cell_at(row, COL_TITLE)) and all(
        to_number(cell_at(row, col)) == 0
        for col in (COL_PRICE, COL_QTY, COL_TOTAL, COL_PAID, COL_REMAINING)
    )


class DecorExtractor(BaseExtractor):

    def __init__(self) -> None:
        self._region = TableRegionDetector(_is_blank_row)

    def extract(self, sheet_name: str, rows: Sequence[Row]) -> SheetExtraction:
        header = find_header_row(rows, HEADER_MARKERS, column=COL_TITLE)
        if header is None:
            logger.debug("No expense-category header in sheet '%s'", sheet_name)
            return SheetExtraction()

        result = SheetExtraction()
        category = DEFAULT_CATEGORY

        for _, row in self._region.iter_body(rows, header + _HEADER_SPAN):
            title = to_text(cell_at(row, COL_TITLE))
            price = to_number(cell_at(row, COL_PRICE))
            qty = to_number(cell_at(row, COL_QTY))
            total = to_number(cell_at(row, COL_TOTAL)) or qty * price
            paid = to_number(cell_at(row, COL_PAID))
            remaining = to_number(cell_at(row, COL_REMAINING))

            if is_section_marker(title, (price, qty, total, paid, remaining)):
                category = SECTION_PREFIX + title
                continue

            if not title:
                continue

            result.budget_items.append(
                BudgetItem(
                    category=category,
                    title=title,
                    qty=qty,
                    price=price,
                    total_amount=total,
                )
            )

            key = budget_key(category, title)
            if paid > 0:
                result.payments.append(
                    Payment(budget_key=key, amount=paid, status="paid")
                )
            if remaining > 0:
                result.payments.append(
                    Payment(budget_key=key, amount=remaining, status="planned")
                )

        return result
