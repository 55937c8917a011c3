"""
Menu Extractor: guest and staff menu sheets:

    #  |  Позиция  |  Ед.  |  Кол-во  |  Цена  |  Сумма  |  Примечание  |  Вес, г  |  Общий вес, г

The menu type is fixed per instance; nothing in the rows says whether a
dish is for guests or staff.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from detection import TableRegionDetector, find_header_row
from dto.output import SheetExtraction
from dto.records import MenuItem, MenuType
from dto.workbook import Row, cell_at
from extractors.base import BaseExtractor
from utils.cells import to_number, to_text

logger = logging.getLogger(__name__)

HEADER_MARKERS = ("позиция", "position")

(
    COL_INDEX,
    COL_POSITION,
    COL_UNIT,
    COL_QTY,
    COL_PRICE,
    COL_TOTAL,
    COL_NOTE,
    COL_WEIGHT,
    COL_TOTAL_WEIGHT,
) = range(9)


def _is_blank_row(row: Row) -> bool:
    return (
        not to_text(cell_at(row, COL_POSITION))
        and not to_text(cell_at(row, COL_NOTE))
        and to_number(cell_at(row, COL_QTY)) == 0
        and to_number(cell_at(row, COL_PRICE)) == 0
        and to_number(cell_at(row, COL_TOTAL)) == 0
    )


class MenuExtractor(BaseExtractor):

    def __init__(self, menu_type: MenuType = "guest") -> None:
        self.menu_type = menu_type
        self._region = TableRegionDetector(_is_blank_row)

    def __repr__(self) -> str:
        return f"MenuExtractor(menu_type={self.menu_type!r})"

    def extract(self, sheet_name: str, rows: Sequence[Row]) -> SheetExtraction:
        return SheetExtraction(menu_items=self.extract_items(sheet_name, rows))

    def extract_items(self, sheet_name: str, rows: Sequence[Row]) -> List[MenuItem]:
        header = find_header_row(rows, HEADER_MARKERS)
        if header is None:
            logger.debug("No position header in menu sheet '%s'", sheet_name)
            return []

        items: List[MenuItem] = []
        for _, row in self._region.iter_body(rows, header + 1):
            position = to_text(cell_at(row, COL_POSITION))
            if not position:
                continue

            qty = to_number(cell_at(row, COL_QTY))
            price = to_number(cell_at(row, COL_PRICE))
            weight = to_number(cell_at(row, COL_WEIGHT))

            items.append(
                MenuItem(
                    menu_type=self.menu_type,
                    position=position,
                    unit=to_text(cell_at(row, COL_UNIT)) or None,
                    qty=qty,
                    price=price,
                    total_amount=to_number(cell_at(row, COL_TOTAL)) or qty * price,
                    weight_g=weight,
                    total_weight_g=(
                        to_number(cell_at(row, COL_TOTAL_WEIGHT)) or qty * weight
                    ),
                    note=to_text(cell_at(row, COL_NOTE)) or None,
                )
            )

        return items
