"""
Pytest configuration and shared fixtures.
"""
import os
import sys
from datetime import time

import pytest

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from dto.workbook import WorkbookData  # noqa: E402

BLANK6 = [None] * 6


@pytest.fixture
def budget_header():
    return ["#", "Position", "Units", "Quantity", "Price", "Total"]


@pytest.fixture
def main_rows(budget_header):
    """A 'Main' sheet: metadata block on top, estimate table below."""
    return [
        ["Event estimate"],
        ["Smith Wedding"],
        ["Date: 12.09.2025"],
        ["Location: Riverside Hall"],
        ["Number of people", None, 120],
        [],
        budget_header,
        [None, "Venue:", None, None, None, None],
        [1, "Hall rent", "day", 1, 5000, None],
        [2, "Cleaning", "service", 1, 300, 350],
        [None, "Catering", None, None, None, None],
        [3, "Welcome drinks", "pcs", "120", "4,50", None],
    ] + [BLANK6] * 8


@pytest.fixture
def decor_rows():
    return [
        ["Декор"],
        ["Статья расходов", "Цена", "Кол-во", "Сумма", "Оплачено", "Остаток"],
        ["", "руб", "шт", "руб", "руб", "руб"],
        ["Ceremony", None, None, None, None, None],
        ["Flowers", 10, 2, None, 15, 5],
        ["Arch", 200, 1, 200, 200, 0],
    ]


@pytest.fixture
def menu_header():
    return [
        "№",
        "Позиция",
        "Ед.",
        "Кол-во",
        "Цена",
        "Сумма",
        "Примечание",
        "Вес, г",
        "Общий вес, г",
    ]


@pytest.fixture
def timing_rows():
    return [
        ["Контакты"],
        [None, "+7 999 123 45 67", "Иван", None],
        ["05 Сентября"],
        [None, "Валентин:"],
        [None, 0.4375, "Load-in", "Gate 3"],
        [None, time(11, 0), "Sound check"],
        ["Лона - 555 123 45", 0.5, "Doors open"],
    ]


@pytest.fixture
def event_workbook(main_rows, decor_rows, menu_header, timing_rows):
    return WorkbookData.from_mapping(
        {
            "Main": main_rows,
            "Decor": decor_rows,
            "Notes": [["Call the florist"]],
            "Меню": [
                menu_header,
                [1, "Canapé", "pcs", 120, 150, None, None, 80, None],
            ],
            "Меню стафф": [
                menu_header,
                [1, "Soup", "portion", 20, 90, None, "hot", 300, None],
            ],
            "Rider Band": [
                ["Must provide", "2x monitors"],
                [],
                ["Stage size 6x4m"],
            ],
            "Тайминг": timing_rows,
        }
    )
