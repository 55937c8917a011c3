"""
Reader tests write real .xlsx files with openpyxl and read them back.
"""
from datetime import time

import pytest
from openpyxl import Workbook

from parser import parse_workbook
from reader import WorkbookLoadError, load_workbook_data


def _write_event_xlsx(path) -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = "Main"
    ws.append(["Event estimate"])
    ws.append(["Summer Party"])
    ws.append(["Location: Rooftop"])
    ws.append(["#", "Position", "Units", "Quantity", "Price", "Total"])
    ws.append([1, "DJ", "set", 1, 800, None])
    ws.append([2, "Lights", "set", 2, 150, None])

    timing = wb.create_sheet("Тайминг")
    timing.append(["12 June"])
    timing.append([None, time(10, 30), "Load-in"])

    wb.create_sheet("Notes").append(["Remember the cake"])
    wb.save(path)


def test_load_workbook_data(tmp_path):
    path = tmp_path / "event.xlsx"
    _write_event_xlsx(path)

    workbook = load_workbook_data(str(path))

    assert workbook.sheet_names == ["Main", "Тайминг", "Notes"]
    main = workbook.rows("Main")
    assert main[0] == ["Event estimate"]
    assert main[4] == [1, "DJ", "set", 1, 800]
    assert workbook.rows("Missing") == []


def test_load_from_bytes(tmp_path):
    path = tmp_path / "event.xlsx"
    _write_event_xlsx(path)

    workbook = load_workbook_data(path.read_bytes())

    assert "Тайминг" in workbook.sheet_names


def test_parse_workbook_end_to_end(tmp_path):
    path = tmp_path / "event.xlsx"
    _write_event_xlsx(path)

    result = parse_workbook(str(path))

    assert result.meta.name == "Summer Party"
    assert result.meta.location == "Rooftop"
    assert [(i.title, i.total_amount) for i in result.budget_items] == [
        ("DJ", 800),
        ("Lights", 300),
    ]
    assert len(result.tasks) == 1
    assert result.tasks[0].due_at == "12 June 10:30"


def test_unreadable_source():
    with pytest.raises(WorkbookLoadError):
        load_workbook_data(b"definitely not a zip file")


def test_missing_file(tmp_path):
    with pytest.raises(WorkbookLoadError):
        load_workbook_data(str(tmp_path / "missing.xlsx"))
