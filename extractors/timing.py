"""
Timing Extractor: the free-form event timeline sheet.

There is no header row.  Dates and assignees act as running section
headers, so the sheet is read as a fold over its rows with a small
``TimingState`` carried from one row to the next:

    A                    B            C                 D
    05 Сентября
                         Валентин:
                         10:30        Load-in           Gate 3
                         11:00        Sound check
    Лона - 555 123 45    12:00        Doors open

Transitions, first match wins:
  1. Column A is a short "day + word" label   → new date label.
  2. Column B ends with ":" and C is empty    → new assignee.
  3. A empty, B a phone, C set, D empty       → contact line, ignored.
  4. Column A holds digits, no "day + word"   → new assignee, row goes on.
  5. Column C set                             → emit a Task.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from dto.output import SheetExtraction
from dto.records import Task
from dto.workbook import Row, cell_at
from extractors.base import BaseExtractor
from utils.cells import format_time_cell, to_text
from utils.contacts import Contact, looks_like_phone, parse_name_phone

logger = logging.getLogger(__name__)

COL_LABEL, COL_TIME, COL_TITLE, COL_DESCRIPTION = range(4)

_DATE_LABEL_RE = re.compile(r"^\s*\d{1,2}\s+[^\W\d_]+")
_DATE_LABEL_MAX_LEN = 25
_DATE_WORD_RE = re.compile(r"\d{1,2}\s+[^\W\d_]+")
_DIGIT_RE = re.compile(r"\d")


class TimingState(BaseModel):
    """Running context while walking a timeline sheet."""

    model_config = {"frozen": True}

    date_label: str = ""
    assignee_name: Optional[str] = None
    assignee_phone: Optional[str] = None

    def with_assignee(self, contact: Contact) -> "TimingState":
        return self.model_copy(
            update={"assignee_name": contact.name, "assignee_phone": contact.phone}
        )


def date_label(value: Any) -> Optional[str]:
    """
    Return the date label held by a column-A cell, or ``None``.

    Text such as "05 Сентября" or "12 June" is used verbatim; real date
    cells are rendered as DD.MM.YYYY.
    """
    if isinstance(value, date):
        return value.strftime("%d.%m.%Y")
    text = to_text(value)
    if text and len(text) < _DATE_LABEL_MAX_LEN and _DATE_LABEL_RE.match(text):
        return text
    return None


def step(state: TimingState, row: Row) -> Tuple[TimingState, Optional[Task]]:
    """Apply one row to *state*; return the new state and the Task it emits."""
    raw_label = cell_at(row, COL_LABEL)
    raw_time = cell_at(row, COL_TIME)
    col_a = to_text(raw_label)
    col_b = to_text(raw_time)
    col_c = to_text(cell_at(row, COL_TITLE))
    col_d = to_text(cell_at(row, COL_DESCRIPTION))

    label = date_label(raw_label)
    if label is not None:
        return state.model_copy(update={"date_label": label}), None

    if col_b.endswith(":") and not col_c:
        return state.with_assignee(parse_name_phone(col_b)), None

    if not col_a and col_b and col_c and not col_d and looks_like_phone(raw_time):
        return state, None

    if col_a and _DIGIT_RE.search(col_a) and not _DATE_WORD_RE.search(col_a):
        state = state.with_assignee(parse_name_phone(col_a))

    if not col_c:
        return state, None

    time_label = format_time_cell(raw_time)
    due_at = " ".join(p for p in (state.date_label, time_label) if p).strip()

    return state, Task(
        title=col_c,
        description=col_d or None,
        due_at=due_at or None,
        assignee_name=state.assignee_name,
        assignee_phone=state.assignee_phone,
    )


class TimingExtractor(BaseExtractor):

    def extract(self, sheet_name: str, rows: Sequence[Row]) -> SheetExtraction:
        return SheetExtraction(tasks=self.extract_tasks(rows))

    @staticmethod
    def extract_tasks(rows: Sequence[Row]) -> List[Task]:
        tasks: List[Task] = []
        state = TimingState()
        for row in rows:
            state, task = step(state, row or [])
            if task is not None:
                tasks.append(task)
        return tasks
