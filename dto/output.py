"""
Top-level output DTOs.

    ParsedWorkbook
      ├─ meta: EventMeta
      ├─ budget_items: List[BudgetItem]
      ├─ payments: List[Payment]       (keyed by budget_key, not identity)
      ├─ menu_items: List[MenuItem]
      ├─ tasks: List[Task]
      └─ rider_docs: List[RiderDocument]
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from dto.records import (
    BudgetItem,
    EventMeta,
    MenuItem,
    Payment,
    RiderDocument,
    Task,
)


class SheetExtraction(BaseModel):
    """What a single extractor contributed for one worksheet."""

    budget_items: List[BudgetItem] = []
    payments: List[Payment] = []
    menu_items: List[MenuItem] = []
    tasks: List[Task] = []
    rider_docs: List[RiderDocument] = []

    @property
    def record_count(self) -> int:
        return (
            len(self.budget_items)
            + len(self.payments)
            + len(self.menu_items)
            + len(self.tasks)
            + len(self.rider_docs)
        )


class ParsedWorkbook(BaseModel):
    """Everything recovered from one workbook import."""

    meta: EventMeta = EventMeta()
    budget_items: List[BudgetItem] = []
    payments: List[Payment] = []
    menu_items: List[MenuItem] = []
    tasks: List[Task] = []
    rider_docs: List[RiderDocument] = []

    def absorb(self, extraction: SheetExtraction) -> None:
        """Append one sheet's records to the flat collections."""
        self.budget_items.extend(extraction.budget_items)
        self.payments.extend(extraction.payments)
        self.menu_items.extend(extraction.menu_items)
        self.tasks.extend(extraction.tasks)
        self.rider_docs.extend(extraction.rider_docs)
