"""
Record DTOs produced by the per-template extractors.

Every record is frozen: an extractor builds it once and nothing in the
import pipeline changes it afterwards.  Field names follow the columns
the persistence layer stores them under.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel


PaymentStatus = Literal["planned", "paid"]
MenuType = Literal["guest", "staff"]
Severity = Literal["normal", "critical"]


class EventMeta(BaseModel):
    """Event-level fields.  A missing field means "not found"."""

    model_config = {"frozen": True}

    name: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    guests: Optional[int] = None


class BudgetItem(BaseModel):
    model_config = {"frozen": True}

    category: str
    title: str
    unit: Optional[str] = None
    qty: float = 0
    price: float = 0
    total_amount: float = 0


class Payment(BaseModel):
    """
    A payment that is not yet attached to a stored budget item.

    ``budget_key`` is the ``category::title`` key of the owning
    ``BudgetItem``; see ``linking.resolve_payments``.
    """

    model_config = {"frozen": True}

    budget_key: str
    amount: float
    status: PaymentStatus
    due_date: Optional[str] = None


class MenuItem(BaseModel):
    model_config = {"frozen": True}

    menu_type: MenuType
    position: str
    unit: Optional[str] = None
    qty: float = 0
    price: float = 0
    total_amount: float = 0
    weight_g: float = 0
    total_weight_g: float = 0
    note: Optional[str] = None


class Task(BaseModel):
    """
    A timeline entry.  ``due_at`` is display text ("05 Сентября 10:30"),
    not a calendar value.
    """

    model_config = {"frozen": True}

    title: str
    description: Optional[str] = None
    due_at: Optional[str] = None
    assignee_name: Optional[str] = None
    assignee_phone: Optional[str] = None


class RiderItem(BaseModel):
    model_config = {"frozen": True}

    section: str = "General"
    text: str
    severity: Severity = "normal"


class RiderDocument(BaseModel):
    model_config = {"frozen": True}

    title: str
    raw_text: str = ""
    items: List[RiderItem] = []
