"""
Provisional payment → budget item linkage.

At parse time a budget item has no identity yet, so a payment points at
its item through ``budget_key(category, title)``.  Once the persistence
layer has stored the items and knows their identities it calls
``index_budget_keys`` and ``resolve_payments``; payments whose key matches
no stored item are dropped without error.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel

from dto.records import BudgetItem, Payment, PaymentStatus

logger = logging.getLogger(__name__)

BUDGET_KEY_SEPARATOR = "::"


def budget_key(category: str, title: str) -> str:
    return f"{category}{BUDGET_KEY_SEPARATOR}{title}"


class ResolvedPayment(BaseModel):
    """A payment attached to a stored budget item."""

    model_config = {"frozen": True}

    budget_item_id: str
    amount: float
    status: PaymentStatus
    due_date: Optional[str] = None


def index_budget_keys(stored: Iterable[Tuple[str, BudgetItem]]) -> Dict[str, str]:
    """
    Map ``budget_key`` → identity for ``(identity, item)`` pairs.

    When two items share a key the later one wins.
    """
    return {budget_key(item.category, item.title): ident for ident, item in stored}


def resolve_payments(
    payments: Iterable[Payment],
    key_index: Mapping[str, str],
) -> List[ResolvedPayment]:
    resolved: List[ResolvedPayment] = []
    dropped = 0
    for payment in payments:
        ident = key_index.get(payment.budget_key)
        if ident is None:
            dropped += 1
            continue
        resolved.append(
            ResolvedPayment(
                budget_item_id=ident,
                amount=payment.amount,
                status=payment.status,
                due_date=payment.due_date,
            )
        )

    if dropped:
        logger.debug("Dropped %d payment(s) with no matching budget item", dropped)
    return resolved
