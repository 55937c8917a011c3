"""
Sheet routing table.

Maps worksheet names to the extractor that understands them.  Routes are
evaluated top to bottom and the first match wins; a sheet that matches no
route is ignored.  Names are compared case-insensitively.
"""

from __future__ import annotations

import re
from typing import Callable, List, NamedTuple, Optional

from extractors import (
    BaseExtractor,
    BudgetExtractor,
    DecorExtractor,
    MenuExtractor,
    RiderExtractor,
    TimingExtractor,
)

NameMatcher = Callable[[str], bool]

# Sheet that also carries the event metadata block.
META_SHEET = "Main"


# ------------------------------------------------------------------
# Matchers
# ------------------------------------------------------------------

def exact(*names: str) -> NameMatcher:
    wanted = {n.lower() for n in names}
    return lambda sheet: sheet.strip().lower() in wanted


def contains(*needles: str) -> NameMatcher:
    lowered = [n.lower() for n in needles]
    return lambda sheet: any(n in sheet.lower() for n in lowered)


def pattern(regex: str) -> NameMatcher:
    compiled = re.compile(regex, re.IGNORECASE)
    return lambda sheet: compiled.search(sheet) is not None


def all_of(*matchers: NameMatcher) -> NameMatcher:
    return lambda sheet: all(m(sheet) for m in matchers)


def any_of(*matchers: NameMatcher) -> NameMatcher:
    return lambda sheet: any(m(sheet) for m in matchers)


# ------------------------------------------------------------------
# Routing table
# ------------------------------------------------------------------

class SheetRoute(NamedTuple):
    label: str
    matches: NameMatcher
    extractor: BaseExtractor


SHEET_ROUTES: List[SheetRoute] = [
    SheetRoute("main budget", exact(META_SHEET), BudgetExtractor("Main")),
    SheetRoute("decor", exact("Decor"), DecorExtractor()),
    SheetRoute("drinks", exact("Drinks"), BudgetExtractor("Drinks")),
    SheetRoute(
        "staff food", exact("Staff and Staff Food"), BudgetExtractor("Staff Food")
    ),
    SheetRoute(
        "venue staff", exact("Staff from venue"), BudgetExtractor("Venue Staff")
    ),
    SheetRoute(
        "staff menu",
        all_of(contains("меню", "menu"), contains("стафф", "staff")),
        MenuExtractor("staff"),
    ),
    SheetRoute("guest menu", exact("меню", "menu"), MenuExtractor("guest")),
    SheetRoute(
        "rider",
        any_of(pattern(r"^rider"), contains("райдер")),
        RiderExtractor(),
    ),
    SheetRoute("timing", contains("тайминг", "timing"), TimingExtractor()),
]


def route_sheet(
    sheet_name: str, routes: Optional[List[SheetRoute]] = None
) -> Optional[SheetRoute]:
    """Return the first route matching *sheet_name*, or ``None``."""
    for route in SHEET_ROUTES if routes is None else routes:
        if route.matches(sheet_name):
            return route
    return None
