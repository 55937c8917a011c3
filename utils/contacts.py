"""
Name / phone label parsing for timeline sheets.

Assignee labels are free text such as ``"Лона - 555 123 45"``,
``"Валентин:"`` or ``"Stage manager +44 7700 900123"``.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple, Optional

from utils.cells import to_text

_NAME_PHONE_RE = re.compile(r"^(.*?)(?:\s*[-:]\s*)?(\+?\d[\d\s]{6,})$")
_NAME_ONLY_RE = re.compile(r"^(.*?):$")
_NON_DIGIT_RE = re.compile(r"\D")
_WHITESPACE_RE = re.compile(r"\s+")

MIN_PHONE_DIGITS = 7


class Contact(NamedTuple):
    name: Optional[str] = None
    phone: Optional[str] = None


def parse_name_phone(text: str) -> Contact:
    """
    Split *text* into a name and a phone number.

    A trailing run of 7+ digits (spaces allowed) is the phone; whatever
    precedes it, minus a ``-``/``:`` separator, is the name.  A label that
    just ends in a colon is a bare name.  Anything else is all name.
    """
    cleaned = _WHITESPACE_RE.sub(" ", text or "").strip()

    m = _NAME_PHONE_RE.match(cleaned)
    if m:
        name = re.sub(r":$", "", m.group(1)).strip()
        phone = re.sub(r"\s", "", m.group(2))
        return Contact(name=name or None, phone=phone or None)

    m = _NAME_ONLY_RE.match(cleaned)
    if m:
        return Contact(name=m.group(1).strip() or None)

    return Contact(name=cleaned or None)


def looks_like_phone(value: Any) -> bool:
    """
    True for text or integer cells holding at least 7 digits.

    Floats and date/time cells never count: a time stored as a day
    fraction (0.4166…) has plenty of digits but is not a phone.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return False
    digits = _NON_DIGIT_RE.sub("", to_text(value))
    return len(digits) >= MIN_PHONE_DIGITS
