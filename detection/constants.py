import logging
import os

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


# Rows inspected when a blank-looking row is met inside a table body.
EMPTY_STREAK_LOOKAHEAD: int = _int_env("EMPTY_STREAK_LOOKAHEAD", 8)

# Consecutive blank rows (within the lookahead) that end a table.
EMPTY_STREAK_MIN: int = _int_env("EMPTY_STREAK_MIN", 6)

# Rows of the main sheet scanned for event metadata.
META_SCAN_ROWS: int = _int_env("META_SCAN_ROWS", 15)

RIDER_MAX_ITEMS: int = _int_env("RIDER_MAX_ITEMS", 400)
RIDER_MIN_LINE_LENGTH: int = _int_env("RIDER_MIN_LINE_LENGTH", 3)
