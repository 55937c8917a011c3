"""
Table-region heuristics shared by the per-template extractors.

  1. find_header_row      : anchor a table on a column-label substring
  2. TableRegionDetector  : walk the body, skip spacer rows, stop at the
                             trailing blank streak
  3. is_section_marker    : label-only rows that group the rows below
"""

from detection.header import find_header_row
from detection.table import TableRegionDetector, is_section_marker

__all__ = [
    "find_header_row",
    "TableRegionDetector",
    "is_section_marker",
]
