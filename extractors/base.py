"""
Base class for all per-template sheet extractors.

Each extractor receives one worksheet's rows and returns the records it
recognises as a ``SheetExtraction``.  Extractors are stateless between
calls: the same rows always give the same records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from dto.output import SheetExtraction
from dto.workbook import Row


class BaseExtractor(ABC):
    """
    Interface that every sheet extractor must implement.
    """

    @abstractmethod
    def extract(self, sheet_name: str, rows: Sequence[Row]) -> SheetExtraction:
        """
        Extract records from one worksheet.

        Args:
            sheet_name: The worksheet's name as it appears in the workbook.
            rows: The worksheet's rows of raw cell values.

        Returns:
            A ``SheetExtraction``.  A sheet with nothing recognisable gives
            an empty one; extractors never raise for content reasons.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
