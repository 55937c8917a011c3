from extractors.base import BaseExtractor
from extractors.budget import BudgetExtractor
from extractors.decor import DecorExtractor
from extractors.menu import MenuExtractor
from extractors.meta import extract_meta
from extractors.rider import RiderExtractor
from extractors.timing import TimingExtractor

__all__ = [
    "BaseExtractor",
    "BudgetExtractor",
    "DecorExtractor",
    "MenuExtractor",
    "RiderExtractor",
    "TimingExtractor",
    "extract_meta",
]
