"""
Chess Champions - Age Category Champion Selection

Selects overall champions from ranked entrants grouped by age category:
each category's best survives only if no younger category holds an entrant
of equal or higher rank.
"""

from .models import Entrant, DrawRecord, Elimination, SelectionResult
from .interfaces import EntrantFetcher, Selector
from .selectors import CategoryChampionSelector, select_champions

__version__ = "0.1.0"
__all__ = [
    "Entrant",
    "DrawRecord",
    "Elimination",
    "SelectionResult",
    "EntrantFetcher",
    "Selector",
    "CategoryChampionSelector",
    "select_champions",
]
