"""
Selector implementations.

Provides implementations of the Selector interface for choosing champions
from a pool of entrants.

Available implementations:
- CategoryChampionSelector: Best entrant per age category, eliminated by
  equal-or-stronger entrants of younger categories
"""

from .category_selector import CategoryChampionSelector, select_champions

__all__ = ["CategoryChampionSelector", "select_champions"]
