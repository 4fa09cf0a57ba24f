"""
Entrant fetcher implementations.

Provides implementations of the EntrantFetcher interface for loading entrant
data from various sources.

Available implementations:
- JSONEntrantFetcher: Loads entrants from a JSON array or JSONL file
"""

from .json_fetcher import JSONEntrantFetcher

__all__ = ["JSONEntrantFetcher"]
