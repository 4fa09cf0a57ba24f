"""
Abstract base classes defining the interfaces for the chess champions system.

All interfaces are synchronous; a selection is a single in-memory pass.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .models import Entrant, SelectionResult


class EntrantFetcher(ABC):
    """Interface for fetching entrant data."""

    @abstractmethod
    def list_entrants(self) -> list[Entrant]:
        """Return all available entrants in source order."""
        pass


class Selector(ABC):
    """Interface for selecting champions from a pool of entrants."""

    @abstractmethod
    def run(self, entrants: Iterable[Entrant]) -> SelectionResult:
        """
        Run a full selection and return its trace.

        Args:
            entrants: Entrants to select from, in processing order

        Returns:
            SelectionResult holding champions and intermediate records
        """
        pass

    def select(self, entrants: Iterable[Entrant]) -> list[Entrant]:
        """Return only the champions of a selection."""
        return list(self.run(entrants).champions)
