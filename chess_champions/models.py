"""
Core dataclasses for the chess champions system.

Defines the Entrant value type plus the records produced while selecting
champions (draws, eliminations and the full selection trace).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Entrant:
    """
    A ranked entrant competing inside an age category.

    Ordering and equality cover the full (rank, category, name) tuple so
    identical entrants collapse when placed in a set.
    """

    rank: int
    category: int
    name: str

    def __post_init__(self) -> None:
        """Validate entrant data."""
        for attr in ("rank", "category"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{attr} must be an integer, got {value!r}")
            if value < 0:
                raise ValidationError(f"{attr} cannot be negative, got {value}")
        if not isinstance(self.name, str):
            raise ValidationError(f"name must be a string, got {self.name!r}")

    def match_up(self, other: "Entrant") -> "Entrant":
        """Return the stronger of the two; ``other`` keeps its place on a tie."""
        if self.rank > other.rank:
            return self
        return other

    def is_draw_against(self, other: "Entrant") -> bool:
        return self.rank == other.rank

    def is_eliminated_by(self, other: "Entrant") -> bool:
        """True when ``other`` is no older and ranks at least as high."""
        return (self.category >= other.category and self.rank < other.rank) or (
            self.category >= other.category and self.rank == other.rank
        )


@dataclass(frozen=True)
class DrawRecord:
    """Two entrants of one category that tied on rank."""

    current_best: Entrant
    challenger: Entrant

    @property
    def category(self) -> int:
        return self.challenger.category

    @property
    def entrants(self) -> tuple[Entrant, Entrant]:
        return (self.current_best, self.challenger)


@dataclass(frozen=True)
class Elimination:
    """A candidate dropped during the sweep and the category best that dropped it."""

    candidate: Entrant
    eliminated_by: Entrant


@dataclass(frozen=True)
class SelectionResult:
    """Trace of a single champion selection."""

    champions: tuple[Entrant, ...]
    category_bests: Mapping[int, Entrant] = field(default_factory=dict)
    draws: tuple[DrawRecord, ...] = ()
    candidates: tuple[Entrant, ...] = ()
    eliminations: tuple[Elimination, ...] = ()

    def __post_init__(self) -> None:
        # Read-only view so the trace cannot be altered after selection
        object.__setattr__(self, "category_bests", MappingProxyType(dict(self.category_bests)))

    def is_draw_participant(self, entrant: Entrant) -> bool:
        """Whether the entrant took part in any recorded draw."""
        return any(entrant in draw.entrants for draw in self.draws)
