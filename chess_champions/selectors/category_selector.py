"""
Category champion selector implementation.

Keeps the best entrant of every age category, collects rank ties as draws,
then drops any candidate outranked (or matched) by the best of a younger
category.
"""

from collections.abc import Iterable

from typing_extensions import override

from ..interfaces import Selector
from ..logging_config import get_logger
from ..models import DrawRecord, Elimination, Entrant, SelectionResult

# Module-level logger
logger = get_logger("category_selector")


class CategoryChampionSelector(Selector):
    """
    Three-pass champion selector.

    1. Reduce entrants to one best per category, recording draws.
    2. Merge bests and draw participants, deduplicate, sort by category.
    3. Sweep candidates against the bests of lower categories.

    Stateless between calls; every run builds its own mapping.
    """

    def _reduce_categories(
        self, entrants: Iterable[Entrant]
    ) -> tuple[dict[int, Entrant], list[DrawRecord]]:
        """Find the best entrant of every category and collect draws."""
        bests: dict[int, Entrant] = {}
        draws: list[DrawRecord] = []

        for entrant in entrants:
            current = bests.get(entrant.category)
            if current is None:
                bests[entrant.category] = entrant
                continue

            if entrant.is_draw_against(current):
                draw = DrawRecord(current_best=current, challenger=entrant)
                draws.append(draw)
                logger.debug(
                    f"Draw in category {draw.category}: {current.name} vs {entrant.name} at {entrant.rank}"
                )
                continue

            bests[entrant.category] = entrant.match_up(current)

        return bests, draws

    def _assemble_candidates(
        self, bests: dict[int, Entrant], draws: list[DrawRecord]
    ) -> list[Entrant]:
        """Deduplicate bests and draw participants, ordered by category."""
        pool = set(bests.values())
        for draw in draws:
            pool.update(draw.entrants)

        # Rank then name settle the order within a shared category
        return sorted(pool, key=lambda e: (e.category, e.rank, e.name))

    def _sweep(
        self, candidates: list[Entrant], bests: dict[int, Entrant]
    ) -> tuple[list[Entrant], list[Elimination]]:
        """Keep candidates that reach their own category unbeaten."""
        ascending_categories = sorted(bests)
        champions: list[Entrant] = []
        eliminations: list[Elimination] = []

        for candidate in candidates:
            for category in ascending_categories:
                if category == candidate.category:
                    champions.append(candidate)
                    break

                best = bests[category]
                if candidate.is_eliminated_by(best):
                    eliminations.append(Elimination(candidate, best))
                    logger.debug(
                        f"{candidate.name} ({candidate.rank}@{candidate.category}) eliminated by {best.name} ({best.rank}@{best.category})"
                    )
                    break

        return champions, eliminations

    @override
    def run(self, entrants: Iterable[Entrant]) -> SelectionResult:
        """Select champions and return the full trace."""
        bests, draws = self._reduce_categories(entrants)
        if not bests:
            logger.debug("No entrants supplied, nothing to select")
            return SelectionResult(champions=())

        candidates = self._assemble_candidates(bests, draws)
        logger.debug(
            f"Assembled {len(candidates)} candidates from {len(bests)} categories and {len(draws)} draws"
        )

        champions, eliminations = self._sweep(candidates, bests)
        logger.info(
            f"Selected {len(champions)} champions, eliminated {len(eliminations)} candidates"
        )

        return SelectionResult(
            champions=tuple(champions),
            category_bests={category: bests[category] for category in sorted(bests)},
            draws=tuple(draws),
            candidates=tuple(candidates),
            eliminations=tuple(eliminations),
        )


def select_champions(entrants: Iterable[Entrant]) -> list[Entrant]:
    """
    Select the overall champions from a pool of entrants.

    Args:
        entrants: Entrants in processing order; may be empty

    Returns:
        New list of champions, ascending by category
    """
    return CategoryChampionSelector().select(entrants)
