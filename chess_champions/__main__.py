"""
CLI entry point for chess champions.

Parses arguments, validates config, loads entrants and prints the champions.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path
from typing import TypedDict

from prettytable import PrettyTable

from .exceptions import ConfigurationError, ValidationError
from .fetchers.json_fetcher import JSONEntrantFetcher
from .logging_config import get_logger, setup_logging
from .models import SelectionResult
from .selectors.category_selector import CategoryChampionSelector


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    entrants: str
    show_eliminated: bool
    log_file: str | None
    debug: bool
    log_level: str


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Chess Champions - Age Category Champion Selection"
    )

    _ = parser.add_argument(
        "--entrants",
        required=True,
        help="Path to a JSON array or JSONL file of entrants"
    )
    _ = parser.add_argument(
        "--show-eliminated",
        action="store_true",
        help="Also print eliminated candidates and who eliminated them"
    )
    _ = parser.add_argument(
        "--log-file",
        help="Write INFO and above to this rotating log file"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        entrants=ns.entrants,
        show_eliminated=ns.show_eliminated,
        log_file=ns.log_file,
        debug=ns.debug,
        log_level=ns.log_level,
    )


def validate_config(args: CLIArgs) -> None:
    """Validate configuration parameters."""
    entrants_path = Path(args["entrants"])
    if not entrants_path.exists():
        raise ConfigurationError(f"entrants file does not exist: {entrants_path}")
    if entrants_path.is_dir():
        raise ConfigurationError(f"entrants path is a directory: {entrants_path}")


def build_champions_table(result: SelectionResult) -> PrettyTable:
    """Render champions as a table."""
    table = PrettyTable()
    table.field_names = ["#", "Name", "Category", "Rank", "Draw"]
    table.align["#"] = "r"
    table.align["Name"] = "l"
    table.align["Category"] = "r"
    table.align["Rank"] = "r"

    for i, champion in enumerate(result.champions, 1):
        table.add_row([
            i,
            champion.name,
            champion.category,
            champion.rank,
            "yes" if result.is_draw_participant(champion) else "",
        ])

    return table


def build_eliminations_table(result: SelectionResult) -> PrettyTable:
    """Render eliminated candidates as a table."""
    table = PrettyTable()
    table.field_names = ["Name", "Category", "Rank", "Eliminated By", "By Category", "By Rank"]
    table.align["Name"] = "l"
    table.align["Eliminated By"] = "l"

    for elimination in result.eliminations:
        candidate, best = elimination.candidate, elimination.eliminated_by
        table.add_row([
            candidate.name,
            candidate.category,
            candidate.rank,
            best.name,
            best.category,
            best.rank,
        ])

    return table


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))

    setup_logging(level=args["log_level"], debug=args["debug"], log_file=args["log_file"])
    logger = get_logger("main")

    try:
        validate_config(args)
        fetcher = JSONEntrantFetcher(Path(args["entrants"]))
        entrants = fetcher.list_entrants()
    except (ConfigurationError, ValidationError) as e:
        logger.error(str(e))
        print(f"Error: {e}")
        sys.exit(1)

    logger.info(f"Selecting champions from {len(entrants)} entrants")
    result = CategoryChampionSelector().run(entrants)

    print(f"Champions ({len(result.champions)} of {len(entrants)} entrants):")
    print(build_champions_table(result))

    if args["show_eliminated"]:
        print(f"\nEliminated ({len(result.eliminations)}):")
        print(build_eliminations_table(result))


if __name__ == "__main__":
    main()
