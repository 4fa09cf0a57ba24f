"""
JSON entrant fetcher implementation.

Reads entrants from a JSON array file or a JSONL file with one entrant per line.
"""

import json
from pathlib import Path
from typing import Any

from typing_extensions import override

from ..exceptions import ValidationError
from ..interfaces import EntrantFetcher
from ..logging_config import get_logger
from ..models import Entrant

# Accepted spellings, first match wins
RANK_KEYS = ("rank", "rating", "ratio")
CATEGORY_KEYS = ("category", "age")


class JSONEntrantFetcher(EntrantFetcher):
    """
    Entrant fetcher that reads a single JSON or JSONL file.

    Malformed records are skipped with a warning so one bad row does not
    hide the rest of the field.
    """

    def __init__(self, entrants_path: Path):
        """
        Initialize JSON entrant fetcher.

        Args:
            entrants_path: Path to a .json (array) or .jsonl file
        """
        self.entrants_path: Path = Path(entrants_path)

        # Setup logger
        self.logger = get_logger("json_fetcher")

        if not self.entrants_path.exists():
            raise FileNotFoundError(
                f"Entrants file does not exist: {self.entrants_path}"
            )

        if self.entrants_path.is_dir():
            raise IsADirectoryError(f"Path is a directory: {self.entrants_path}")

        self._cache: list[Entrant] | None = None

    def _read_records(self) -> list[tuple[int, Any]]:
        """Return (line/index, raw record) pairs from the file."""
        try:
            text = self.entrants_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(f"Cannot decode {self.entrants_path}: {e}") from e

        if self.entrants_path.suffix == ".jsonl":
            records: list[tuple[int, Any]] = []
            for line_no, line in enumerate(text.splitlines(), 1):
                if not line.strip():
                    continue
                try:
                    records.append((line_no, json.loads(line)))
                except json.JSONDecodeError as e:
                    self.logger.warning(
                        f"Skipping invalid JSON on line {line_no} of {self.entrants_path}: {e}"
                    )
            return records

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON in {self.entrants_path}: {e}"
            ) from e

        if not isinstance(document, list):
            raise ValidationError(
                f"Expected a JSON array of entrants in {self.entrants_path}, got {type(document).__name__}"
            )

        return list(enumerate(document, 1))

    def _parse_record(self, record: Any) -> Entrant:
        """Build an Entrant from a raw record."""
        if not isinstance(record, dict):
            raise ValidationError(f"record must be an object, got {type(record).__name__}")

        if "name" not in record:
            raise ValidationError("missing 'name'")

        rank = next((record[key] for key in RANK_KEYS if key in record), None)
        if rank is None:
            raise ValidationError(f"missing one of {RANK_KEYS}")

        category = next((record[key] for key in CATEGORY_KEYS if key in record), None)
        if category is None:
            raise ValidationError(f"missing one of {CATEGORY_KEYS}")

        return Entrant(rank=rank, category=category, name=record["name"])

    def _load_entrants(self) -> list[Entrant]:
        """Load and cache entrants."""
        if self._cache is not None:
            return self._cache

        entrants: list[Entrant] = []
        for position, record in self._read_records():
            try:
                entrants.append(self._parse_record(record))
            except ValidationError as e:
                self.logger.warning(
                    f"Skipping entrant {position} in {self.entrants_path}: {e}"
                )

        if not entrants:
            self.logger.warning(f"No entrants found in {self.entrants_path}")

        self._cache = entrants
        self.logger.info(f"Loaded {len(entrants)} entrants from {self.entrants_path}")
        return entrants

    @override
    def list_entrants(self) -> list[Entrant]:
        """Return all available entrants in file order."""
        return list(self._load_entrants())

    def reload(self) -> None:
        """Force reload entrants from disk."""
        self._cache = None
        self._load_entrants()
