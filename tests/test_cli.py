"""
Integration tests for the chess champions CLI.

End-to-end runs from an entrants file to printed tables.
"""

import json
import tempfile
from pathlib import Path

import pytest
from loguru import logger

from chess_champions.__main__ import main


def write_entrants(directory: str, entrants: list[dict]) -> Path:
    path = Path(directory) / "entrants.json"
    path.write_text(json.dumps(entrants))
    return path


SCENARIO = [
    {"name": "Jean", "rank": 1000, "category": 10},
    {"name": "mary", "rank": 1100, "category": 9},
    {"name": "peter", "rank": 1200, "category": 11},
]


class TestCLI:
    """CLI runs with real fetcher and selector."""

    def test_prints_champions(self, capsys: pytest.CaptureFixture[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            # Arrange
            path = write_entrants(temp_dir, SCENARIO)

            # Act
            main(["--entrants", str(path)])

            # Assert
            out = capsys.readouterr().out
            assert "Champions (2 of 3 entrants)" in out
            assert "mary" in out
            assert "peter" in out
            assert "Jean" not in out
            assert out.index("mary") < out.index("peter")

    def test_show_eliminated(self, capsys: pytest.CaptureFixture[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_entrants(temp_dir, SCENARIO)

            main(["--entrants", str(path), "--show-eliminated"])

            out = capsys.readouterr().out
            assert "Eliminated (1)" in out
            assert "Jean" in out

    def test_marks_draws(self, capsys: pytest.CaptureFixture[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_entrants(temp_dir, [
                {"name": "Sherlock", "rank": 40000, "category": 30},
                {"name": "Moriary", "rank": 40000, "category": 30},
            ])

            main(["--entrants", str(path)])

            out = capsys.readouterr().out
            assert out.count("yes") == 2

    def test_missing_file_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(SystemExit) as exc_info:
                main(["--entrants", str(Path(temp_dir) / "missing.json")])

            assert exc_info.value.code == 1
            assert "does not exist" in capsys.readouterr().out

    def test_malformed_document_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "entrants.json"
            path.write_text('{"not": "a list"}')

            with pytest.raises(SystemExit) as exc_info:
                main(["--entrants", str(path)])

            assert exc_info.value.code == 1

    def test_log_file_written(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_entrants(temp_dir, SCENARIO)
            log_path = Path(temp_dir) / "champions.log"

            main(["--entrants", str(path), "--log-file", str(log_path)])

            contents = log_path.read_text()
            # Closing the sink compresses the file, so release it inside the temp dir
            logger.remove()
            assert "Selected 2 champions" in contents

    def test_undecodable_file_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "entrants.json"
            path.write_bytes(b"\xff\xfe[]")

            with pytest.raises(SystemExit) as exc_info:
                main(["--entrants", str(path)])

            assert exc_info.value.code == 1
            assert "Error: Cannot decode" in capsys.readouterr().out
