"""Tests for the command-line runner."""

from pathlib import Path

import pytest

from runner import RunOptions, main, parse_args, run_part
from solutions import get_puzzle
from test_solutions import DIG_PLAN


@pytest.fixture
def inputs(tmp_path: Path) -> Path:
    day = tmp_path / "2023" / "day18"
    day.mkdir(parents=True)
    (day / "sample.txt").write_text("\n".join(DIG_PLAN) + "\n")
    return tmp_path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Both parts of the actual input by default."""
        options, verbose = parse_args(["2023", "17"])
        assert options == RunOptions(2023, 17)
        assert not verbose

    def test_overrides(self) -> None:
        """Part, sample and extra arguments."""
        options, verbose = parse_args(["2022", "15", "--part", "1", "--sample", "--arg", "10", "-v"])
        assert options.parts == (1,)
        assert options.sample
        assert options.args == (10,)
        assert verbose


class TestRun:
    """Tests for running solvers on input files."""

    def test_run_part(self, inputs: Path) -> None:
        """A part is solved from the sample file."""
        options = RunOptions(2023, 18, sample=True, inputs=inputs)
        result = run_part(get_puzzle(2023, 18), options, 1)
        assert result.answer == 62
        assert result.elapsed >= 0

    def test_main_prints_answers(self, inputs: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """main prints a table of answers."""
        assert main(["2023", "18", "--sample", "--inputs", str(inputs)]) == 0
        out = capsys.readouterr().out
        assert "62" in out
        assert "952408144115" in out

    def test_main_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing input file is reported, not raised."""
        assert main(["2023", "18", "--inputs", str(tmp_path)]) == 1
        assert "Puzzle input not found" in capsys.readouterr().out

    def test_main_unknown_day(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown day is reported, not raised."""
        assert main(["2015", "1"]) == 1
        assert "No solver registered" in capsys.readouterr().out

    def test_main_malformed_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A solver's complaint about its input is reported, not raised."""
        day = tmp_path / "2023" / "day18"
        day.mkdir(parents=True)
        (day / "sample.txt").write_text("R six (#70c710)\n")
        assert main(["2023", "18", "--sample", "--inputs", str(tmp_path)]) == 1
        assert "Invalid dig plan step" in capsys.readouterr().out
