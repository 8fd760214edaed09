"""Tests for puzzle_input module."""

from pathlib import Path

import pytest

from puzzle_input import INPUTS_ENV_VAR, PuzzleInput, default_root, file_suffix, read_lines


class TestPaths:
    """Tests for input file naming."""

    def test_suffix(self) -> None:
        """Part and variant suffixes."""
        assert file_suffix() == ""
        assert file_suffix(1) == "_part1"
        assert file_suffix(2, 3) == "_part2_3"
        assert file_suffix(variant=2) == "_2"

    def test_paths(self) -> None:
        """Sample and actual files sit in a per-day folder."""
        source = PuzzleInput(2023, 7, root=Path("data"))
        assert source.sample_path() == Path("data/2023/day07/sample.txt")
        assert source.sample_path(2, 1) == Path("data/2023/day07/sample_part2_1.txt")
        assert source.actual_path() == Path("data/2023/day07/test.txt")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment variable replaces the default root."""
        monkeypatch.setenv(INPUTS_ENV_VAR, "/tmp/aoc")
        assert default_root() == Path("/tmp/aoc")
        assert PuzzleInput(2022, 1).root == Path("/tmp/aoc")
        monkeypatch.delenv(INPUTS_ENV_VAR)
        assert default_root() == Path("inputs")


class TestReading:
    """Tests for loading files."""

    def test_read_lines(self, tmp_path: Path) -> None:
        """Line endings are stripped."""
        path = tmp_path / "input.txt"
        path.write_text("ab\ncd\n")
        assert read_lines(path) == ["ab", "cd"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing input names the path it looked for."""
        with pytest.raises(FileNotFoundError, match="Puzzle input not found"):
            read_lines(tmp_path / "nope.txt")

    def test_part_falls_back_to_shared_sample(self, tmp_path: Path) -> None:
        """Without a part-specific sample the shared one is used."""
        source = PuzzleInput(2023, 1, root=tmp_path)
        source.directory.mkdir(parents=True)
        source.sample_path().write_text("shared\n")
        source.sample_path(2).write_text("part two\n")
        assert source.sample_lines(1) == ["shared"]
        assert source.sample_lines(2) == ["part two"]
