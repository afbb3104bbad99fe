"""Test the command line entry point and puzzle loading."""

import json

import pytest
from pydantic import ValidationError

from src.main import load_config, main
from src.solver import PuzzleConfig


def _write_puzzle(tmp_path, body: str):
    path = tmp_path / "puzzle.yaml"
    path.write_text(body)
    return path


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncar\nore\nroe\nrot\nden\n")
    return path


class TestLoadConfig:

    def test_grid_as_list(self, tmp_path):
        path = _write_puzzle(tmp_path, "grid:\n  - ca\n  - rt\nlengths: [3]\n")
        puzzle = load_config(str(path))
        assert puzzle.grid == "ca\nrt"
        assert puzzle.lengths == [3]
        assert puzzle.solver.unique is False
        assert puzzle.solver.max_workers == 1

    def test_grid_as_block(self, tmp_path):
        path = _write_puzzle(tmp_path, "grid: |\n  ca\n  rt\nlengths: [3]\nsolver:\n  unique: true\n")
        puzzle = load_config(str(path))
        assert puzzle.grid.split() == ["ca", "rt"]
        assert puzzle.solver.unique is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_empty_lengths_rejected(self, tmp_path):
        path = _write_puzzle(tmp_path, "grid: [ca]\nlengths: []\n")
        with pytest.raises(ValidationError):
            load_config(str(path))

    def test_non_positive_length_rejected(self):
        with pytest.raises(ValidationError):
            PuzzleConfig(grid="ab", lengths=[2, 0])


class TestMain:

    def test_solves_and_saves(self, tmp_path, words_file, capsys):
        puzzle = _write_puzzle(
            tmp_path,
            f"grid:\n  - cat\n  - ore\n  - dnb\nlengths: [3, 3]\ndictionary: {words_file}\n",
        )
        output = tmp_path / "out" / "result.json"

        assert main([str(puzzle), "--output", str(output)]) == 0

        printed = capsys.readouterr().out
        assert "cat -> ore" in printed
        assert "Total solutions:" in printed

        data = json.loads(output.read_text())
        assert data["grid"] == ["cat", "ore", "dnb"]
        assert data["lengths"] == [3, 3]
        assert data["solution_count"] == len(data["solutions"])
        texts = [[w["word"] for w in s["words"]] for s in data["solutions"]]
        assert ["cat", "ore"] in texts

        cat_first = next(s for s in data["solutions"] if s["words"][0]["word"] == "cat")
        assert cat_first["words"][0]["positions"] == [[0, 0], [1, 0], [2, 0]]

    def test_dictionary_flag_and_show(self, tmp_path, words_file, capsys):
        puzzle = _write_puzzle(tmp_path, "grid: |\n  CA\n  RT\nlengths: [3]\n")
        output = tmp_path / "result.json"

        code = main([str(puzzle), "-d", str(words_file), "-o", str(output), "--show", "--unique"])

        assert code == 0
        printed = capsys.readouterr().out
        assert "CA\nrT" in printed
        data = json.loads(output.read_text())
        assert data["solution_count"] == 2
        assert data["config"]["unique"] is True

    def test_workers_flag(self, tmp_path, words_file):
        puzzle = _write_puzzle(tmp_path, f"grid: [ca, rt]\nlengths: [3]\ndictionary: {words_file}\n")
        output = tmp_path / "result.json"

        assert main([str(puzzle), "-o", str(output), "--workers", "3"]) == 0
        data = json.loads(output.read_text())
        assert data["config"]["max_workers"] == 3
        assert data["solution_count"] == 2

    @pytest.mark.parametrize("flags", [
        ["--time-limit", "-1"],
        ["--time-limit", "0"],
        ["--workers", "0"],
    ])
    def test_invalid_solver_flags(self, tmp_path, words_file, capsys, flags):
        puzzle = _write_puzzle(tmp_path, f"grid: [ca, rt]\nlengths: [3]\ndictionary: {words_file}\n")
        output = tmp_path / "result.json"

        assert main([str(puzzle), "-o", str(output), *flags]) == 1
        assert "Error in solver options" in capsys.readouterr().err
        assert not output.exists()

    def test_missing_puzzle(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading puzzle" in capsys.readouterr().err

    def test_missing_dictionary(self, tmp_path, capsys):
        puzzle = _write_puzzle(tmp_path, "grid: [ca, rt]\nlengths: [3]\n")
        assert main([str(puzzle)]) == 1
        assert "dictionary required" in capsys.readouterr().err

    def test_unreadable_dictionary(self, tmp_path, capsys):
        puzzle = _write_puzzle(tmp_path, "grid: [ca, rt]\nlengths: [3]\n")
        assert main([str(puzzle), "-d", str(tmp_path / "none.txt")]) == 1
        assert "Error loading dictionary" in capsys.readouterr().err

    def test_bad_grid(self, tmp_path, words_file, capsys):
        puzzle = _write_puzzle(tmp_path, f"grid: [cat, rt]\nlengths: [3]\ndictionary: {words_file}\n")
        assert main([str(puzzle)]) == 1
        assert "Error in grid" in capsys.readouterr().err
