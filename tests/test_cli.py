"""Tests for the CLI entry point (cses.cli)."""

import subprocess
import sys
from pathlib import Path

import pytest

from cses.cli import USAGE, build_parser, main
from cses.generator import CSESGenerator


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def cses_file(tmp_path):
    gen = CSESGenerator()
    gen.add_subject("Math", simplified_name="M", teacher="John Doe",
                    room="Room 101")
    gen.add_subject("Art")
    gen.add_schedule("Monday", "mon", "all", [
        {"subject": "Math", "start_time": "09:00", "end_time": "10:00"},
        {"subject": "Art", "start_time": "10:15", "end_time": "11:00"},
    ])
    path = tmp_path / "cses.yaml"
    gen.save_to_file(path)
    return path


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestBuildParser:
    def test_collects_files(self):
        args = build_parser().parse_args(["a.yaml"])
        assert args.files == ["a.yaml"]

    def test_no_files(self):
        assert build_parser().parse_args([]).files == []


class TestUsage:
    @pytest.mark.parametrize("argv", [[], ["a.yaml", "b.yaml"]])
    def test_wrong_argument_count(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 1
        out = capsys.readouterr().out
        assert out == USAGE + "\n"
        assert len(out.splitlines()) == 2

    @pytest.mark.parametrize("argv", [["-x", "a.yaml"], ["--weird.yaml", "b.yaml"]])
    def test_dash_arguments_count_as_files(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == USAGE + "\n"
        assert captured.err == ""

    @pytest.mark.parametrize("arg", ["-h", "--weird.yaml"])
    def test_single_dash_argument_is_a_path(self, arg, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([arg])
        assert excinfo.value.code == 1
        assert capsys.readouterr().out == "Not a valid CSES file\n"

    def test_dash_prefixed_file_is_shown(self, cses_file, monkeypatch, capsys):
        monkeypatch.chdir(cses_file.parent)
        cses_file.rename("-timetable.yaml")
        main(["-timetable.yaml"])
        assert capsys.readouterr().out.startswith("All Subjects:\n")


# ---------------------------------------------------------------------------
# Show
# ---------------------------------------------------------------------------

class TestShow:
    def test_not_cses(self, tmp_path, capsys):
        path = tmp_path / "other.yaml"
        path.write_text("name: not a timetable\n")
        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])
        assert excinfo.value.code == 1
        assert capsys.readouterr().out == "Not a valid CSES file\n"

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.yaml")])
        assert excinfo.value.code == 1
        assert capsys.readouterr().out == "Not a valid CSES file\n"

    def test_listing(self, cses_file, capsys):
        main([str(cses_file)])
        assert capsys.readouterr().out.splitlines() == [
            "All Subjects:",
            "Math (M)",
            "- Teacher: John Doe",
            "- Room: Room 101",
            "Art ()",
            "- Teacher: ",
            "- Room: ",
            "",
            "All Schedules:",
            "Monday (mon all):",
            "- Math (09:00 - 10:00)",
            "- Art (10:15 - 11:00)",
        ]

    def test_sniffs_but_fails_to_load(self, tmp_path, capsys):
        path = tmp_path / "broken.yaml"
        path.write_text("version: 1\nsubjects:\n  - room: 101\nschedules: []\n")
        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])
        assert excinfo.value.code == 1
        assert "ERROR" in capsys.readouterr().err


class TestModuleEntryPoint:
    def test_python_dash_m(self, cses_file):
        result = subprocess.run(
            [sys.executable, "-m", "cses", str(cses_file)],
            capture_output=True, text=True,
            cwd=Path(__file__).resolve().parents[1],
        )
        assert result.returncode == 0
        assert result.stdout.startswith("All Subjects:\n")
