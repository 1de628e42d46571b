"""Command-line entry point, driven through Typer's test runner."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from main import app

from conftest import SIMPLE_3x3

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    # the CLI points loguru at the runner's temporary stderr
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def simple_file(tmp_path: Path) -> Path:
    path = tmp_path / "simple.txt"
    path.write_text("# corner start\n" + "\n".join(SIMPLE_3x3) + "\n")
    return path


def test_show_reference() -> None:
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "Start" in result.output


def test_moves_lists_destinations() -> None:
    result = runner.invoke(app, ["moves", "2", "0"])
    assert result.exit_code == 0
    assert "(3,0)" in result.output


def test_moves_for_blocked_piece() -> None:
    result = runner.invoke(app, ["moves", "3", "3"])
    assert result.exit_code == 0
    assert "no legal moves" in result.output


@pytest.mark.parametrize(("row", "col"), [("3", "1"), ("9", "9")])
def test_moves_without_piece_fails(row: str, col: str) -> None:
    result = runner.invoke(app, ["moves", row, col])
    assert result.exit_code == 1


def test_analyze_reference() -> None:
    result = runner.invoke(app, ["analyze"])
    assert result.exit_code == 0
    assert "Blocking pieces" in result.output


def test_solve_both_strategies(simple_file: Path) -> None:
    result = runner.invoke(app, ["solve", "-s", "both", "-l", str(simple_file)])
    assert result.exit_code == 0
    assert "INFORMED SEARCH" in result.output
    assert "EXHAUSTIVE SEARCH" in result.output


def test_solve_verbose(simple_file: Path) -> None:
    result = runner.invoke(app, ["solve", "-s", "exhaustive", "-v", "-l", str(simple_file)])
    assert result.exit_code == 0


def test_solve_out_of_budget_exits_nonzero() -> None:
    result = runner.invoke(app, ["solve", "--max-states", "5"])
    assert result.exit_code == 1
    assert "No solution" in result.output


def test_budget_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUZZLE_MAX_STATES", "5")
    result = runner.invoke(app, ["solve", "-s", "exhaustive"])
    assert result.exit_code == 1


def test_invalid_layout_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("...\n..\n")
    result = runner.invoke(app, ["show", "-l", str(path)])
    assert result.exit_code == 2
