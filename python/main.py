#!/usr/bin/env python3
"""Relocation Puzzle.

Usage::

    python main.py show                      # print the reference board
    python main.py solve -s exhaustive       # minimal solution
    python main.py solve -s both -l my.txt   # both strategies, custom layout
    python main.py analyze                   # mover / blocker summary
    python main.py moves 2 0                 # legal destinations of a piece
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import SolverConfig  # noqa: E402
from backend.engine.gamerules import sorted_destinations  # noqa: E402
from backend.engine.gamesolver import Strategy, analyze, solve_in_background  # noqa: E402
from backend.models.board import Board, Position  # noqa: E402
from backend.models.layout import LayoutError, initial_board, load_layout  # noqa: E402
from frontend.cli.rich import app as view  # noqa: E402


class StrategyChoice(StrEnum):
    informed = "informed"
    exhaustive = "exhaustive"
    both = "both"


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _load(layout: Optional[Path]) -> Board:
    try:
        return initial_board() if layout is None else load_layout(layout)
    except LayoutError as exc:
        typer.echo(f"Invalid layout: {exc}", err=True)
        raise typer.Exit(code=2) from exc


_LAYOUT_OPTION = typer.Option(
    None, "-l", "--layout",
    exists=True, dir_okay=False, readable=True,
    help="Layout file (one row of symbols per line). Defaults to the reference puzzle.",
)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def show(layout: Optional[Path] = _LAYOUT_OPTION) -> None:
    """Print the starting board."""
    view.print_board(_load(layout), title="Start")


@app.command()
def solve(
    strategy: StrategyChoice = typer.Option(
        StrategyChoice.informed, "-s", "--strategy",
        help="Search strategy; 'both' runs the two concurrently.",
    ),
    layout: Optional[Path] = _LAYOUT_OPTION,
    max_states: Optional[int] = typer.Option(
        None, "--max-states", min=1,
        help="State budget per run (default: $PUZZLE_MAX_STATES or 100,000,000).",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log search progress."),
) -> None:
    """Search for a solution from the starting board."""
    _configure_logging(verbose)
    board = _load(layout)
    config = SolverConfig.from_env()
    if max_states is not None:
        config = replace(config, max_states=max_states)

    if strategy is StrategyChoice.both:
        strategies = [Strategy.INFORMED, Strategy.EXHAUSTIVE]
    else:
        strategies = [Strategy(strategy.value)]

    view.print_board(board, title="Start")
    with ThreadPoolExecutor(max_workers=len(strategies)) as pool:
        futures = [solve_in_background(board, s, config, executor=pool) for s in strategies]
        results = [f.result() for f in futures]

    for result in results:
        view.print_result(result)
    if len(results) > 1:
        view.print_comparison(results)
    if not all(r.solved for r in results):
        raise typer.Exit(code=1)


@app.command("analyze")
def analyze_command(layout: Optional[Path] = _LAYOUT_OPTION) -> None:
    """Summarise the mover's distance to promotion and goal."""
    board = _load(layout)
    view.print_board(board, title="Board")
    view.print_analysis(analyze(board))


@app.command()
def moves(
    row: int = typer.Argument(..., help="Row of the piece (0 = top)."),
    col: int = typer.Argument(..., help="Column of the piece (0 = left)."),
    layout: Optional[Path] = _LAYOUT_OPTION,
) -> None:
    """List legal destinations for the piece on ROW, COL."""
    board = _load(layout)
    pos = Position(row, col)
    piece = board.piece_at(pos) if board.in_bounds(row, col) else None
    if piece is None:
        typer.echo(f"No piece at {pos}.", err=True)
        raise typer.Exit(code=1)

    destinations = sorted_destinations(piece, board)
    view.print_board(board, title=f"{piece.kind.value} {pos}", highlight=destinations)
    if destinations:
        typer.echo(", ".join(str(d) for d in destinations))
    else:
        typer.echo(f"{piece.kind.value} at {pos} has no legal moves.")


if __name__ == "__main__":
    app()
