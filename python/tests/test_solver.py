"""Solver test suite — small parametrised layouts plus the reference puzzle.

Every returned solution is replayed through the real game engine to
verify correctness.  The exhaustive search on the reference puzzle runs
by default; the informed/exhaustive comparison on it is marked ``slow``
and is deselected (see ``pyproject.toml``); run it with ``pytest -m slow``.
"""

from __future__ import annotations

import pytest

from backend.config import SolverConfig
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver import (
    PathArena,
    SearchPhase,
    SearchProgress,
    SearchResult,
    Solver,
    Strategy,
    run_exhaustive_search,
    run_informed_search,
    solve_in_background,
)
from backend.models.board import Board, Identity, Move, Piece, PieceKind, Position, Role
from backend.models.layout import initial_board, parse_layout

from conftest import BLOCKED_3x3, SIMPLE_3x3, STUCK_2x2

# (id, layout, minimal solution length)
_SOLVABLE = [
    ("queen-straight", ("q..", "...", "G.."), 1),
    ("queen-diagonal", ("..q", "...", "G.X"), 1),
    ("promote-then-diagonal", ("...", "..p", "G.."), 2),
    ("simple-3x3", SIMPLE_3x3, 3),
    ("blocked-3x3", BLOCKED_3x3, 4),
    ("open-4x4", ("....", "....", "....", "G..p"), 4),
]


# -- helpers ------------------------------------------------------------------


def _assert_valid_solution(board: Board, result: SearchResult) -> None:
    """Replay *result* on *board* and check it ends on the winning board."""
    assert result.solved, f"{result.strategy} search found no solution"
    assert result.phase is SearchPhase.GOAL_FOUND

    starts_as_stepper = board.find_mover().kind is PieceKind.PAWN
    mover_promoted = False
    game = GamePlay.from_board(board)
    for i, move in enumerate(result.solution):
        outcome = game.play(move)
        assert outcome.valid, f"move {i} ({move.describe()}) rejected: {outcome.reason}"
        assert outcome.promoted == move.promotes
        if outcome.promoted and move.piece.is_mover:
            assert outcome.board.find_mover().kind is PieceKind.QUEEN
            mover_promoted = True
    assert game.is_won
    # a stepper can only reach the goal after promoting on the far edge
    assert mover_promoted == starts_as_stepper
    assert game.state.board == result.final_board


def _won_board() -> Board:
    queen = Piece(PieceKind.QUEEN, Position(2, 0), Identity(Role.MOVER, "queen"))
    return Board.place(3, 3, [queen], goal=Position(2, 0))


# -- exhaustive -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("layout", "length"),
    [(layout, length) for _, layout, length in _SOLVABLE],
    ids=[name for name, _, _ in _SOLVABLE],
)
def test_exhaustive_is_minimal(layout: tuple[str, ...], length: int) -> None:
    board = parse_layout(layout)
    result = run_exhaustive_search(board)
    _assert_valid_solution(board, result)
    assert result.solution_length == length
    assert result.strategy is Strategy.EXHAUSTIVE


# -- informed -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("layout", "length"),
    [(layout, length) for _, layout, length in _SOLVABLE],
    ids=[name for name, _, _ in _SOLVABLE],
)
def test_informed_solves(layout: tuple[str, ...], length: int) -> None:
    board = parse_layout(layout)
    result = run_informed_search(board)
    _assert_valid_solution(board, result)
    assert result.solution_length >= length
    assert result.strategy is Strategy.INFORMED


@pytest.mark.parametrize("strategy", list(Strategy))
def test_already_won_board_needs_no_moves(strategy: Strategy) -> None:
    board = _won_board()
    result = Solver().solve(board, strategy)
    assert result.solved
    assert result.solution == []
    assert result.states_explored == 1
    assert result.final_board == board


@pytest.mark.parametrize("strategy", list(Strategy))
def test_stuck_layout_is_exhausted(strategy: Strategy) -> None:
    result = Solver().solve(parse_layout(STUCK_2x2), strategy)
    assert not result.solved
    assert result.solution is None
    assert result.solution_length == -1
    assert result.phase is SearchPhase.EXHAUSTED
    assert result.states_explored == 1
    assert result.final_board is None


# -- budget and progress --------------------------------------------------------


@pytest.mark.parametrize("strategy", list(Strategy))
def test_state_cap_stops_search(reference: Board, strategy: Strategy) -> None:
    result = Solver(SolverConfig(max_states=50)).solve(reference, strategy)
    assert not result.solved
    assert result.phase is SearchPhase.EXHAUSTED
    assert result.states_explored == 50


def test_progress_reported_at_interval(reference: Board) -> None:
    seen: list[SearchProgress] = []
    solver = Solver(SolverConfig(max_states=50, yield_every=10), on_progress=seen.append)
    solver.exhaustive(reference)
    assert [p.states_explored for p in seen] == [10, 20, 30, 40, 50]
    assert all(p.strategy is Strategy.EXHAUSTIVE for p in seen)
    assert all(p.elapsed >= 0 for p in seen)


def test_runs_are_independent(simple: Board) -> None:
    solver = Solver()
    first = solver.exhaustive(simple)
    second = solver.exhaustive(simple)
    assert first.solution == second.solution
    assert first.states_explored == second.states_explored


def test_search_leaves_start_board_untouched(simple: Board) -> None:
    snapshot = parse_layout(SIMPLE_3x3)
    run_exhaustive_search(simple)
    run_informed_search(simple)
    assert simple == snapshot


# -- hint, background runs, arena -------------------------------------------------


def test_hint_returns_first_move(simple: Board) -> None:
    move = Solver().hint(simple)
    assert move is not None
    assert (move.from_pos, move.to_pos) == ((2, 2), (1, 2))


def test_hint_on_won_board_is_none() -> None:
    assert Solver().hint(_won_board()) is None


def test_hint_on_stuck_board_is_none() -> None:
    assert Solver().hint(parse_layout(STUCK_2x2)) is None


@pytest.mark.parametrize("strategy", list(Strategy))
def test_solve_in_background(simple: Board, strategy: Strategy) -> None:
    future = solve_in_background(simple, strategy)
    result = future.result(timeout=30)
    _assert_valid_solution(simple, result)


def test_path_arena_reconstructs_in_play_order(simple: Board) -> None:
    pawn = simple.find_mover()
    first = Move(Position(2, 2), Position(1, 2), pawn)
    second = Move(Position(1, 2), Position(0, 2), pawn, promotes=True)

    arena = PathArena()
    a = arena.add(first, PathArena.ROOT)
    b = arena.add(second, a)
    assert len(arena) == 3
    assert arena.reconstruct(b) == [first, second]
    assert arena.reconstruct(PathArena.ROOT) == []


# -- reference puzzle ---------------------------------------------------------


@pytest.mark.timeout(1800)
def test_reference_exhaustive() -> None:
    board = initial_board()
    result = run_exhaustive_search(board)
    _assert_valid_solution(board, result)
    assert result.solution_length == 22


@pytest.mark.slow
@pytest.mark.timeout(1800)
def test_reference_informed_not_shorter_than_exhaustive() -> None:
    board = initial_board()
    informed = run_informed_search(board)
    exhaustive = run_exhaustive_search(board)
    _assert_valid_solution(board, informed)
    assert informed.solution_length >= exhaustive.solution_length
