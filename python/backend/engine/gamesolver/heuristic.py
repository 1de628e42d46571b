"""Cost-to-goal estimate for the informed search.

The estimate is deliberately not admissible: blockers along the mover's
route are charged on top of the distance, and a square can be charged
twice when the promotion leg and the travel leg overlap.  The informed
search trades optimality for speed with it; the exhaustive search is
the one that guarantees minimal solutions.
"""

from __future__ import annotations

from typing import Iterator

from backend.config import SolverConfig
from backend.models.board import Board, Piece, PieceKind, Position

_DEFAULT_CONFIG = SolverConfig()


def _segment(start: Position, end: Position) -> Iterator[Position]:
    """Squares after *start* up to and including *end* along a row or column."""
    dr = (end.row > start.row) - (end.row < start.row)
    dc = (end.col > start.col) - (end.col < start.col)
    r, c = start
    while (r, c) != end:
        r += dr
        c += dc
        yield Position(r, c)


def promotion_leg(board: Board, mover: Piece) -> list[Position]:
    """Squares straight ahead of an unpromoted mover up to the far edge."""
    if mover.kind is not PieceKind.PAWN:
        return []
    edge = Position(board.promotion_row, mover.position.col)
    return list(_segment(mover.position, edge))


def travel_leg(board: Board, mover: Piece) -> list[Position]:
    """Along the row to the goal column, then down that column to the goal.

    An unpromoted mover starts this leg from its promotion square.
    """
    if mover.kind is PieceKind.PAWN:
        start = Position(board.promotion_row, mover.position.col)
    else:
        start = mover.position
    goal = board.goal
    corner = Position(start.row, goal.col)
    return list(_segment(start, corner)) + list(_segment(corner, goal))


def count_blockers(board: Board, squares: list[Position], mover: Piece) -> int:
    """Pieces other than the mover occupying *squares* (repeats count again)."""
    total = 0
    for pos in squares:
        piece = board.piece_at(pos)
        if piece is not None and piece.identity != mover.identity:
            total += 1
    return total


def distance_to_goal(board: Board, mover: Piece) -> int:
    """Moves-to-goal lower bound ignoring every blocker."""
    goal = board.goal
    if mover.kind is not PieceKind.PAWN:
        return mover.position.manhattan(goal)
    rows_left = mover.position.row - board.promotion_row
    edge = Position(board.promotion_row, mover.position.col)
    return rows_left + edge.manhattan(goal)


def estimate(board: Board, config: SolverConfig = _DEFAULT_CONFIG) -> int:
    """Non-negative estimate of the moves still needed to win *board*."""
    mover = board.find_mover()
    if mover is None:
        # unreachable from a valid layout; nothing is ever removed
        return 0
    distance = distance_to_goal(board, mover)
    if mover.kind is not PieceKind.PAWN:
        return distance
    upward = count_blockers(board, promotion_leg(board, mover), mover)
    onward = count_blockers(board, travel_leg(board, mover), mover)
    return (
        distance
        + config.upward_blocker_penalty * upward
        + config.path_blocker_penalty * onward
    )
