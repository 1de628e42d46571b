"""Cheap board diagnostics for display, independent of a full search."""

from __future__ import annotations

import math
from dataclasses import dataclass

from backend.engine.gamesolver.heuristic import (
    count_blockers,
    distance_to_goal,
    promotion_leg,
    travel_leg,
)
from backend.models.board import Board, Piece, PieceKind, Position, SquareKind


@dataclass(frozen=True)
class BoardAnalysis:
    mover_position: Position | None
    promoted: bool
    moves_to_promotion: float
    moves_to_goal: float
    blocking_count: int
    pieces_above: int = 0


NOT_FOUND = BoardAnalysis(
    mover_position=None,
    promoted=False,
    moves_to_promotion=math.inf,
    moves_to_goal=math.inf,
    blocking_count=0,
)


@dataclass(frozen=True)
class GoalPath:
    squares: list[Position]
    blockers: list[Piece]


def _route(board: Board, mover: Piece) -> list[Position]:
    return promotion_leg(board, mover) + travel_leg(board, mover)


def analyze(board: Board) -> BoardAnalysis:
    """Summarise the mover's situation; ``NOT_FOUND`` when there is no mover."""
    mover = board.find_mover()
    if mover is None:
        return NOT_FOUND

    promoted = mover.kind is PieceKind.QUEEN
    above = count_blockers(board, promotion_leg(board, mover), mover)
    return BoardAnalysis(
        mover_position=mover.position,
        promoted=promoted,
        moves_to_promotion=0 if promoted else mover.position.row - board.promotion_row,
        moves_to_goal=distance_to_goal(board, mover),
        blocking_count=above + count_blockers(board, travel_leg(board, mover), mover),
        pieces_above=above,
    )


def path_to_goal(board: Board) -> GoalPath:
    """The canonical route squares and the pieces standing on them."""
    mover = board.find_mover()
    if mover is None:
        return GoalPath(squares=[], blockers=[])
    squares = _route(board, mover)
    blockers = [
        piece
        for piece in (board.piece_at(pos) for pos in squares)
        if piece is not None and piece.identity != mover.identity
    ]
    return GoalPath(squares=squares, blockers=blockers)


def has_clear_path(board: Board) -> bool:
    """True when nothing, piece or unoccupiable square, sits on the route."""
    mover = board.find_mover()
    if mover is None:
        return False
    for pos in _route(board, mover):
        if board.square_at(pos) is SquareKind.MISSING:
            return False
        piece = board.piece_at(pos)
        if piece is not None and piece.identity != mover.identity:
            return False
    return True
