"""Move generation and move application.

Every board-producing transformation in the project goes through this
module.  Illegal input is answered with a rejected ``MoveResult``; the
search engine never probes legality by trial, it only plays moves drawn
from ``legal_destinations``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from backend.models.board import Board, Move, Piece, PieceKind, Position

# deltas
KNIGHT_DELTAS = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
FORWARD = ((-1, 0),)

# kind -> (deltas, slides)
MOVEMENT: dict[PieceKind, tuple[tuple[tuple[int, int], ...], bool]] = {
    PieceKind.KNIGHT: (KNIGHT_DELTAS, False),
    PieceKind.BISHOP: (DIAGONAL, True),
    PieceKind.ROOK: (ORTHOGONAL, True),
    PieceKind.PAWN: (FORWARD, False),
    PieceKind.QUEEN: (ORTHOGONAL + DIAGONAL, True),
}


@dataclass(frozen=True)
class MoveResult:
    valid: bool
    board: Board | None = None
    promoted: bool = False
    won: bool = False
    reason: str = ""

    @classmethod
    def rejected(cls, reason: str) -> MoveResult:
        return cls(valid=False, reason=reason)


# -- generation ---------------------------------------------------------------


def _iter_destinations(piece: Piece, board: Board) -> Iterator[Position]:
    deltas, slides = MOVEMENT[piece.kind]
    row, col = piece.position
    is_open = board.is_open
    for dr, dc in deltas:
        r, c = row + dr, col + dc
        if not slides:
            if is_open(r, c):
                yield Position(r, c)
            continue
        # pieces block, they are never captured
        while is_open(r, c):
            yield Position(r, c)
            r += dr
            c += dc


def legal_destinations(piece: Piece, board: Board) -> frozenset[Position]:
    """Every square *piece* may move to on *board*."""
    return frozenset(_iter_destinations(piece, board))


def sorted_destinations(piece: Piece, board: Board) -> list[Position]:
    """``legal_destinations`` in row-major order, for display."""
    return sorted(_iter_destinations(piece, board))


def is_promotion(piece: Piece, to: Position, board: Board) -> bool:
    return piece.kind is PieceKind.PAWN and to.row == board.promotion_row


def all_moves(board: Board) -> list[Move]:
    """Every legal move of every piece; all pieces belong to the player."""
    return [move for move, _ in successors(board)]


def successors(board: Board) -> Iterator[tuple[Move, Board]]:
    """Yield ``(move, resulting_board)`` for every legal move on *board*.

    Destinations come straight from the generator, so the legality
    check in ``apply_move`` is not repeated here.
    """
    for piece in board.pieces():
        for to in _iter_destinations(piece, board):
            promotes = is_promotion(piece, to, board)
            yield (
                Move(piece.position, to, piece, promotes),
                _play(board, piece, to, promotes),
            )


# -- application --------------------------------------------------------------


def _play(board: Board, piece: Piece, to: Position, promotes: bool) -> Board:
    moved = piece.moved_to(to, PieceKind.QUEEN if promotes else None)
    return board.relocate(piece.position, moved)


def apply_move(board: Board, move: Move) -> MoveResult:
    """Apply *move* to *board*, returning a new board or a rejection."""
    if not board.in_bounds(*move.from_pos):
        return MoveResult.rejected(f"{move.from_pos} is off the board")
    piece = board.piece_at(Position(*move.from_pos))
    if piece is None:
        return MoveResult.rejected(f"no piece at {move.from_pos}")
    if piece.identity != move.piece.identity:
        return MoveResult.rejected(
            f"{move.from_pos} holds {piece.identity}, not {move.piece.identity}"
        )
    if move.to_pos not in legal_destinations(piece, board):
        return MoveResult.rejected(
            f"{piece.kind.value} cannot move from {move.from_pos} to {move.to_pos}"
        )

    to = Position(*move.to_pos)
    promoted = is_promotion(piece, to, board)
    new_board = _play(board, piece, to, promoted)
    return MoveResult(
        valid=True,
        board=new_board,
        promoted=promoted,
        won=is_win(new_board),
    )


def is_win(board: Board) -> bool:
    """True iff the goal square holds the mover; helpers never win."""
    piece = board.piece_at(board.goal)
    return piece is not None and piece.is_mover
