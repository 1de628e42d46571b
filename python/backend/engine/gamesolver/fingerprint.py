"""Canonical board keys for duplicate detection."""

from __future__ import annotations

from backend.models.board import Board, PieceKind

# 0 is reserved for an empty square
_KIND_CODES: dict[PieceKind, int] = {kind: i for i, kind in enumerate(PieceKind, start=1)}
_BASE = len(_KIND_CODES) + 1


def fingerprint(board: Board) -> int:
    """Encode the (kind, position) multiset of *board* as one integer.

    Squares are visited in fixed row-major order and each contributes a
    base-``_BASE`` digit for the kind occupying it, so the key depends
    only on where each kind sits, never on piece identity or on the
    moves that produced the board.  The encoding is injective for a
    given board size.

    Identity is not part of the key: a mover queen and a helper queen
    that trade squares give the same key even when only one of the two
    boards is won.
    """
    key = 0
    for piece in board.cells:
        key = key * _BASE + (0 if piece is None else _KIND_CODES[piece.kind])
    return key
