"""Declarative starting layouts and the initial-board builder.

A layout is one string per row, one symbol per square:

    ``N B R P Q``   helper piece of that kind
    ``p q``         the mover (as a stepper, or already promoted)
    ``G``           goal square
    ``X``           unoccupiable square
    ``.``           empty ordinary square
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from backend.models.board import (
    Board,
    BoardError,
    Identity,
    Piece,
    PieceKind,
    Position,
    Role,
    SquareKind,
)

REFERENCE_LAYOUT: tuple[str, ...] = (
    "NNNN",
    "BBBB",
    "RRRR",
    "GXXp",
)

GOAL = "G"
MISSING = "X"
EMPTY = "."
MOVER_SYMBOLS = frozenset("pq")


class LayoutError(ValueError):
    """Raised when a layout cannot describe a valid starting board."""


def parse_layout(rows: Sequence[str]) -> Board:
    """Build a board from *rows*, rejecting anything malformed."""
    if not rows:
        raise LayoutError("Layout has no rows.")
    width = len(rows[0])
    if width == 0:
        raise LayoutError("Layout rows must not be empty.")

    pieces: list[Piece] = []
    missing: list[Position] = []
    goals: list[Position] = []
    movers: list[Position] = []

    for r, line in enumerate(rows):
        if len(line) != width:
            raise LayoutError(
                f"Layout is not rectangular: row {r} has {len(line)} squares, "
                f"expected {width}."
            )
        for c, symbol in enumerate(line):
            pos = Position(r, c)
            if symbol == EMPTY:
                continue
            if symbol == GOAL:
                goals.append(pos)
            elif symbol == MISSING:
                missing.append(pos)
            elif symbol.upper() in "NBRPQ":
                kind = PieceKind.from_symbol(symbol)
                if symbol in MOVER_SYMBOLS:
                    movers.append(pos)
                    role = Role.MOVER
                elif symbol.isupper():
                    role = Role.HELPER
                else:
                    raise LayoutError(
                        f"Only a stepper or promoted piece can be the mover, "
                        f"got {symbol!r} at {pos}."
                    )
                identity = Identity(role, f"{kind.value}-{r}-{c}")
                pieces.append(Piece(kind=kind, position=pos, identity=identity))
            else:
                raise LayoutError(f"Unknown layout symbol {symbol!r} at {pos}.")

    if len(goals) != 1:
        raise LayoutError(f"Layout needs exactly one goal square, found {len(goals)}.")
    if len(movers) != 1:
        raise LayoutError(f"Layout needs exactly one mover, found {len(movers)}.")

    try:
        return Board.place(len(rows), width, pieces, goal=goals[0], missing=missing)
    except BoardError as exc:
        raise LayoutError(str(exc)) from exc


def load_layout(path: Path) -> Board:
    """Read a layout file; blank lines and ``#`` comments are ignored."""
    rows = [
        line.strip()
        for line in path.read_text().splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]
    return parse_layout(rows)


def initial_board(layout: Sequence[str] | None = None) -> Board:
    """Return the starting board for *layout* (the reference puzzle by default)."""
    return parse_layout(REFERENCE_LAYOUT if layout is None else layout)


def format_board(board: Board) -> list[str]:
    """Inverse of ``parse_layout``: one symbol string per row."""
    lines: list[str] = []
    for r in range(board.rows):
        row: list[str] = []
        for c in range(board.cols):
            pos = Position(r, c)
            piece = board.piece_at(pos)
            square = board.square_at(pos)
            if piece is not None:
                symbol = piece.kind.symbol
                row.append(symbol.lower() if piece.is_mover else symbol)
            elif square is SquareKind.GOAL:
                row.append(GOAL)
            elif square is SquareKind.MISSING:
                row.append(MISSING)
            else:
                row.append(EMPTY)
        lines.append("".join(row))
    return lines
