"""Board and piece model for the relocation puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from functools import cached_property
from typing import Iterable, Iterator, NamedTuple


class BoardError(ValueError):
    """Raised when a board would violate its placement invariants."""


class Position(NamedTuple):
    row: int
    col: int

    def manhattan(self, other: Position) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class PieceKind(StrEnum):
    KNIGHT = "knight"    # L-shaped leaper
    BISHOP = "bishop"    # diagonal slider
    ROOK = "rook"        # orthogonal slider
    PAWN = "pawn"        # forward-only stepper
    QUEEN = "queen"      # combined slider

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> PieceKind:
        return _KINDS_BY_SYMBOL[symbol.upper()]


_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.PAWN: "P",
    PieceKind.QUEEN: "Q",
}
_KINDS_BY_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


class SquareKind(StrEnum):
    NORMAL = "normal"
    GOAL = "goal"
    MISSING = "missing"


class Role(StrEnum):
    MOVER = "mover"
    HELPER = "helper"


@dataclass(frozen=True)
class Identity:
    """Opaque token that follows a piece through moves and promotion."""

    role: Role
    tag: str

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    position: Position
    identity: Identity

    @property
    def is_mover(self) -> bool:
        return self.identity.role is Role.MOVER

    def moved_to(self, position: Position, kind: PieceKind | None = None) -> Piece:
        return replace(self, position=position, kind=kind or self.kind)


@dataclass(frozen=True)
class Move:
    """Description of a single relocation; ``piece`` is the pre-move snapshot."""

    from_pos: Position
    to_pos: Position
    piece: Piece
    promotes: bool = False

    def describe(self) -> str:
        text = f"{self.piece.kind.value} {self.from_pos} -> {self.to_pos}"
        if self.promotes:
            text += f" ={PieceKind.QUEEN.symbol}"
        return text


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the grid.

    ``squares`` and ``cells`` are flat row-major tuples of length
    ``rows * cols``.  Boards derived from one another share the same
    ``squares`` tuple; only ``cells`` is rebuilt per move.
    """

    rows: int
    cols: int
    squares: tuple[SquareKind, ...] = field(repr=False)
    cells: tuple[Piece | None, ...] = field(repr=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def place(
        cls,
        rows: int,
        cols: int,
        pieces: Iterable[Piece],
        goal: Position,
        missing: Iterable[Position] = (),
    ) -> Board:
        """Build a board from explicit placements, checking every invariant.

        Example::

            Board.place(4, 4, [pawn], goal=Position(3, 0),
                        missing=[Position(3, 1), Position(3, 2)])
        """
        if rows < 1 or cols < 1:
            raise BoardError(f"Board dimensions must be positive, got {rows}x{cols}.")

        squares = [SquareKind.NORMAL] * (rows * cols)

        def _index(pos: Position, what: str) -> int:
            if not (0 <= pos.row < rows and 0 <= pos.col < cols):
                raise BoardError(f"{what} at {pos} is outside the {rows}x{cols} board.")
            return pos.row * cols + pos.col

        for pos in missing:
            squares[_index(pos, "Unoccupiable square")] = SquareKind.MISSING
        goal_index = _index(goal, "Goal")
        if squares[goal_index] is SquareKind.MISSING:
            raise BoardError(f"Goal at {goal} is marked unoccupiable.")
        squares[goal_index] = SquareKind.GOAL

        cells: list[Piece | None] = [None] * (rows * cols)
        identities: set[Identity] = set()
        movers = 0
        for piece in pieces:
            i = _index(piece.position, f"Piece {piece.identity}")
            if squares[i] is SquareKind.MISSING:
                raise BoardError(f"Piece {piece.identity} sits on unoccupiable {piece.position}.")
            if cells[i] is not None:
                raise BoardError(
                    f"Pieces {cells[i].identity} and {piece.identity} share {piece.position}."
                )
            if piece.identity in identities:
                raise BoardError(f"Duplicate piece identity {piece.identity}.")
            identities.add(piece.identity)
            movers += piece.is_mover
            cells[i] = piece
        if movers > 1:
            raise BoardError(f"Expected at most one mover, found {movers}.")

        return cls(rows=rows, cols=cols, squares=tuple(squares), cells=tuple(cells))

    def relocate(self, from_pos: Position, piece: Piece) -> Board:
        """Return a new board with the piece at *from_pos* replaced by *piece*.

        *piece* carries its destination as ``piece.position``.  No rule
        checks happen here; callers go through the rules engine.
        """
        cells = list(self.cells)
        cells[from_pos.row * self.cols + from_pos.col] = None
        cells[piece.position.row * self.cols + piece.position.col] = piece
        return Board(self.rows, self.cols, self.squares, tuple(cells))

    # -- queries --------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, row: int, col: int) -> bool:
        """In bounds, not unoccupiable and empty."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return False
        i = row * self.cols + col
        return self.cells[i] is None and self.squares[i] is not SquareKind.MISSING

    def square_at(self, pos: Position) -> SquareKind:
        return self.squares[pos.row * self.cols + pos.col]

    def piece_at(self, pos: Position) -> Piece | None:
        return self.cells[pos.row * self.cols + pos.col]

    def pieces(self) -> Iterator[Piece]:
        """Yield every piece in row-major order."""
        return (p for p in self.cells if p is not None)

    def find_mover(self) -> Piece | None:
        for piece in self.cells:
            if piece is not None and piece.is_mover:
                return piece
        return None

    @cached_property
    def goal(self) -> Position:
        return Position(*divmod(self.squares.index(SquareKind.GOAL), self.cols))

    @property
    def promotion_row(self) -> int:
        """Far edge for the forward-only stepper (it moves toward row 0)."""
        return 0
