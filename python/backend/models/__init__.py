from backend.models.board import (
    Board,
    BoardError,
    Identity,
    Move,
    Piece,
    PieceKind,
    Position,
    Role,
    SquareKind,
)
from backend.models.layout import (
    REFERENCE_LAYOUT,
    LayoutError,
    format_board,
    initial_board,
    load_layout,
    parse_layout,
)

__all__ = [
    "Board", "BoardError", "Identity", "Move", "Piece", "PieceKind",
    "Position", "Role", "SquareKind",
    "REFERENCE_LAYOUT", "LayoutError", "format_board", "initial_board",
    "load_layout", "parse_layout",
]
