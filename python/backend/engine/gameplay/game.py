"""Interactive play. Validates moves through the rules engine and keeps history."""

from __future__ import annotations

from typing import Sequence

from backend.engine.gamerules import MoveResult, apply_move, sorted_destinations
from backend.engine.gamestate import GameState
from backend.models.board import Board, Move, Position
from backend.models.layout import initial_board


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(self, layout: Sequence[str] | None = None) -> None:
        self.initial = initial_board(layout)
        self.state = GameState(self.initial)
        self.last_promoted = False

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.initial = board
        obj.state = GameState(board)
        obj.last_promoted = False
        return obj

    # -- movement -------------------------------------------------------------

    def select(self, position: Position) -> list[Position]:
        """Legal destinations for the piece at *position* (empty if none)."""
        position = Position(*position)
        board = self.state.board
        if not board.in_bounds(*position):
            return []
        piece = board.piece_at(position)
        if piece is None:
            return []
        return sorted_destinations(piece, board)

    def move(self, from_pos: Position, to_pos: Position) -> MoveResult:
        """Move the piece on *from_pos* to *to_pos*.

        Returns the rules engine's result; the session only changes when
        the move was valid.
        """
        from_pos, to_pos = Position(*from_pos), Position(*to_pos)
        board = self.state.board
        if self.is_won:
            return MoveResult.rejected("puzzle already solved")
        if not board.in_bounds(*from_pos) or board.piece_at(from_pos) is None:
            return MoveResult.rejected(f"no piece at {from_pos}")

        piece = board.piece_at(from_pos)
        result = apply_move(board, Move(from_pos, to_pos, piece))
        if result.valid:
            move = Move(from_pos, to_pos, piece, result.promoted)
            self.state.record(move, result.board)
            self.last_promoted = result.promoted
            if result.won:
                self.state.pause()
        return result

    def play(self, move: Move) -> MoveResult:
        """Replay a solver move."""
        return self.move(move.from_pos, move.to_pos)

    def undo(self) -> Move | None:
        move = self.state.rewind()
        self.last_promoted = False
        if move is not None:
            self.state.resume()
        return move

    def reset(self) -> None:
        self.state = GameState(self.initial)
        self.last_promoted = False

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
