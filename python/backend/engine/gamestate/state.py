"""Session state: the current board, the moves played so far and a play clock."""

from __future__ import annotations

import time

from backend.engine.gamerules import is_win
from backend.models.board import Board, Move


class GameState:
    """Current board plus an undo history of ``(move, board before it)``."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.history: list[tuple[Move, Board]] = []
        self._banked = 0.0
        self._since: float | None = time.perf_counter()

    # -- clock ----------------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        """Seconds of play, excluding time spent paused."""
        if self._since is None:
            return self._banked
        return self._banked + time.perf_counter() - self._since

    def pause(self) -> None:
        if self._since is not None:
            self._banked = self.elapsed_time
            self._since = None

    def resume(self) -> None:
        if self._since is None:
            self._since = time.perf_counter()

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    def record(self, move: Move, board: Board) -> None:
        """Push *move* and make *board* (its result) current."""
        self.history.append((move, self.board))
        self.board = board

    def rewind(self) -> Move | None:
        """Drop the last move and restore the board before it."""
        if not self.history:
            return None
        move, previous = self.history.pop()
        self.board = previous
        return move

    @property
    def is_solved(self) -> bool:
        return is_win(self.board)
