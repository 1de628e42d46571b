"""Shared layouts for the test suite."""

from __future__ import annotations

import pytest

from backend.models.board import Board
from backend.models.layout import initial_board, parse_layout

# Mover two steps below the promotion edge, open board.
SIMPLE_3x3 = ("...", "...", "G.p")

# Same, with a rook standing on the mover's promotion column.
BLOCKED_3x3 = ("...", "..R", "G.p")

# Mover can never move and there is nothing else on the board.
STUCK_2x2 = ("X.", "pG")


@pytest.fixture
def reference() -> Board:
    return initial_board()


@pytest.fixture
def simple() -> Board:
    return parse_layout(SIMPLE_3x3)


@pytest.fixture
def blocked() -> Board:
    return parse_layout(BLOCKED_3x3)
