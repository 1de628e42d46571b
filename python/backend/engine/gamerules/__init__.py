from backend.engine.gamerules.rules import (
    MoveResult,
    all_moves,
    apply_move,
    is_promotion,
    is_win,
    legal_destinations,
    sorted_destinations,
    successors,
)

__all__ = [
    "MoveResult", "all_moves", "apply_move", "is_promotion", "is_win",
    "legal_destinations", "sorted_destinations", "successors",
]
