from backend.engine.gamesolver.analyzer import (
    NOT_FOUND,
    BoardAnalysis,
    GoalPath,
    analyze,
    has_clear_path,
    path_to_goal,
)
from backend.engine.gamesolver.fingerprint import fingerprint
from backend.engine.gamesolver.frontier import FifoFrontier, Frontier
from backend.engine.gamesolver.heuristic import estimate
from backend.engine.gamesolver.solver import (
    PathArena,
    SearchPhase,
    SearchProgress,
    SearchResult,
    SearchState,
    Solver,
    Strategy,
    reconstruct,
    run_exhaustive_search,
    run_informed_search,
    solve_in_background,
)

__all__ = [
    "NOT_FOUND", "BoardAnalysis", "GoalPath", "analyze", "has_clear_path",
    "path_to_goal", "fingerprint", "FifoFrontier", "Frontier", "estimate",
    "PathArena", "SearchPhase", "SearchProgress", "SearchResult",
    "SearchState", "Solver", "Strategy", "reconstruct",
    "run_exhaustive_search", "run_informed_search", "solve_in_background",
]
