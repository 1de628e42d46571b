"""Relocation puzzle solver: informed best-first and exhaustive level-order search.

Both strategies share the rules engine and the board fingerprint.  Each
call owns its frontier, visited table and path arena, so independent
runs (even of the same start board) never see each other's state.
"""

from __future__ import annotations

import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from loguru import logger

from backend.config import SolverConfig
from backend.engine.gamerules import is_win, successors
from backend.engine.gamesolver.fingerprint import fingerprint
from backend.engine.gamesolver.frontier import FifoFrontier, Frontier
from backend.engine.gamesolver.heuristic import estimate
from backend.models.board import Board, Move


class Strategy(StrEnum):
    INFORMED = "informed"
    EXHAUSTIVE = "exhaustive"


class SearchPhase(StrEnum):
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class SearchState:
    board: Board
    cost: int
    estimate: int
    key: int
    node: int    # index of this state's entry in the PathArena

    @property
    def total(self) -> int:
        return self.cost + self.estimate


@dataclass(frozen=True)
class SearchProgress:
    strategy: Strategy
    states_explored: int
    frontier_size: int
    elapsed: float


@dataclass
class SearchResult:
    strategy: Strategy
    solution: list[Move] | None
    states_explored: int
    elapsed: float
    phase: SearchPhase
    final_board: Board | None = None

    @property
    def solved(self) -> bool:
        return self.solution is not None

    @property
    def solution_length(self) -> int:
        return len(self.solution) if self.solution is not None else -1


ProgressCallback = Callable[[SearchProgress], None]


# -- path reconstruction ------------------------------------------------------


class PathArena:
    """Append-only parent links, addressed by index.

    Entry 0 is the root: it has no move and no parent.
    """

    ROOT = 0

    def __init__(self) -> None:
        self._moves: list[Move | None] = [None]
        self._parents: list[int] = [-1]

    def add(self, move: Move, parent: int) -> int:
        self._moves.append(move)
        self._parents.append(parent)
        return len(self._moves) - 1

    def __len__(self) -> int:
        return len(self._moves)

    def reconstruct(self, node: int) -> list[Move]:
        """Moves from the root to *node*, in play order."""
        path: list[Move] = []
        while node != self.ROOT:
            path.append(self._moves[node])
            node = self._parents[node]
        path.reverse()
        return path


def reconstruct(goal_state: SearchState, arena: PathArena) -> list[Move]:
    return arena.reconstruct(goal_state.node)


# -- solver -------------------------------------------------------------------


class Solver:
    """Runs either search strategy under a shared configuration."""

    def __init__(
        self,
        config: SolverConfig | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.config = config or SolverConfig()
        self.on_progress = on_progress

    def solve(self, board: Board, strategy: Strategy = Strategy.INFORMED) -> SearchResult:
        if strategy is Strategy.EXHAUSTIVE:
            return self.exhaustive(board)
        return self.informed(board)

    def hint(self, board: Board) -> Move | None:
        """Return the first move of an informed solution, or ``None``."""
        if is_win(board):
            return None
        result = self.informed(board)
        return result.solution[0] if result.solution else None

    # -- strategies -----------------------------------------------------------

    def informed(self, board: Board) -> SearchResult:
        """Best-first search on cost + estimate; short, not always minimal."""
        config = self.config
        started = time.perf_counter()
        arena = PathArena()
        frontier: Frontier[SearchState] = Frontier()
        best_cost: dict[int, int] = {}

        root = SearchState(board, 0, estimate(board, config), fingerprint(board), PathArena.ROOT)
        frontier.push(root, root.total)
        explored = 0
        logger.debug(f"informed search started, initial estimate {root.estimate}")

        while not frontier.is_empty() and explored < config.max_states:
            state = frontier.pop()
            explored += 1
            if explored % config.yield_every == 0:
                self._checkpoint(Strategy.INFORMED, explored, len(frontier), started)

            if is_win(state.board):
                return self._goal_found(Strategy.INFORMED, arena, state, explored, started)

            seen = best_cost.get(state.key)
            if seen is not None and state.cost >= seen:
                continue
            best_cost[state.key] = state.cost

            cost = state.cost + 1
            for move, child in successors(state.board):
                key = fingerprint(child)
                seen = best_cost.get(key)
                if seen is not None and cost >= seen:
                    continue
                h = estimate(child, config)
                node = arena.add(move, state.node)
                frontier.push(SearchState(child, cost, h, key, node), cost + h)

        return self._exhausted(Strategy.INFORMED, explored, started)

    def exhaustive(self, board: Board) -> SearchResult:
        """Level-order search; any solution found has minimum length.

        A state is marked seen when first generated: with unit move
        costs the first generation is already at its cheapest level.
        """
        config = self.config
        started = time.perf_counter()
        arena = PathArena()
        frontier: FifoFrontier[SearchState] = FifoFrontier()

        root_key = fingerprint(board)
        seen: set[int] = {root_key}
        frontier.push(SearchState(board, 0, 0, root_key, PathArena.ROOT))
        explored = 0
        logger.debug("exhaustive search started")

        while not frontier.is_empty() and explored < config.max_states:
            state = frontier.pop()
            explored += 1
            if explored % config.yield_every == 0:
                self._checkpoint(Strategy.EXHAUSTIVE, explored, len(frontier), started)

            if is_win(state.board):
                return self._goal_found(Strategy.EXHAUSTIVE, arena, state, explored, started)

            cost = state.cost + 1
            for move, child in successors(state.board):
                key = fingerprint(child)
                if key in seen:
                    continue
                seen.add(key)
                node = arena.add(move, state.node)
                frontier.push(SearchState(child, cost, 0, key, node), cost)

        return self._exhausted(Strategy.EXHAUSTIVE, explored, started)

    # -- helpers --------------------------------------------------------------

    def _checkpoint(self, strategy: Strategy, explored: int, frontier_size: int, started: float) -> None:
        progress = SearchProgress(strategy, explored, frontier_size, time.perf_counter() - started)
        logger.debug(
            f"{strategy} search: {explored} states explored, "
            f"{frontier_size} queued, {progress.elapsed:.2f}s"
        )
        if self.on_progress is not None:
            self.on_progress(progress)
        # hand the interpreter to other threads; ordering is unaffected
        time.sleep(0)

    @staticmethod
    def _goal_found(
        strategy: Strategy,
        arena: PathArena,
        state: SearchState,
        explored: int,
        started: float,
    ) -> SearchResult:
        elapsed = time.perf_counter() - started
        solution = reconstruct(state, arena)
        logger.info(
            f"{strategy} search solved in {len(solution)} moves "
            f"({explored} states, {elapsed:.2f}s)"
        )
        return SearchResult(
            strategy, solution, explored, elapsed, SearchPhase.GOAL_FOUND, state.board
        )

    @staticmethod
    def _exhausted(strategy: Strategy, explored: int, started: float) -> SearchResult:
        elapsed = time.perf_counter() - started
        logger.warning(
            f"{strategy} search found no solution ({explored} states, {elapsed:.2f}s)"
        )
        return SearchResult(strategy, None, explored, elapsed, SearchPhase.EXHAUSTED)


# -- public API ---------------------------------------------------------------


def run_informed_search(board: Board, config: SolverConfig | None = None) -> SearchResult:
    return Solver(config).informed(board)


def run_exhaustive_search(board: Board, config: SolverConfig | None = None) -> SearchResult:
    return Solver(config).exhaustive(board)


def solve_in_background(
    board: Board,
    strategy: Strategy,
    config: SolverConfig | None = None,
    executor: Executor | None = None,
) -> Future[SearchResult]:
    """Start a search on a worker and return its future.

    Abandoning the future does not stop the run; it finishes or hits
    its state cap on its own and the result is simply dropped.
    """
    solver = Solver(config)
    if executor is not None:
        return executor.submit(solver.solve, board, strategy)
    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"{strategy}-search")
    try:
        return pool.submit(solver.solve, board, strategy)
    finally:
        pool.shutdown(wait=False)
