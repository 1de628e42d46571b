"""Solver settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_STATES = 100_000_000
DEFAULT_YIELD_EVERY = 1000


@dataclass(frozen=True)
class SolverConfig:
    """Budget and tuning knobs shared by both search strategies.

    ``max_states`` caps the number of dequeued states per run.
    ``yield_every`` is the dequeue interval between cooperative
    checkpoints.  The two penalties weight blocking pieces in the
    informed-search estimate.
    """

    max_states: int = DEFAULT_MAX_STATES
    yield_every: int = DEFAULT_YIELD_EVERY
    upward_blocker_penalty: int = 1
    path_blocker_penalty: int = 1

    def __post_init__(self) -> None:
        if self.max_states < 1:
            raise ValueError(f"max_states must be positive, got {self.max_states}")
        if self.yield_every < 1:
            raise ValueError(f"yield_every must be positive, got {self.yield_every}")
        if self.upward_blocker_penalty < 0 or self.path_blocker_penalty < 0:
            raise ValueError("blocker penalties must be non-negative")

    @classmethod
    def from_env(cls) -> SolverConfig:
        return cls(
            max_states=int(os.getenv("PUZZLE_MAX_STATES", DEFAULT_MAX_STATES)),
            yield_every=int(os.getenv("PUZZLE_YIELD_EVERY", DEFAULT_YIELD_EVERY)),
        )
