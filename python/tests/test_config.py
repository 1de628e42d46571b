from __future__ import annotations

import pytest

from backend.config import DEFAULT_MAX_STATES, DEFAULT_YIELD_EVERY, SolverConfig


def test_defaults() -> None:
    config = SolverConfig()
    assert config.max_states == DEFAULT_MAX_STATES == 100_000_000
    assert config.yield_every == DEFAULT_YIELD_EVERY == 1000
    assert config.upward_blocker_penalty == config.path_blocker_penalty == 1


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUZZLE_MAX_STATES", "250")
    monkeypatch.setenv("PUZZLE_YIELD_EVERY", "25")
    config = SolverConfig.from_env()
    assert (config.max_states, config.yield_every) == (250, 25)


def test_from_env_without_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PUZZLE_MAX_STATES", raising=False)
    monkeypatch.delenv("PUZZLE_YIELD_EVERY", raising=False)
    assert SolverConfig.from_env() == SolverConfig()


@pytest.mark.parametrize(
    "kwargs",
    [{"max_states": 0}, {"yield_every": 0}, {"upward_blocker_penalty": -1}, {"path_blocker_penalty": -1}],
)
def test_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)
