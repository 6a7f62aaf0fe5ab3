"""Shared fixtures: a manual scheduler and scripted random draws."""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

import pytest

from dicegame.core.engine import RoundEngine


class ManualScheduler:
    """Collects deferred callbacks so tests decide when a roll lands."""

    def __init__(self) -> None:
        self.pending: List[Tuple[int, Callable[[], None]]] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending.append((delay_ms, callback))

    def fire(self) -> None:
        _, callback = self.pending.pop(0)
        callback()


def draw_for(roll: int) -> float:
    """Uniform draw that lands on *roll*."""
    return (roll - 0.5) / 100


def scripted(rolls: Iterable[int]) -> Callable[[], float]:
    draws = iter([draw_for(r) for r in rolls])
    return lambda: next(draws)


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def make_engine(scheduler: ManualScheduler):
    """Build a RoundEngine whose rolls come from the given list."""

    def _make(rolls: Iterable[int] = (), **kwargs) -> RoundEngine:
        return RoundEngine(scheduler, random_source=scripted(rolls), **kwargs)

    return _make
