from __future__ import annotations

import logging
import random
import time
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Union

from dicegame.core.history import HistoryLog
from dicegame.core.rounds import (
    Condition,
    RoundRecord,
    draw_roll,
    is_win,
    parse_threshold,
)

logger = logging.getLogger(__name__)

DEFAULT_ROLL_DELAY_MS = 1000

Scheduler = Callable[[int, Callable[[], None]], None]
RoundListener = Callable[[RoundRecord], None]


class EngineState(str, Enum):
    IDLE = "idle"
    ROLLING = "rolling"


class RoundEngine:
    """Runs one dice round at a time and keeps the bounded history.

    A round is started with :meth:`start_round`, which validates the input,
    switches to ``ROLLING`` and asks *scheduler* to call back after
    ``roll_delay_ms``. The callback draws the roll, records the outcome,
    returns to ``IDLE`` and notifies listeners with the new record.

    *scheduler* has the same shape as ``QTimer.singleShot(msec, callable)``;
    the view passes that directly, tests pass a fake that holds callbacks.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        roll_delay_ms: int = DEFAULT_ROLL_DELAY_MS,
        random_source: Callable[[], float] = random.random,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._scheduler = scheduler
        self._roll_delay_ms = max(0, int(roll_delay_ms))
        self._random_source = random_source
        self._clock = clock
        self._state = EngineState.IDLE
        self._history = HistoryLog()
        self._last_record: Optional[RoundRecord] = None
        self._last_id = 0
        self._listeners: List[RoundListener] = []

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_rolling(self) -> bool:
        return self._state is EngineState.ROLLING

    @property
    def roll_delay_ms(self) -> int:
        return self._roll_delay_ms

    @property
    def history(self) -> HistoryLog:
        return self._history

    @property
    def last_record(self) -> Optional[RoundRecord]:
        """Record produced by the most recent resolution, None before the first."""
        return self._last_record

    def add_listener(self, listener: RoundListener) -> None:
        """Register *listener* to be called with each newly resolved record."""
        self._listeners.append(listener)

    def start_round(self, threshold: str, condition: Union[Condition, str]) -> bool:
        """Validate input and schedule the roll.

        Returns False without validating when a round is already rolling.
        Raises ValidationError for a bad threshold or condition.
        """
        if self._state is EngineState.ROLLING:
            logger.warning("Round already in progress; ignoring start request")
            return False
        value = parse_threshold(threshold)
        cond = Condition.coerce(condition)
        self._state = EngineState.ROLLING
        logger.debug("Rolling against %s %d", cond.value, value)
        try:
            self._scheduler(self._roll_delay_ms, lambda: self._resolve(value, cond))
        except Exception:
            self._state = EngineState.IDLE
            raise
        return True

    def _resolve(self, threshold: int, condition: Condition) -> None:
        roll = draw_roll(self._random_source)
        stamp = int(self._clock())
        record = RoundRecord(
            id=self._next_id(stamp),
            threshold=threshold,
            condition=condition,
            roll=roll,
            won=is_win(threshold, condition, roll),
            occurred_at=datetime.fromtimestamp(stamp / 1_000_000_000),
        )
        self._history.add(record)
        self._last_record = record
        self._state = EngineState.IDLE
        logger.info(
            "Rolled %d against %s %d: %s",
            roll,
            condition.value,
            threshold,
            "win" if record.won else "loss",
        )
        for listener in list(self._listeners):
            listener(record)

    def _next_id(self, stamp: int) -> int:
        self._last_id = max(stamp, self._last_id + 1)
        return self._last_id
