"""Tests for dicegame.core.history – capped newest-first log."""

from __future__ import annotations

from datetime import datetime

import pytest

from dicegame.core.history import HISTORY_CAPACITY, HistoryLog
from dicegame.core.rounds import Condition, RoundRecord


def _record(n: int) -> RoundRecord:
    return RoundRecord(
        id=n,
        threshold=50,
        condition=Condition.MORE,
        roll=n,
        won=n > 50,
        occurred_at=datetime(2024, 1, 1, 12, 0, n % 60),
    )


@pytest.fixture()
def log() -> HistoryLog:
    return HistoryLog()


class TestHistoryLog:
    def test_capacity_is_ten(self):
        assert HISTORY_CAPACITY == 10

    def test_empty(self, log: HistoryLog):
        assert len(log) == 0
        assert log.latest() is None
        assert log.records() == ()

    def test_newest_first(self, log: HistoryLog):
        log.add(_record(1))
        log.add(_record(2))
        assert [r.id for r in log] == [2, 1]
        assert log.latest().id == 2
        assert log[0].id == 2

    def test_length_is_min_of_adds_and_cap(self, log: HistoryLog):
        for n in range(1, 15):
            log.add(_record(n))
            assert len(log) == min(n, HISTORY_CAPACITY)

    def test_eleventh_add_evicts_oldest(self, log: HistoryLog):
        for n in range(1, 12):
            log.add(_record(n))
        ids = [r.id for r in log]
        assert 1 not in ids
        assert ids == list(range(11, 1, -1))

    def test_records_is_snapshot(self, log: HistoryLog):
        log.add(_record(1))
        snap = log.records()
        log.add(_record(2))
        assert [r.id for r in snap] == [1]
