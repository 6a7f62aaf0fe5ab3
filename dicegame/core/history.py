from __future__ import annotations

from collections import deque
from typing import Iterator, Optional, Tuple

from dicegame.core.rounds import RoundRecord

HISTORY_CAPACITY = 10


class HistoryLog:
    """Newest-first log of resolved rounds, capped at ``HISTORY_CAPACITY``.

    Adding past capacity drops the oldest record from the tail.
    """

    def __init__(self) -> None:
        self._records: deque[RoundRecord] = deque(maxlen=HISTORY_CAPACITY)

    def add(self, record: RoundRecord) -> None:
        self._records.appendleft(record)

    def latest(self) -> Optional[RoundRecord]:
        """Return the newest record, or None when empty."""
        return self._records[0] if self._records else None

    def records(self) -> Tuple[RoundRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RoundRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> RoundRecord:
        return self._records[index]
