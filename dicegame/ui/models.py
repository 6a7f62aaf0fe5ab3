"""Display models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from dicegame.core.rounds import Condition, RoundRecord

CONDITION_LABELS = {
    Condition.MORE: "More",
    Condition.LESS: "Less",
}


def condition_label(condition: Condition) -> str:
    return CONDITION_LABELS[condition]


def outcome_label(won: bool, emphatic: bool = False) -> str:
    if won:
        return "Win!" if emphatic else "Win"
    return "Loss"


@dataclass
class HistoryRowState:
    """UI state for one history row."""

    record_id: int
    time_text: str
    summary: str
    outcome: str
    won: bool
    highlighted: bool = False


def build_history_rows(records: Iterable[RoundRecord]) -> List[HistoryRowState]:
    """Turn newest-first records into row states; the newest row is highlighted."""
    rows: List[HistoryRowState] = []
    for index, record in enumerate(records):
        rows.append(
            HistoryRowState(
                record_id=record.id,
                time_text=record.occurred_at.strftime("%H:%M:%S"),
                summary=(
                    f"Threshold: {record.threshold} | "
                    f"Condition: {condition_label(record.condition)} | "
                    f"Result: {record.roll}"
                ),
                outcome=outcome_label(record.won),
                won=record.won,
                highlighted=index == 0,
            )
        )
    return rows
