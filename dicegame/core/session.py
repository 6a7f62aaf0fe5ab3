from __future__ import annotations

from typing import Optional, Union

from dicegame.core.engine import RoundEngine
from dicegame.core.rounds import Condition, ValidationError, parse_threshold


class GameSession:
    """In-memory state behind the game view: inputs plus the round engine.

    Threshold edits follow the input filter of the entry box: the text may be
    cleared, and otherwise an edit is kept only when it reads as a plain whole
    number within 1..100. Rejected edits leave the previous text in place.
    """

    def __init__(
        self,
        engine: RoundEngine,
        threshold_text: str = "50",
        condition: Union[Condition, str] = Condition.MORE,
    ) -> None:
        self._engine = engine
        self._threshold_text = threshold_text
        self._condition = Condition.coerce(condition)

    @property
    def engine(self) -> RoundEngine:
        return self._engine

    @property
    def threshold_text(self) -> str:
        return self._threshold_text

    @property
    def condition(self) -> Condition:
        return self._condition

    @property
    def can_play(self) -> bool:
        """False while rolling or while the threshold box is empty."""
        return not self._engine.is_rolling and bool(self._threshold_text.strip())

    def set_threshold_text(self, text: str) -> bool:
        """Accept *text* if empty or a plain whole number within 1..100."""
        if text != "":
            try:
                parse_threshold(text)
            except ValidationError:
                return False
        self._threshold_text = text
        return True

    def set_condition(self, condition: Optional[Union[Condition, str]]) -> bool:
        """Switch condition; None (toggle deselected) keeps the current one."""
        if condition is None:
            return False
        self._condition = Condition.coerce(condition)
        return True

    def play(self) -> bool:
        """Start a round with the current inputs. ValidationError propagates."""
        return self._engine.start_round(self._threshold_text, self._condition)
