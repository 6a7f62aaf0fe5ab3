from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QEventLoop
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from dicegame.core.rounds import Condition, RoundRecord, ValidationError
from dicegame.core.session import GameSession
from dicegame.ui.colors import GameColors, result_colors
from dicegame.ui.models import build_history_rows, condition_label, outcome_label
from dicegame.ui.notice_overlay import ValidationNoticeOverlay
from dicegame.ui.widgets import CoolBackground, GlassCard, HistoryRowCard, OutcomeBadge

logger = logging.getLogger(__name__)

INVALID_THRESHOLD_MESSAGE = "Please enter a number from 1 to 100."


def _toggle_button_style() -> str:
    return f"""
        QPushButton {{
            background: #fafafa;
            color: {GameColors.TEXT_SECONDARY};
            padding: 10px 16px;
            border: 1px solid {GameColors.DIVIDER};
            font-weight: 600;
            font-size: 14px;
        }}
        QPushButton:checked {{
            background: {GameColors.ROW_HIGHLIGHT};
            color: {GameColors.PRIMARY};
            border-color: {GameColors.PRIMARY_LIGHT};
        }}
        QPushButton:disabled {{ color: {GameColors.TEXT_MUTED}; }}
    """


def _play_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {GameColors.PRIMARY_LIGHT}, stop:1 {GameColors.PRIMARY});
            color: white;
            padding: 16px;
            border: none;
            border-radius: 12px;
            font-size: 18px;
            font-weight: 800;
        }}
        QPushButton:hover {{ background: {GameColors.PRIMARY}; }}
        QPushButton:disabled {{ background: #b0b7d6; color: #eef0f8; }}
    """


def _divider() -> QFrame:
    line = QFrame()
    line.setFixedHeight(1)
    line.setStyleSheet(f"background: {GameColors.DIVIDER}; border: none;")
    return line


class MainWindow(QMainWindow):
    """Single game window: settings and result on the left, history on the right.

    The window only renders state owned by :class:`GameSession`; all input is
    routed through the session and the outcome panel is driven by the record
    handed to the engine listener.
    """

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self._session = session
        self._session.engine.add_listener(self._on_round_resolved)

        self._threshold_input: Optional[QLineEdit] = None
        self._condition_group: Optional[QButtonGroup] = None
        self._condition_buttons: dict[Condition, QPushButton] = {}
        self._play_button: Optional[QPushButton] = None
        self._result_section: Optional[QWidget] = None
        self._result_value_label: Optional[QLabel] = None
        self._result_badge: Optional[OutcomeBadge] = None
        self._history_layout: Optional[QVBoxLayout] = None
        self._notice_overlay: Optional[ValidationNoticeOverlay] = None

        self.setWindowTitle("Dice Game")
        self.resize(1100, 720)
        self._build_ui()
        self._refresh_controls()
        self._refresh_history()

    def _build_ui(self) -> None:
        root = CoolBackground()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(32, 24, 32, 32)
        root_layout.setSpacing(24)

        title = QLabel("🎲 Dice Game")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 34px; font-weight: 900;")
        root_layout.addWidget(title)

        panels = QHBoxLayout()
        panels.setSpacing(24)
        panels.addWidget(self._build_game_panel(), 1)
        panels.addWidget(self._build_history_panel(), 1)
        root_layout.addLayout(panels, 1)

        self.setCentralWidget(root)
        self._notice_overlay = ValidationNoticeOverlay(root)

    def _build_game_panel(self) -> QWidget:
        card = GlassCard()
        layout = QVBoxLayout(card)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(16)

        heading = QLabel("Game settings")
        heading.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 20px; font-weight: 800;")
        layout.addWidget(heading)

        self._threshold_input = QLineEdit(self._session.threshold_text)
        self._threshold_input.setPlaceholderText("Enter threshold (1-100)")
        self._threshold_input.setStyleSheet(
            f"""
            QLineEdit {{
                background: white;
                border: 1px solid {GameColors.DIVIDER};
                border-radius: 10px;
                padding: 10px 12px;
                font-size: 16px;
                color: {GameColors.TEXT_PRIMARY};
            }}
            QLineEdit:focus {{ border-color: {GameColors.PRIMARY}; }}
            """
        )
        self._threshold_input.textEdited.connect(self._on_threshold_edited)
        self._threshold_input.returnPressed.connect(self._play)
        layout.addWidget(self._threshold_input)

        condition_caption = QLabel("Condition:")
        condition_caption.setStyleSheet(f"color: {GameColors.TEXT_SECONDARY}; font-size: 14px;")
        layout.addWidget(condition_caption)

        toggle_row = QHBoxLayout()
        toggle_row.setSpacing(0)
        self._condition_group = QButtonGroup(self)
        self._condition_group.setExclusive(True)
        for condition, arrow in ((Condition.MORE, "↑"), (Condition.LESS, "↓")):
            button = QPushButton(f"{arrow} {condition_label(condition)}")
            button.setCheckable(True)
            button.setChecked(condition is self._session.condition)
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setStyleSheet(_toggle_button_style())
            button.clicked.connect(lambda _checked=False, c=condition: self._on_condition_clicked(c))
            self._condition_group.addButton(button)
            self._condition_buttons[condition] = button
            toggle_row.addWidget(button, 1)
        layout.addLayout(toggle_row)

        self._play_button = QPushButton()
        self._play_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._play_button.setStyleSheet(_play_button_style())
        self._play_button.clicked.connect(self._play)
        layout.addWidget(self._play_button)

        self._result_section = QWidget()
        result_layout = QVBoxLayout(self._result_section)
        result_layout.setContentsMargins(0, 12, 0, 0)
        result_layout.setSpacing(8)
        result_layout.addWidget(_divider())
        result_caption = QLabel("Result:")
        result_caption.setAlignment(Qt.AlignCenter)
        result_caption.setStyleSheet(f"color: {GameColors.TEXT_SECONDARY}; font-size: 16px; font-weight: 600;")
        result_layout.addWidget(result_caption)
        self._result_value_label = QLabel("")
        self._result_value_label.setAlignment(Qt.AlignCenter)
        result_layout.addWidget(self._result_value_label)
        self._result_badge = OutcomeBadge()
        result_layout.addWidget(self._result_badge, 0, Qt.AlignCenter)
        self._result_section.setVisible(False)
        layout.addWidget(self._result_section)

        layout.addStretch(1)
        return card

    def _build_history_panel(self) -> QWidget:
        card = GlassCard()
        layout = QVBoxLayout(card)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(12)

        heading = QLabel("Game history")
        heading.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 20px; font-weight: 800;")
        layout.addWidget(heading)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        container = QWidget()
        container.setStyleSheet("background: transparent;")
        container.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self._history_layout = QVBoxLayout(container)
        self._history_layout.setContentsMargins(0, 0, 0, 0)
        self._history_layout.setSpacing(4)
        scroll.setWidget(container)
        layout.addWidget(scroll, 1)
        return card

    def _on_threshold_edited(self, text: str) -> None:
        if not self._session.set_threshold_text(text):
            self._threshold_input.setText(self._session.threshold_text)
        self._refresh_controls()

    def _on_condition_clicked(self, condition: Condition) -> None:
        self._session.set_condition(condition)
        self._refresh_controls()

    def _play(self) -> None:
        """Start a round from the current inputs, or explain why it cannot start."""
        if self._session.engine.is_rolling:
            return
        try:
            self._session.play()
        except ValidationError as e:
            logger.info("Round not started: %s", e)
            self._show_notice(INVALID_THRESHOLD_MESSAGE)
            return
        self._refresh_controls()

    def _on_round_resolved(self, record: RoundRecord) -> None:
        self._show_result(record)
        self._refresh_history()
        self._refresh_controls()

    def _show_result(self, record: RoundRecord) -> None:
        _, dark = result_colors(record.won)
        self._result_value_label.setText(str(record.roll))
        self._result_value_label.setStyleSheet(f"color: {dark}; font-size: 56px; font-weight: 900;")
        self._result_badge.set_outcome(record.won, outcome_label(record.won, emphatic=True))
        self._result_section.setVisible(True)

    def _refresh_controls(self) -> None:
        rolling = self._session.engine.is_rolling
        self._threshold_input.setEnabled(not rolling)
        for condition, button in self._condition_buttons.items():
            button.setEnabled(not rolling)
            button.setChecked(condition is self._session.condition)
        self._play_button.setEnabled(self._session.can_play)
        self._play_button.setText("Rolling..." if rolling else "🎲 Play")

    def _refresh_history(self) -> None:
        """Rebuild the history list from the engine's log."""
        layout = self._history_layout
        while layout.count():
            item = layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()

        rows = build_history_rows(self._session.engine.history)
        if not rows:
            empty = QLabel("No games yet. Play your first round!")
            empty.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 14px;")
            empty.setWordWrap(True)
            layout.addWidget(empty)
        for idx, row in enumerate(rows):
            layout.addWidget(HistoryRowCard(row))
            if idx < len(rows) - 1:
                layout.addWidget(_divider())
        layout.addStretch(1)

    def _show_notice(self, message: str) -> None:
        """Show the validation notice and block until it is dismissed."""
        overlay = self._notice_overlay
        overlay.set_message(message)
        overlay.setGeometry(self.centralWidget().rect())
        overlay.raise_()
        overlay.show()
        loop = QEventLoop()
        overlay.closed.connect(loop.quit)
        loop.exec()
        overlay.closed.disconnect(loop.quit)
        if self._threshold_input is not None:
            self._threshold_input.setFocus()
