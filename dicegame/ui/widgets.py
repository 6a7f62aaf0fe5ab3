"""Game screen widgets: background, cards, outcome badge, history rows."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QPoint
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QRadialGradient
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from dicegame.ui.colors import GameColors, blend_hex, result_colors
from dicegame.ui.models import HistoryRowState


class CoolBackground(QWidget):
    """Gradient background with a few soft glows and faint dice faces."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        gradient = QLinearGradient(0, 0, self.width(), self.height())
        gradient.setColorAt(0.0, QColor(GameColors.BG_TOP))
        gradient.setColorAt(0.5, QColor(GameColors.BG_MIDDLE))
        gradient.setColorAt(1.0, QColor(GameColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)

        painter.setPen(Qt.NoPen)
        for x_ratio, y_ratio, radius in [(0.85, 0.15, 220), (0.12, 0.82, 170), (0.7, 0.62, 70)]:
            radial = QRadialGradient(self.width() * x_ratio, self.height() * y_ratio, radius)
            radial.setColorAt(0, QColor(255, 255, 255, 60))
            radial.setColorAt(1, QColor(255, 255, 255, 0))
            painter.setBrush(radial)
            painter.drawEllipse(QPoint(int(self.width() * x_ratio), int(self.height() * y_ratio)), radius, radius)

        painter.setOpacity(0.06)
        font = painter.font()
        font.setPointSize(90)
        painter.setFont(font)
        painter.setPen(QColor(GameColors.PRIMARY_DARK))
        for face, x, y in [("⚂", 0.08, 0.25), ("⚄", 0.86, 0.38), ("⚀", 0.14, 0.8), ("⚅", 0.78, 0.86)]:
            painter.drawText(int(self.width() * x), int(self.height() * y), face)


class GlassCard(QFrame):
    """Translucent rounded card used for the two panels."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("glassCard")
        self.setStyleSheet(
            f"""
            QFrame#glassCard {{
                background: {GameColors.CARD_BG};
                border: 1px solid {GameColors.CARD_BORDER};
                border-radius: 20px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 30, 80, 40))
        self.setGraphicsEffect(shadow)


class OutcomeBadge(QLabel):
    """Pill showing win/loss, tinted green or red."""

    def __init__(self, parent: Optional[QWidget] = None, *, small: bool = False) -> None:
        super().__init__(parent)
        self._small = small
        self.setAlignment(Qt.AlignCenter)
        self.setVisible(False)

    def set_outcome(self, won: bool, text: str) -> None:
        light, dark = result_colors(won)
        font_px = 11 if self._small else 15
        padding = "2px 10px" if self._small else "8px 20px"
        self.setText(f"{'✔' if won else '✖'} {text}")
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {blend_hex(light, "#FFFFFF", 0.75)};
                color: {dark};
                border: 1px solid {light};
                border-radius: {10 if self._small else 16}px;
                padding: {padding};
                font-size: {font_px}px;
                font-weight: 700;
            }}
            """
        )
        self.setVisible(True)


class HistoryRowCard(QFrame):
    """One history entry: time and outcome badge on top, round summary below."""

    def __init__(self, row: HistoryRowState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("historyRow")
        background = GameColors.ROW_HIGHLIGHT if row.highlighted else "transparent"
        self.setStyleSheet(
            f"""
            QFrame#historyRow {{
                background: {background};
                border-radius: 8px;
            }}
            """
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(6)

        top = QHBoxLayout()
        time_label = QLabel(row.time_text)
        time_label.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 12px;")
        top.addWidget(time_label)
        top.addStretch(1)
        badge = OutcomeBadge(small=True)
        badge.set_outcome(row.won, row.outcome)
        top.addWidget(badge)
        layout.addLayout(top)

        summary = QLabel(row.summary)
        summary.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 600;")
        summary.setWordWrap(True)
        layout.addWidget(summary)
