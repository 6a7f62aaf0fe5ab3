"""Application entry point and setup for the dice game."""

import logging
import sys

from PySide6.QtCore import QTimer
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from dicegame.core.engine import RoundEngine
from dicegame.core.session import GameSession
from dicegame.core.settings import load_settings
from dicegame.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_application_font(app: QApplication) -> None:
    """Use the platform UI font with emoji fallbacks so the dice glyphs render."""
    app_font = QFont(app.font())
    app_font.setFamilies(
        [
            app_font.family(),
            "Noto Color Emoji",  # Linux (common)
            "Segoe UI Emoji",  # Windows
            "Apple Color Emoji",  # macOS
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)
    QGuiApplication.setFont(app_font)


def build_session() -> GameSession:
    """Create the game session wired to Qt's single-shot timer."""
    settings = load_settings()
    logging.info("Roll delay: %d ms", settings.roll_delay_ms)
    engine = RoundEngine(QTimer.singleShot, roll_delay_ms=settings.roll_delay_ms)
    return GameSession(
        engine,
        threshold_text=settings.default_threshold,
        condition=settings.default_condition,
    )


def run() -> None:
    """Initialize the application and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Dice Game")
    app.setApplicationDisplayName("Dice Game")

    load_application_font(app)

    window = MainWindow(session=build_session())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
