"""Application entry point and setup for the Speedtype typing test."""

import logging
import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from speedtype.core.attempts import AttemptStore
from speedtype.core.passages import PassageRepository
from speedtype.core.settings import SettingsStore
from speedtype.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application, load the passage corpus and history, and show the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Speedtype")
    app.setApplicationDisplayName("Speedtype")

    app_font = QFont()
    app_font.setPointSize(11)
    app.setFont(app_font)

    passages = PassageRepository()
    attempt_store = AttemptStore()
    settings = SettingsStore()
    logging.info("Attempt history file: %s", attempt_store.path)

    window = MainWindow(passages=passages, attempt_store=attempt_store, settings=settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
