"""
Proctor Lab - Main Entry Point

A desktop dashboard for soil proctor (compaction) test records.
"""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication

from database.base import create_app_engine, dispose_all_engines
from database.session import build_session_factory
from gui.main_window import MainWindow
from gui.settings_manager import SettingsManager
from gui.styles import get_stylesheet
from services.proctor_service import DatabaseProctorProvider
from utils.env import is_dev_mode
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    log_file = setup_logging(logging.DEBUG if is_dev_mode() else logging.INFO)
    logger.info("Starting Proctor Lab", extra={"event": "startup", "log_file": str(log_file)})

    # Initialize database (create tables if they don't exist)
    engine = create_app_engine()
    session_factory = build_session_factory(engine)

    # Create Qt application
    app = QApplication(sys.argv)
    app.setApplicationName("Proctor Lab")
    app.setOrganizationName("ProctorLab")

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    font = QFont("Segoe UI", 10)
    app.setFont(font)
    app.setStyleSheet(get_stylesheet())

    settings = SettingsManager(session_factory)
    provider = DatabaseProctorProvider(session_factory)
    provider.seed_samples()

    window = MainWindow(settings, provider)
    window.showMaximized()

    exit_code = app.exec()
    dispose_all_engines()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
