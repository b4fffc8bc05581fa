"""Shared fixtures for GUI tests."""

from __future__ import annotations

import os

import pytest
from PyQt6.QtWidgets import QApplication

from gui.settings_manager import SettingsManager
from services.proctor_service import DatabaseProctorProvider, SampleProctorProvider


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication instance for GUI tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.processEvents()
    yield app
    app.processEvents()


@pytest.fixture
def settings_manager(qt_app, session_factory):
    return SettingsManager(session_factory)


@pytest.fixture
def sample_provider():
    return SampleProctorProvider()


@pytest.fixture
def db_provider(session_factory):
    provider = DatabaseProctorProvider(session_factory)
    provider.seed_samples()
    return provider
