"""Persistent application settings backed by the settings table."""

from __future__ import annotations

import logging
import math
from typing import Dict, Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from database.repositories import SettingsRepository
from database.session import SessionFactory, session_scope
from utils.error_handling import safe_operation

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Minimal interface used by split panes and other settings consumers."""

    def get_float(self, key: str, default: float) -> float:
        ...

    def set_float(self, key: str, value: float) -> None:
        ...

    def get_string(self, key: str, default: str = "") -> str:
        ...

    def set_string(self, key: str, value: str) -> None:
        ...


class SettingsManager(QObject):
    """Settings cache with write-through persistence.

    Constructed once at startup and passed to the widgets that need it.
    """

    # Signal emitted when any setting changes
    settings_changed = pyqtSignal(str, object)  # (setting_name, new_value)

    def __init__(self, session_factory: SessionFactory, parent=None):
        super().__init__(parent)
        self._session_factory = session_factory
        self._values: Dict[str, str] = {}
        self._load_settings()

    def _load_settings(self):
        """Load all stored settings into the cache."""
        loaded = safe_operation(self._read_all, "Failed to load settings", default={})
        self._values.update(loaded)
        logger.debug("Loaded %d settings", len(loaded))

    def _read_all(self) -> Dict[str, str]:
        with session_scope(self._session_factory) as session:
            return SettingsRepository(session).as_dict()

    def _save_setting(self, key: str, value: str) -> bool:
        def _write():
            with session_scope(self._session_factory) as session:
                SettingsRepository(session).upsert(key, value)
            return True

        return bool(safe_operation(_write, f"Failed to save setting '{key}'", default=False))

    # ------------------------------------------------------------------
    # String values
    # ------------------------------------------------------------------

    def get_string(self, key: str, default: str = "") -> str:
        """Get a setting value as a string."""
        return self._values.get(key, default)

    def set_string(self, key: str, value: str) -> None:
        """Set a setting value and emit change signal."""
        value = str(value)
        if self._values.get(key) == value:
            return
        self._values[key] = value
        self._save_setting(key, value)
        self.settings_changed.emit(key, value)

    # ------------------------------------------------------------------
    # Float values
    # ------------------------------------------------------------------

    def get_float(self, key: str, default: float) -> float:
        """Get a setting as a float; missing or unparsable values give ``default``."""
        raw = self._values.get(key)
        if raw is None:
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric setting %s=%r", key, raw)
            return default
        if not math.isfinite(value):
            return default
        return value

    def set_float(self, key: str, value: float) -> None:
        """Set a float setting and emit change signal."""
        value = float(value)
        if self._values.get(key) == repr(value):
            return
        self._values[key] = repr(value)
        self._save_setting(key, repr(value))
        self.settings_changed.emit(key, value)

    def keys(self) -> list[str]:
        return sorted(self._values)
