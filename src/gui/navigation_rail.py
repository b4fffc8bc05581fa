"""Collapsible navigation rail on the left edge of the main window."""

from __future__ import annotations

from typing import Dict, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFrame, QPushButton, QVBoxLayout, QWidget

SCREEN_PROJECTS = "Projects"
SCREEN_MATERIALS_TESTING = "MaterialsTesting"

# (screen id, full label, collapsed label)
NAV_ITEMS = (
    (SCREEN_PROJECTS, "Projects", "P"),
    (SCREEN_MATERIALS_TESTING, "Materials Testing", "MT"),
)

EXPANDED_WIDTH = 200
COLLAPSED_WIDTH = 56


class NavigationRail(QFrame):
    """Vertical list of screen buttons that can collapse to short labels."""

    screen_selected = pyqtSignal(str)

    def __init__(self, current_screen: str = SCREEN_MATERIALS_TESTING, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("navigationRail")
        self._expanded = True
        self._current_screen = current_screen
        self.buttons: Dict[str, QPushButton] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 12, 8, 12)
        layout.setSpacing(4)

        for screen, label, _short in NAV_ITEMS:
            button = QPushButton(label)
            button.setObjectName("railButton")
            button.setCheckable(True)
            button.setAutoExclusive(True)
            button.setToolTip(label)
            button.clicked.connect(lambda _, s=screen: self.select_screen(s))
            layout.addWidget(button)
            self.buttons[screen] = button

        layout.addStretch()
        self._apply_state()

    @property
    def is_expanded(self) -> bool:
        return self._expanded

    @property
    def current_screen(self) -> str:
        return self._current_screen

    def toggle(self) -> None:
        self.set_expanded(not self._expanded)

    def set_expanded(self, expanded: bool) -> None:
        self._expanded = expanded
        self._apply_state()

    def select_screen(self, screen: str) -> None:
        if screen not in self.buttons:
            return
        changed = screen != self._current_screen
        self._current_screen = screen
        self._apply_state()
        if changed:
            self.screen_selected.emit(screen)

    def _apply_state(self) -> None:
        self.setFixedWidth(EXPANDED_WIDTH if self._expanded else COLLAPSED_WIDTH)
        for screen, label, short in NAV_ITEMS:
            button = self.buttons[screen]
            button.setText(label if self._expanded else short)
            button.setChecked(screen == self._current_screen)
