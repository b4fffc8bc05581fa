"""Two-pane container with a draggable divider.

The divider position is owned by a ``SplitPaneResizer``; this widget only
translates mouse drags on the handle into cumulative deltas and lays out the
two panes from the resulting fraction.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QCursor
from PyQt6.QtWidgets import QFrame, QSizePolicy, QWidget

from config.layout_config import DEFAULT_SPLIT_FRACTION, SPLIT_HANDLE_WIDTH
from gui.settings_manager import SettingsStore
from layout.split_resizer import DragSession, Orientation, SplitPaneResizer

logger = logging.getLogger(__name__)


class SplitHandle(QFrame):
    """Divider strip that reports drag displacement since mouse press."""

    drag_started = pyqtSignal()
    drag_moved = pyqtSignal(float, float)  # cumulative (dx, dy)
    drag_finished = pyqtSignal()

    def __init__(self, orientation: Orientation, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.orientation = orientation
        self.setObjectName("splitHandle")
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setCursor(QCursor(
            Qt.CursorShape.SplitHCursor
            if orientation is Orientation.HORIZONTAL
            else Qt.CursorShape.SplitVCursor
        ))
        self._press_pos: Optional[QPointF] = None

    @property
    def is_pressed(self) -> bool:
        return self._press_pos is not None

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._press_pos = event.globalPosition()
        self.drag_started.emit()
        event.accept()

    def mouseMoveEvent(self, event):
        if self._press_pos is None:
            super().mouseMoveEvent(event)
            return
        delta = event.globalPosition() - self._press_pos
        self.drag_moved.emit(delta.x(), delta.y())
        event.accept()

    def mouseReleaseEvent(self, event):
        if self._press_pos is None or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._press_pos = None
        self.drag_finished.emit()
        event.accept()


class SplitPaneWidget(QWidget):
    """Horizontal (side by side) or vertical (stacked) split pane.

    Signals:
        split_changed(float): fraction changed, emitted on every drag update
        split_committed(float): drag released; the fraction to persist
    """

    split_changed = pyqtSignal(float)
    split_committed = pyqtSignal(float)

    def __init__(
        self,
        orientation: Orientation,
        first: QWidget,
        second: QWidget,
        split_fraction: Optional[float] = None,
        settings: Optional[SettingsStore] = None,
        settings_key: Optional[str] = None,
        default_fraction: float = DEFAULT_SPLIT_FRACTION,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.orientation = orientation
        self._settings = settings
        self._settings_key = settings_key
        self._session: Optional[DragSession] = None

        if split_fraction is None:
            split_fraction = (
                settings.get_float(settings_key, default_fraction)
                if settings is not None and settings_key
                else default_fraction
            )

        self.resizer = SplitPaneResizer(
            initial_fraction=split_fraction,
            orientation=orientation,
            on_change=self._on_fraction_changed,
        )

        self.first = first
        self.second = second
        self.handle = SplitHandle(orientation, self)
        for pane in (self.first, self.second):
            # setParent() hides the widget; re-show so it follows our visibility
            pane.setParent(self)
            pane.show()

        self.handle.drag_started.connect(self.begin_drag)
        self.handle.drag_moved.connect(self.drag_by)
        self.handle.drag_finished.connect(self.end_drag)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._layout_children()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def fraction(self) -> float:
        return self.resizer.fraction

    @property
    def settings_key(self) -> Optional[str]:
        return self._settings_key

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    def set_fraction(self, value: float) -> float:
        return self.resizer.set_fraction(value)

    def container_extent(self) -> int:
        """Size of this container along the split axis."""
        return self.width() if self.orientation is Orientation.HORIZONTAL else self.height()

    def begin_drag(self) -> None:
        self._session = self.resizer.begin_drag(self.resizer.fraction, self.container_extent())

    def drag_by(self, dx: float, dy: float) -> float:
        """Apply the cumulative pointer displacement since ``begin_drag``."""
        if self._session is None:
            return self.resizer.fraction
        return self.resizer.update_drag_xy(self._session, dx, dy)

    def end_drag(self) -> None:
        if self._session is None:
            return
        fraction = self.resizer.end_drag(self._session)
        self._session = None
        self.persist()
        self.split_committed.emit(fraction)

    def persist(self) -> None:
        """Write the current fraction to the settings store, if one is bound."""
        if self._settings is None or not self._settings_key:
            return
        self._settings.set_float(self._settings_key, self.resizer.fraction)
        logger.debug("Persisted %s=%.4f", self._settings_key, self.resizer.fraction)

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._layout_children()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _on_fraction_changed(self, value: float) -> None:
        self._layout_children()
        self.split_changed.emit(value)

    def _layout_children(self) -> None:
        extent = self.container_extent()
        available = max(extent - SPLIT_HANDLE_WIDTH, 0)
        first_size = int(round(available * self.resizer.fraction))
        second_start = first_size + SPLIT_HANDLE_WIDTH
        second_size = max(extent - second_start, 0)

        if self.orientation is Orientation.HORIZONTAL:
            height = self.height()
            self.first.setGeometry(0, 0, first_size, height)
            self.handle.setGeometry(first_size, 0, SPLIT_HANDLE_WIDTH, height)
            self.second.setGeometry(second_start, 0, second_size, height)
        else:
            width = self.width()
            self.first.setGeometry(0, 0, width, first_size)
            self.handle.setGeometry(0, first_size, width, SPLIT_HANDLE_WIDTH)
            self.second.setGeometry(0, second_start, width, second_size)
