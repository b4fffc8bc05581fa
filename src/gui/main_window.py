"""Main application window."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QDialog,
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from config.layout_config import (
    BOTTOM_HORIZONTAL_SPLIT,
    MAIN_SPLIT,
    RIGHT_VERTICAL_SPLIT,
    TOP_HORIZONTAL_SPLIT,
    DividerConfig,
)
from layout.split_resizer import Orientation
from services.export_service import export_proctors
from services.proctor_service import ProctorProvider
from utils.error_handling import format_error_message, log_exception

from .controllers.lab_controller import MaterialsLabController
from .controllers.proctor_detail_controller import ProctorDetailController
from .create_proctor_dialog import CreateProctorDialog
from .navigation_rail import SCREEN_MATERIALS_TESTING, SCREEN_PROJECTS, NavigationRail
from .proctor_chart_widget import ProctorChartWidget
from .proctor_detail_widget import ProctorDetailWidget
from .proctor_list_widget import ProctorListWidget
from .settings_manager import SettingsStore
from .split_pane import SplitPaneWidget

logger = logging.getLogger(__name__)

APP_TITLE = "Proctor Lab"


def _placeholder(text: str) -> QLabel:
    label = QLabel(text)
    label.setObjectName("panelPlaceholder")
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label


class MainWindow(QMainWindow):
    """Top bar, navigation rail and a four-panel layout of persisted split panes."""

    def __init__(self, settings: SettingsStore, provider: ProctorProvider):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(QSize(1000, 700))
        self.setObjectName("mainWindow")

        self.settings = settings
        self.provider = provider
        self.lab_controller = MaterialsLabController(provider)
        self.detail_controller = ProctorDetailController(provider)
        self.split_panes: Dict[str, SplitPaneWidget] = {}

        self._create_central_widget()
        self._create_status_bar()
        self._show_screen(self.navigation_rail.current_screen)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _create_central_widget(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._create_top_bar(layout)

        body = QHBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(0)

        self.navigation_rail = NavigationRail(SCREEN_MATERIALS_TESTING)
        self.navigation_rail.screen_selected.connect(self._show_screen)
        body.addWidget(self.navigation_rail)
        body.addWidget(self._build_panel_layout(), stretch=1)

        layout.addLayout(body, stretch=1)

    def _create_top_bar(self, container_layout: QVBoxLayout):
        top_bar = QFrame()
        top_bar.setObjectName("topBar")
        top_bar.setFixedHeight(56)
        bar_layout = QHBoxLayout(top_bar)
        bar_layout.setContentsMargins(8, 4, 16, 4)
        bar_layout.setSpacing(12)

        self.rail_toggle = QPushButton("☰")
        self.rail_toggle.setObjectName("railToggle")
        self.rail_toggle.setToolTip("Toggle navigation rail")
        self.rail_toggle.clicked.connect(self._toggle_rail)
        bar_layout.addWidget(self.rail_toggle)

        title = QLabel(APP_TITLE)
        title.setObjectName("topBarTitle")
        bar_layout.addWidget(title)
        bar_layout.addStretch()

        container_layout.addWidget(top_bar)

    def _create_status_bar(self):
        self.statusBar().showMessage("Ready")

    def _build_panel_layout(self) -> QWidget:
        # Left pane: screen-specific list
        self.proctor_list = ProctorListWidget(self.lab_controller)
        self.proctor_list.proctor_selected.connect(self._on_proctor_selected)
        self.proctor_list.create_requested.connect(self._create_proctor)
        self.proctor_list.export_requested.connect(self._export_proctors)

        self.left_stack = QStackedWidget()
        self.projects_placeholder = _placeholder("Projects List")
        self.left_stack.addWidget(self.projects_placeholder)
        self.left_stack.addWidget(self.proctor_list)

        # Top-left: selection detail
        self.detail_widget = ProctorDetailWidget(self.detail_controller)
        self.detail_stack = QStackedWidget()
        self.detail_placeholder = _placeholder("Select a screen from the navigation rail")
        self.detail_stack.addWidget(self.detail_placeholder)
        self.detail_stack.addWidget(self.detail_widget)

        # Top-right: overview chart
        self.chart_widget = ProctorChartWidget()
        self.chart_widget.load_proctors(self.lab_controller.proctors)

        top_split = self._split(
            TOP_HORIZONTAL_SPLIT, Orientation.HORIZONTAL, self.detail_stack, self.chart_widget
        )
        bottom_split = self._split(
            BOTTOM_HORIZONTAL_SPLIT,
            Orientation.HORIZONTAL,
            _placeholder("Panel 3: Bottom-Left"),
            _placeholder("Panel 4: Bottom-Right"),
        )
        right_split = self._split(RIGHT_VERTICAL_SPLIT, Orientation.VERTICAL, top_split, bottom_split)
        return self._split(MAIN_SPLIT, Orientation.HORIZONTAL, self.left_stack, right_split)

    def _split(
        self,
        divider: DividerConfig,
        orientation: Orientation,
        first: QWidget,
        second: QWidget,
    ) -> SplitPaneWidget:
        pane = SplitPaneWidget(
            orientation,
            first,
            second,
            settings=self.settings,
            settings_key=divider.key,
            default_fraction=divider.default_fraction,
        )
        self.split_panes[divider.key] = pane
        return pane

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def persist_layout(self) -> None:
        """Write every divider position to settings."""
        for pane in self.split_panes.values():
            pane.persist()
        logger.info("Saved layout", extra={"event": "layout_saved", "dividers": len(self.split_panes)})

    def refresh_proctors(self) -> None:
        self.lab_controller.refresh()
        self.proctor_list.refresh()
        self.chart_widget.load_proctors(self.lab_controller.proctors)
        self.chart_widget.set_selected(self.lab_controller.state.selected_id)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def closeEvent(self, event):
        self.persist_layout()
        super().closeEvent(event)

    def _toggle_rail(self):
        self.navigation_rail.toggle()

    def _show_screen(self, screen: str):
        if screen == SCREEN_PROJECTS:
            self.left_stack.setCurrentWidget(self.projects_placeholder)
            self.detail_stack.setCurrentWidget(self.detail_placeholder)
        else:
            self.left_stack.setCurrentWidget(self.proctor_list)
            self.detail_stack.setCurrentWidget(self.detail_widget)
        self.statusBar().showMessage(f"Screen: {screen}", 3000)

    def _on_proctor_selected(self, proctor_id: str):
        proctor = self.detail_widget.load_proctor(proctor_id)
        self.chart_widget.set_selected(proctor_id if proctor else None)
        if proctor is not None:
            self.statusBar().showMessage(f"Selected {proctor.sample_id}", 3000)

    def _create_proctor(self):
        if not hasattr(self.provider, "create"):
            QMessageBox.information(self, "Read Only", "This data source does not accept new tests.")
            return

        dialog = CreateProctorDialog(self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return

        try:
            proctor = self.provider.create(**dialog.get_proctor_data())
        except ValueError as exc:
            QMessageBox.warning(self, "Invalid Proctor Test", str(exc))
            return
        except Exception as exc:
            log_exception(exc, "Failed to create proctor test")
            QMessageBox.critical(self, "Error", format_error_message(exc, "Failed to create proctor test"))
            return

        self.refresh_proctors()
        self.proctor_list.select_proctor(proctor.id)
        self.statusBar().showMessage(f"Created {proctor.id}", 3000)

    def _export_proctors(self):
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Soil Proctors",
            "soil_proctors.xlsx",
            "Excel Files (*.xlsx);;CSV Files (*.csv)",
        )
        if not path:
            return

        proctors = self.lab_controller.filtered_proctors()
        try:
            written = export_proctors(proctors, Path(path))
        except Exception as exc:
            log_exception(exc, "Export failed")
            QMessageBox.critical(self, "Export Failed", format_error_message(exc, "Export failed"))
            return
        self.statusBar().showMessage(f"Exported {len(proctors)} tests to {written}", 5000)

    def current_screen(self) -> Optional[str]:
        return self.navigation_rail.current_screen
