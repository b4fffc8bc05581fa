"""Detail panel for the selected soil proctor test."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from gui.controllers.proctor_detail_controller import ProctorDetailController
from gui.proctor_list_widget import create_status_chip
from services.proctor_models import SoilProctor

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No soil proctor selected"

# (attribute, label) pairs shown in the field grid
DETAIL_FIELDS = (
    ("project_name", "Project"),
    ("sample_id", "Sample ID"),
    ("date", "Test Date"),
    ("location", "Location"),
    ("test_method", "Test Method"),
    ("technician", "Technician"),
)


class MetricCard(QFrame):
    """Small card with a caption and a large value."""

    def __init__(self, caption: str, unit: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("metricCard")
        self.unit = unit

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(4)

        label = QLabel(caption)
        label.setObjectName("metricLabel")
        layout.addWidget(label)

        self.value_label = QLabel("-")
        self.value_label.setObjectName("metricValue")
        layout.addWidget(self.value_label)

    def set_value(self, value: float) -> None:
        self.value_label.setText(f"{value:.1f} {self.unit}")


class ProctorDetailWidget(QWidget):
    """Empty, error and loaded states for one proctor."""

    def __init__(self, controller: ProctorDetailController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.field_labels: Dict[str, QLabel] = {}
        self.setup_ui()
        self.show_empty()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.stack = QStackedWidget()
        layout.addWidget(self.stack)

        self.empty_label = QLabel(EMPTY_MESSAGE)
        self.empty_label.setObjectName("panelPlaceholder")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.empty_label)

        self.error_label = QLabel()
        self.error_label.setObjectName("panelError")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.stack.addWidget(self.error_label)

        self.detail_page = QWidget()
        self.stack.addWidget(self.detail_page)
        self._build_detail_page(self.detail_page)

    def _build_detail_page(self, page: QWidget) -> None:
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        header = QHBoxLayout()
        self.title_label = QLabel()
        self.title_label.setObjectName("panelHeadline")
        header.addWidget(self.title_label, stretch=1)
        self.chip_container = QHBoxLayout()
        header.addLayout(self.chip_container)
        layout.addLayout(header)

        metrics = QHBoxLayout()
        self.mdd_card = MetricCard("Maximum Dry Density", "pcf")
        self.omc_card = MetricCard("Optimum Moisture Content", "%")
        metrics.addWidget(self.mdd_card)
        metrics.addWidget(self.omc_card)
        layout.addLayout(metrics)

        grid = QGridLayout()
        grid.setHorizontalSpacing(24)
        grid.setVerticalSpacing(8)
        for row, (attribute, caption) in enumerate(DETAIL_FIELDS):
            caption_label = QLabel(caption)
            caption_label.setObjectName("metricLabel")
            value_label = QLabel()
            value_label.setObjectName("detailField")
            value_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            grid.addWidget(caption_label, row, 0)
            grid.addWidget(value_label, row, 1)
            self.field_labels[attribute] = value_label
        layout.addLayout(grid)
        layout.addStretch()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load_proctor(self, proctor_id: str) -> Optional[SoilProctor]:
        proctor = self.controller.load_proctor(proctor_id)
        if proctor is not None:
            self._populate(proctor)
        elif self.controller.error_message:
            self.show_error(self.controller.error_message)
        else:
            self.show_empty()
        return proctor

    def clear(self) -> None:
        self.controller.clear_proctor()
        self.show_empty()

    def show_empty(self) -> None:
        self.stack.setCurrentWidget(self.empty_label)

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.stack.setCurrentWidget(self.error_label)

    def field_text(self, attribute: str) -> str:
        return self.field_labels[attribute].text()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _populate(self, proctor: SoilProctor) -> None:
        self.title_label.setText(f"{proctor.sample_id} · {proctor.project_name}")

        while self.chip_container.count():
            item = self.chip_container.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        self.chip_container.addWidget(create_status_chip(proctor.status))

        self.mdd_card.set_value(proctor.max_dry_density)
        self.omc_card.set_value(proctor.optimum_moisture_content)
        for attribute, label in self.field_labels.items():
            label.setText(str(getattr(proctor, attribute) or "-"))

        self.stack.setCurrentWidget(self.detail_page)
