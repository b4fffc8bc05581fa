"""Searchable list of soil proctor tests."""

from __future__ import annotations

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from gui.controllers.lab_controller import MaterialsLabController
from gui.design_tokens import status_colors
from gui.styles import status_chip_style
from services.proctor_models import SoilProctor

logger = logging.getLogger(__name__)

PROCTOR_ID_ROLE = Qt.ItemDataRole.UserRole


def create_status_chip(status: str) -> QLabel:
    chip = QLabel(status)
    chip.setObjectName("statusChip")
    chip.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
    chip.setStyleSheet(status_chip_style(*status_colors(status)))
    return chip


class ProctorRowWidget(QFrame):
    """Two-column summary of one proctor inside the list."""

    def __init__(self, proctor: SoilProctor, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.proctor = proctor
        self.setStyleSheet("background-color: transparent;")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(4)

        rows = [
            (proctor.project_name, proctor.sample_id, "proctorRowTitle"),
            (f"Location: {proctor.location}", proctor.date, "proctorRowText"),
        ]
        for left, right, object_name in rows:
            row = QHBoxLayout()
            left_label = QLabel(left)
            left_label.setObjectName(object_name)
            right_label = QLabel(right)
            right_label.setObjectName("proctorRowText")
            row.addWidget(left_label, stretch=1)
            row.addWidget(right_label)
            layout.addLayout(row)

        results = QLabel(proctor.summary_line)
        results.setObjectName("proctorRowText")
        layout.addWidget(results)

        footer = QHBoxLayout()
        method = QLabel(f"Method: {proctor.test_method}")
        method.setObjectName("proctorRowText")
        footer.addWidget(method, stretch=1)
        footer.addWidget(create_status_chip(proctor.status))
        layout.addLayout(footer)


class ProctorListWidget(QWidget):
    """Header, search field and selectable proctor rows.

    Signals:
        proctor_selected(str): a row was clicked; carries the proctor id
        create_requested(): the "New Test" button was pressed
        export_requested(): the "Export" button was pressed
    """

    proctor_selected = pyqtSignal(str)
    create_requested = pyqtSignal()
    export_requested = pyqtSignal()

    def __init__(self, controller: MaterialsLabController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.setup_ui()
        self.refresh()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        header = QHBoxLayout()
        title = QLabel("Soil Proctors")
        title.setObjectName("panelHeadline")
        header.addWidget(title, stretch=1)

        self.new_button = QPushButton("New Test")
        self.new_button.clicked.connect(self.create_requested)
        header.addWidget(self.new_button)

        self.export_button = QPushButton("Export")
        self.export_button.setObjectName("secondaryAction")
        self.export_button.clicked.connect(self.export_requested)
        header.addWidget(self.export_button)
        layout.addLayout(header)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search by project or sample ID")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self._on_search_changed)
        layout.addWidget(self.search_edit)

        self.list_widget = QListWidget()
        self.list_widget.setObjectName("proctorList")
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.list_widget, stretch=1)

        self.empty_label = QLabel("No soil proctors match your search.")
        self.empty_label.setObjectName("panelPlaceholder")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.hide()
        layout.addWidget(self.empty_label)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Re-render rows for the controller's current filter and selection."""
        self._render(self.controller.filtered_proctors())

    def visible_proctor_ids(self) -> List[str]:
        return [
            self.list_widget.item(row).data(PROCTOR_ID_ROLE)
            for row in range(self.list_widget.count())
        ]

    def select_proctor(self, proctor_id: str) -> None:
        """Programmatic equivalent of clicking a row."""
        if self.controller.select_proctor(proctor_id) is None:
            return
        self._highlight(proctor_id)
        self.proctor_selected.emit(proctor_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _render(self, proctors: List[SoilProctor]) -> None:
        self.list_widget.clear()
        for proctor in proctors:
            item = QListWidgetItem()
            item.setData(PROCTOR_ID_ROLE, proctor.id)
            row = ProctorRowWidget(proctor)
            item.setSizeHint(row.sizeHint())
            self.list_widget.addItem(item)
            self.list_widget.setItemWidget(item, row)

        self.empty_label.setVisible(not proctors)
        selected = self.controller.state.selected_id
        if selected:
            self._highlight(selected)

    def _highlight(self, proctor_id: str) -> None:
        for row in range(self.list_widget.count()):
            item = self.list_widget.item(row)
            if item.data(PROCTOR_ID_ROLE) == proctor_id:
                self.list_widget.setCurrentItem(item)
                return
        self.list_widget.clearSelection()

    def _on_search_changed(self, text: str) -> None:
        self._render(self.controller.update_search_query(text))

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        proctor_id = item.data(PROCTOR_ID_ROLE)
        if proctor_id:
            self.select_proctor(proctor_id)
