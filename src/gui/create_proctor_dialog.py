"""Dialog for recording a new soil proctor test."""

from __future__ import annotations

from typing import Dict, Optional

from PyQt6.QtCore import QDate, Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QLineEdit,
    QMessageBox,
    QVBoxLayout,
)

from services.proctor_models import ProctorStatus, TEST_METHODS


class CreateProctorDialog(QDialog):
    """Form for the fields of a new proctor test."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New Proctor Test")
        self.setMinimumWidth(440)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        form_layout = QFormLayout()
        form_layout.setLabelAlignment(Qt.AlignmentFlag.AlignLeft)
        form_layout.setFormAlignment(Qt.AlignmentFlag.AlignTop)

        self.project_edit = QLineEdit()
        self.project_edit.setPlaceholderText("e.g., Highway 101 Expansion")
        form_layout.addRow("Project Name", self.project_edit)

        self.sample_edit = QLineEdit()
        self.sample_edit.setPlaceholderText("e.g., H101-S09")
        form_layout.addRow("Sample ID", self.sample_edit)

        self.date_edit = QDateEdit(QDate.currentDate())
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        form_layout.addRow("Test Date", self.date_edit)

        self.location_edit = QLineEdit()
        self.location_edit.setPlaceholderText("Optional sampling location")
        form_layout.addRow("Location", self.location_edit)

        self.mdd_spin = QDoubleSpinBox()
        self.mdd_spin.setRange(0.0, 200.0)
        self.mdd_spin.setDecimals(1)
        self.mdd_spin.setSuffix(" pcf")
        form_layout.addRow("Max Dry Density", self.mdd_spin)

        self.omc_spin = QDoubleSpinBox()
        self.omc_spin.setRange(0.0, 100.0)
        self.omc_spin.setDecimals(1)
        self.omc_spin.setSuffix(" %")
        form_layout.addRow("Optimum Moisture", self.omc_spin)

        self.method_combo = QComboBox()
        self.method_combo.addItems(TEST_METHODS)
        form_layout.addRow("Test Method", self.method_combo)

        self.technician_edit = QLineEdit()
        form_layout.addRow("Technician", self.technician_edit)

        self.status_combo = QComboBox()
        self.status_combo.addItems(ProctorStatus.ALL)
        self.status_combo.setCurrentText(ProctorStatus.IN_PROGRESS)
        form_layout.addRow("Status", self.status_combo)

        layout.addLayout(form_layout)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._accept_if_valid)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def validation_error(self) -> Optional[str]:
        """Return a message for the first missing required field, or None."""
        if not self.project_edit.text().strip():
            return "Enter a project name before continuing."
        if not self.sample_edit.text().strip():
            return "Enter a sample ID before continuing."
        if self.mdd_spin.value() <= 0:
            return "Enter the maximum dry density."
        return None

    def _accept_if_valid(self):
        message = self.validation_error()
        if message:
            QMessageBox.warning(self, "Missing Information", message)
            return
        self.accept()

    def get_proctor_data(self) -> Dict[str, object]:
        """Return keyword arguments for ``DatabaseProctorProvider.create``."""
        return {
            "project_name": self.project_edit.text().strip(),
            "sample_id": self.sample_edit.text().strip(),
            "date": self.date_edit.date().toString("yyyy-MM-dd"),
            "location": self.location_edit.text().strip(),
            "max_dry_density": self.mdd_spin.value(),
            "optimum_moisture_content": self.omc_spin.value(),
            "test_method": self.method_combo.currentText(),
            "technician": self.technician_edit.text().strip(),
            "status": self.status_combo.currentText(),
        }
