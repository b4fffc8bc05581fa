"""Proctor overview chart - optimum moisture vs. maximum dry density for every test."""

from typing import List, Optional

import numpy as np
import pyqtgraph as pg
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from gui.design_tokens import PALETTE
from services.proctor_models import SoilProctor


class ProctorChartWidget(QWidget):
    """Scatter of OMC (x) against MDD (y); the selected test is drawn larger."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.proctors: List[SoilProctor] = []
        self.selected_id: Optional[str] = None
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        title = QLabel("Compaction Overview")
        title.setObjectName("panelHeadline")
        layout.addWidget(title)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground(PALETTE["bg_primary"])

        view_box = self.plot_widget.getPlotItem().getViewBox()
        view_box.setBackgroundColor('#0f1419')
        view_box.setBorder(pg.mkPen(PALETTE["border_default"], width=1))

        self.plot_widget.showGrid(x=True, y=True, alpha=0.5)
        for axis in ('bottom', 'left'):
            self.plot_widget.getAxis(axis).setPen(pg.mkPen(PALETTE["border_default"], width=1))
            self.plot_widget.getAxis(axis).setTextPen(PALETTE["text_primary"])

        self.plot_widget.setLabel('bottom', 'Optimum Moisture Content (%)')
        self.plot_widget.setLabel('left', 'Max Dry Density (pcf)')

        # Disable interactions
        self.plot_widget.setMenuEnabled(False)
        view_box.setMouseEnabled(x=False, y=False)
        view_box.setDefaultPadding(0.1)
        self.plot_widget.setTitle(None)

        self.scatter = pg.ScatterPlotItem(
            size=10,
            pen=pg.mkPen(None),
            brush=pg.mkBrush(PALETTE["accent_primary"]),
        )
        self.highlight = pg.ScatterPlotItem(
            size=16,
            pen=pg.mkPen(PALETTE["accent_secondary"], width=2),
            brush=pg.mkBrush(PALETTE["accent_secondary"]),
        )
        self.plot_widget.addItem(self.scatter)
        self.plot_widget.addItem(self.highlight)

        layout.addWidget(self.plot_widget, stretch=1)

    def load_proctors(self, proctors: List[SoilProctor]):
        """Plot one point per proctor test."""
        self.proctors = list(proctors)
        if not self.proctors:
            self.clear_data()
            return

        x = np.array([p.optimum_moisture_content for p in self.proctors], dtype=float)
        y = np.array([p.max_dry_density for p in self.proctors], dtype=float)
        self.scatter.setData(x=x, y=y, data=[p.id for p in self.proctors])
        self._update_highlight()

    def set_selected(self, proctor_id: Optional[str]):
        self.selected_id = proctor_id
        self._update_highlight()

    def point_count(self) -> int:
        return len(self.scatter.data)

    def clear_data(self):
        self.proctors = []
        self.scatter.clear()
        self.highlight.clear()

    def _update_highlight(self):
        selected = [p for p in self.proctors if p.id == self.selected_id]
        if not selected:
            self.highlight.clear()
            return
        proctor = selected[0]
        self.highlight.setData(
            x=np.array([proctor.optimum_moisture_content]),
            y=np.array([proctor.max_dry_density]),
        )
