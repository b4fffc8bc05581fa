"""Tests for the main window layout and divider persistence."""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QCloseEvent

from config.layout_config import divider_defaults
from gui.main_window import MainWindow
from gui.navigation_rail import SCREEN_PROJECTS
from layout.split_resizer import Orientation


@pytest.fixture
def window(qt_app, fake_settings, sample_provider):
    win = MainWindow(fake_settings, sample_provider)
    yield win
    win.deleteLater()


def test_builds_four_split_panes_with_defaults(window):
    fractions = {key: pane.fraction for key, pane in window.split_panes.items()}
    assert fractions == divider_defaults()


def test_pane_orientations(window):
    assert window.split_panes["mainSplitPosition"].orientation is Orientation.HORIZONTAL
    assert window.split_panes["rightVerticalSplitPosition"].orientation is Orientation.VERTICAL
    assert window.split_panes["topHorizontalSplitPosition"].orientation is Orientation.HORIZONTAL
    assert window.split_panes["bottomHorizontalSplitPosition"].orientation is Orientation.HORIZONTAL


def test_restores_saved_positions(qt_app, fake_settings, sample_provider):
    fake_settings.values.update({"mainSplitPosition": 0.4, "bottomHorizontalSplitPosition": 0.7})

    win = MainWindow(fake_settings, sample_provider)

    assert win.split_panes["mainSplitPosition"].fraction == 0.4
    assert win.split_panes["bottomHorizontalSplitPosition"].fraction == 0.7
    assert win.split_panes["rightVerticalSplitPosition"].fraction == 0.5


def test_close_persists_every_divider(window, fake_settings):
    window.split_panes["topHorizontalSplitPosition"].set_fraction(0.65)

    window.closeEvent(QCloseEvent())

    assert {key for key, _ in fake_settings.writes} == set(divider_defaults())
    assert fake_settings.values["topHorizontalSplitPosition"] == 0.65
    assert fake_settings.values["mainSplitPosition"] == 0.25


def test_drag_end_persists_single_divider(window, fake_settings):
    pane = window.split_panes["mainSplitPosition"]
    pane.resize(1200, 800)

    pane.begin_drag()
    pane.drag_by(240, 0)
    pane.end_drag()

    assert fake_settings.writes == [("mainSplitPosition", pytest.approx(0.35))]


def test_selecting_proctor_updates_detail_and_chart(window):
    window.proctor_list.select_proctor("SP004")

    assert window.detail_widget.field_text("sample_id") == "H101-S08"
    assert window.chart_widget.selected_id == "SP004"


def test_screen_switching(window):
    assert window.left_stack.currentWidget() is window.proctor_list

    window.navigation_rail.select_screen(SCREEN_PROJECTS)

    assert window.current_screen() == SCREEN_PROJECTS
    assert window.left_stack.currentWidget() is window.projects_placeholder
    assert window.detail_stack.currentWidget() is window.detail_placeholder


def test_rail_toggle_button(window):
    window.rail_toggle.click()
    assert not window.navigation_rail.is_expanded


def test_refresh_picks_up_new_records(qt_app, fake_settings, db_provider):
    win = MainWindow(fake_settings, db_provider)
    db_provider.create(
        project_name="Harbor Terminal",
        sample_id="HT-S01",
        date="2024-03-12",
        location="Berth 4",
        max_dry_density=121.3,
        optimum_moisture_content=12.1,
        test_method="ASTM D1557",
        technician="Ana Lopez",
    )

    win.refresh_proctors()

    assert win.proctor_list.visible_proctor_ids()[-1] == "SP006"
    assert win.chart_widget.point_count() == 6
