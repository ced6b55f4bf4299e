# tests/test_gui.py
import os

import pytest

# Widgets are created without a visible display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from passive_view.core.settings import AppSettings
from passive_view.gui.coordinator import CoordinatorState
from passive_view.gui.display_surface import DisplaySurface
from passive_view.gui.main_window import MainWindow


# pytest fixture to create a QApplication instance, required for any Qt widget tests.
@pytest.fixture(scope="session")
def qapp():
    """Creates a QApplication instance for the test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def test_label_text_round_trip(qapp):
    surface = DisplaySurface()
    surface.set_label_text("123")
    assert surface.label_text() == "123"
    assert surface.label.text() == "123"


def test_button_click_invokes_last_registered_handler(qapp):
    surface = DisplaySurface()
    calls = []
    surface.on_button_tap(lambda: calls.append("first"))
    surface.on_button_tap(lambda: calls.append("second"))

    surface.button.click()

    assert calls == ["second"]


def test_button_click_without_handler_does_nothing(qapp):
    surface = DisplaySurface()
    surface.button.click()
    assert surface.label_text() == ""


def test_main_window_starts_bound_and_shows_zero(qapp):
    window = MainWindow()
    assert window.windowTitle() == AppSettings().window_title
    assert window.coordinator.state is CoordinatorState.BOUND
    assert window.display_surface.label_text() == "0"
    window.close()


def test_main_window_button_updates_label(qapp):
    window = MainWindow()

    window.display_surface.button.click()

    value = window.coordinator.data_holder.value
    assert 1 <= value <= 10
    assert window.display_surface.label_text() == str(value)
    window.close()


def test_main_window_uses_configured_range(qapp):
    window = MainWindow(AppSettings(low=5, high=5))
    window.display_surface.button.click()
    assert window.display_surface.label_text() == "5"
    window.close()


def test_closing_window_releases_subscription(qapp):
    window = MainWindow()
    window.show()
    holder = window.coordinator.data_holder
    assert holder.subscriber_count == 1

    window.close()

    assert holder.subscriber_count == 0
