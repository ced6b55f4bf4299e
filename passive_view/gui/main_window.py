# passive_view/gui/main_window.py

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication, QMainWindow

from passive_view.core.settings import AppSettings, load_settings
from passive_view.utils.logger import set_console_level, setup_logging
from .coordinator import Coordinator
from .display_surface import DisplaySurface

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    The application "shell". It builds the passive DisplaySurface, hands it to
    the Coordinator, and maps the window's lifecycle onto the Coordinator's:
    construction finished -> start(), window closing -> teardown().
    """

    def __init__(self, settings: Optional[AppSettings] = None):
        super().__init__()
        self.settings = settings if settings is not None else AppSettings()
        self.setWindowTitle(self.settings.window_title)
        self.setGeometry(100, 100, 320, 480)

        self.display_surface = DisplaySurface()
        self.setCentralWidget(self.display_surface)

        # The view is fully built at this point, which is our "view ready" signal.
        self.coordinator = Coordinator(self.display_surface, self.settings)
        self.coordinator.start()

    def closeEvent(self, event):
        """Releases the Coordinator's subscription before the window goes away."""
        self.coordinator.teardown()
        event.accept()


def run_gui(settings_path: Optional[Path] = None):
    """The entry point for the GUI application."""
    # Step 1: Configure logging, so the settings loader can report problems.
    setup_logging()

    # Step 2: Read the user's settings and apply their log level.
    settings = load_settings(settings_path)
    set_console_level(settings.log_level)

    # Step 3: Create the Qt application and show the window.
    app = QApplication(sys.argv)
    window = MainWindow(settings)
    window.show()
    logger.info("Main window shown, entering the event loop.")

    sys.exit(app.exec())
