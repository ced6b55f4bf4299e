# passive_view/gui/display_surface.py

from typing import Callable, Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget


class DisplaySurface(QWidget):
    """
    A "dumb" view: a label and a button, nothing else.
    It never decides what to show. The Coordinator tells it.
    """

    def __init__(self, button_text: str = "Generate", parent=None):
        super().__init__(parent)
        self._tap_callback: Optional[Callable[[], None]] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(15)

        self.label = QLabel("")
        self.label.setAlignment(Qt.AlignCenter)
        self.label.setObjectName("numberLabel")

        self.button = QPushButton(button_text)

        layout.addStretch()
        layout.addWidget(self.label)
        layout.addWidget(self.button)
        layout.addStretch()

        self.button.clicked.connect(self._on_button_clicked)

    def set_label_text(self, text: str):
        self.label.setText(text)

    def label_text(self) -> str:
        return self.label.text()

    def on_button_tap(self, callback: Callable[[], None]):
        """Registers the tap handler. A later registration replaces an earlier one."""
        self._tap_callback = callback

    @Slot()
    def _on_button_clicked(self):
        if self._tap_callback is not None:
            self._tap_callback()
