"""Base class shared by the main window panels."""
from __future__ import annotations

from PySide6.QtWidgets import QWidget

from graphicalcalculator.app.state import Store


class BasePanel(QWidget):
    """Base class for the window panels. Holds a reference to the global store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
