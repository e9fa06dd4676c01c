"""
Main Application Window
=======================
The top-level window: entry controls on top, the expression panel below.
"""
from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from graphicalcalculator.app.application import VISIBLE_APP_NAME
from graphicalcalculator.app.state import Store
from graphicalcalculator.app.ui.panels.entry import EntryPanel
from graphicalcalculator.app.ui.panels.expression import ExpressionPanel
from graphicalcalculator.config import FRAME_WIDTH, FRAME_HEIGHT, PANEL_HEIGHT


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(FRAME_WIDTH, FRAME_HEIGHT)

        # Global store
        self.store = store or Store()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.entry_panel = EntryPanel(self.store, parent=central)
        self.entry_panel.setFixedHeight(FRAME_HEIGHT - PANEL_HEIGHT)
        self.expression_panel = ExpressionPanel(self.store, parent=central)

        v.addWidget(self.entry_panel, 0)
        v.addWidget(self.expression_panel, 1)

        self.setCentralWidget(central)
