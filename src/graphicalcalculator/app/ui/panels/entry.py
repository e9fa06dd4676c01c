"""
Entry panel: operand field, operator radio buttons and the "Set" buttons that
write into the selected region, plus the error label reporting rejected input.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QGridLayout, QVBoxLayout, QLineEdit, QPushButton, QRadioButton, QButtonGroup, QLabel
)

from graphicalcalculator.app.state import Store
from graphicalcalculator.app.ui.panels.base import BasePanel
from graphicalcalculator.config import (
    DEFAULT_OPERAND_ENTRY, OPERAND_ERROR_MESSAGE, OPERATOR_ERROR_MESSAGE
)
from graphicalcalculator.model.editor import OPERATORS


class EntryPanel(BasePanel):
    """
    Controls for editing the selected region: an operand text field, one radio
    button per operator, the two "Set" buttons and an error message label.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        grid = QGridLayout(self)

        # --- Operand entry ---
        self.operand_entry = QLineEdit(DEFAULT_OPERAND_ENTRY, self)
        grid.addWidget(self.operand_entry, 0, 0)

        # --- Operator radio buttons (one checked at a time) ---
        radio_box = QWidget(self)
        radio_layout = QVBoxLayout(radio_box)
        self.operator_group = QButtonGroup(self)
        self.operator_buttons: dict[str, QRadioButton] = {}
        for symbol in OPERATORS:
            button = QRadioButton(symbol, radio_box)
            self.operator_group.addButton(button)
            radio_layout.addWidget(button)
            self.operator_buttons[symbol] = button
        self.operator_buttons["+"].setChecked(True)
        grid.addWidget(radio_box, 0, 1)

        # --- Set buttons ---
        button_box = QWidget(self)
        button_layout = QVBoxLayout(button_box)
        self.set_operand_button = QPushButton(self.tr("Set Operand"), button_box)
        self.set_operator_button = QPushButton(self.tr("Set Operator"), button_box)
        button_layout.addWidget(self.set_operand_button)
        button_layout.addWidget(self.set_operator_button)
        grid.addWidget(button_box, 1, 0)

        # --- Error message ---
        self.error_label = QLabel("", self)
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setStyleSheet("color: red;")
        grid.addWidget(self.error_label, 1, 1)

        self.set_operand_button.clicked.connect(self.on_set_operand_clicked)
        self.set_operator_button.clicked.connect(self.on_set_operator_clicked)

    # --- PROPERTIES ---

    @property
    def error_message(self) -> str:
        return self.error_label.text()

    @error_message.setter
    def error_message(self, text: str) -> None:
        self.error_label.setText(text)

    def checked_operator(self) -> str:
        for symbol, button in self.operator_buttons.items():
            if button.isChecked():
                return symbol
        # QButtonGroup is exclusive and "+" starts checked
        raise ValueError("No operator radio button is checked.")

    # --- SLOTS ---

    def on_set_operand_clicked(self) -> None:
        ok = self.store.set_selected_contents(self.operand_entry.text())
        self.error_message = "" if ok else self.tr(OPERAND_ERROR_MESSAGE)

    def on_set_operator_clicked(self) -> None:
        ok = self.store.set_selected_contents(self.checked_operator())
        self.error_message = "" if ok else self.tr(OPERATOR_ERROR_MESSAGE)
