from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from graphicalcalculator.config import REGION_COUNT
from graphicalcalculator.model.editor import ExpressionEditor

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for panel sync. Wraps one ExpressionEditor."""
    selection_changed = Signal(int)
    expression_changed = Signal(object)

    def __init__(self, editor: ExpressionEditor | None = None) -> None:
        super().__init__()
        self.editor = editor or ExpressionEditor()

    def select(self, region_index: int) -> bool:
        if not self.editor.select(region_index):
            return False
        self.selection_changed.emit(self.editor.selection)
        return True

    def set_selected_contents(self, content: str) -> bool:
        if not self.editor.set_selected_contents(content):
            return False
        self.expression_changed.emit(self.editor)
        logger.info("Expression is now %s", self.expression_text())
        return True

    def evaluate(self) -> int:
        return self.editor.evaluate()

    def expression_text(self) -> str:
        """E.g. '2 + 3 * 4 = 20'."""
        parts = [self.editor.region_text(i) for i in range(REGION_COUNT)]
        return f"{' '.join(parts)} = {self.evaluate()}"
