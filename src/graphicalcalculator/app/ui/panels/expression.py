"""
Expression panel: paints the five regions, the result and the selection
highlight, and turns left clicks into region selections.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QRect, QSize
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from graphicalcalculator.app.state import Store
from graphicalcalculator.app.ui.panels.base import BasePanel
from graphicalcalculator.config import PANEL_WIDTH, PANEL_HEIGHT, HIGHLIGHT_COLOR
from graphicalcalculator.model.layout import RegionRect, region_at, region_rects, text_points

logger = logging.getLogger(__name__)


def _to_qrect(rect: RegionRect) -> QRect:
    return QRect(rect.x, rect.y, rect.width, rect.height)


class ExpressionPanel(BasePanel):
    """
    Interactive panel showing `operand operator operand operator operand = result`.

    Each editable part is drawn inside a black box (a region). Clicking a region
    selects it and the selected region is highlighted in translucent yellow.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        self.setMinimumSize(PANEL_WIDTH, PANEL_HEIGHT)

        self._regions = [_to_qrect(r) for r in region_rects()]
        self._text_points = text_points()
        self._highlight = QColor(*HIGHLIGHT_COLOR)

        self.store.selection_changed.connect(lambda *_: self.update())
        self.store.expression_changed.connect(lambda *_: self.update())

    def sizeHint(self) -> QSize:
        return QSize(PANEL_WIDTH, PANEL_HEIGHT)

    def display_strings(self) -> list[str]:
        """The seven strings drawn at the text points, left to right."""
        editor = self.store.editor
        parts = [editor.region_text(i) for i in range(len(self._regions))]
        return parts + ["=", str(self.store.evaluate())]

    # ---- Qt events ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setPen(QPen(Qt.GlobalColor.black))
            for rect in self._regions:
                painter.drawRect(rect)

            for text, (x, y) in zip(self.display_strings(), self._text_points):
                painter.drawText(x, y, text)

            painter.fillRect(self._regions[self.store.editor.selection], self._highlight)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        index = region_at(pos.x(), pos.y())
        if index is None:
            logger.debug("Click at (%.0f, %.0f) outside all regions", pos.x(), pos.y())
        else:
            self.store.select(index)
