"""
Panels of the main window. Each panel holds a reference to the global `Store`.
"""
from graphicalcalculator.app.ui.panels.entry import EntryPanel
from graphicalcalculator.app.ui.panels.expression import ExpressionPanel

__all__ = ["EntryPanel", "ExpressionPanel"]
