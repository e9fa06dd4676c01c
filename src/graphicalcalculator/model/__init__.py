"""
The MODEL layer contains the expression editor and the region geometry.
It has NO knowledge of the GUI (Qt).
"""
from graphicalcalculator.model.editor import ExpressionEditor, RegionKind, OPERATORS
from graphicalcalculator.model.layout import RegionRect, region_rects, region_at, text_points

__all__ = [
    "ExpressionEditor",
    "RegionKind",
    "OPERATORS",
    "RegionRect",
    "region_rects",
    "region_at",
    "text_points",
]
