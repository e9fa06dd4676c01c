"""
Configuration & Global Constants
================================
This module serves as the central registry for layout geometry, default
values and user-facing messages.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (region sizes, colours) scattered
   throughout the model and the widgets.
2. Environment: It reads the few settings that can be changed without
   touching code (log level, log file).

Exports:
    FRAME_WIDTH, FRAME_HEIGHT (int): Size of the main window.
    REGION_* (int): Geometry of the five editable regions.
    log_settings(): Log level and optional log file from the environment.
"""
from __future__ import annotations

import logging
import os

# Window
FRAME_WIDTH: int = 500
FRAME_HEIGHT: int = 700

# Expression panel, width matches the enclosing frame
PANEL_WIDTH: int = FRAME_WIDTH
PANEL_HEIGHT: int = 300

# Editable regions
REGION_COUNT: int = 5
REGION_WIDTH: int = 50
REGION_HEIGHT: int = 50
REGION_START_X: int = 50
REGION_START_Y: int = 50
REGION_INC_X: int = 60

# Text anchors: operand operator operand operator operand = result
TEXT_POINT_COUNT: int = 7
TEXT_OFFSET_X: int = 20
TEXT_OFFSET_Y: int = 30

# RGBA
HIGHLIGHT_COLOR: tuple[int, int, int, int] = (255, 255, 0, 127)

# Defaults
DEFAULT_OPERANDS: tuple[int, int, int] = (0, 0, 0)
DEFAULT_OPERATORS: tuple[str, str] = ("+", "+")
DEFAULT_OPERAND_ENTRY: str = "00000"

OPERAND_ERROR_MESSAGE: str = "Failed to set operand value"
OPERATOR_ERROR_MESSAGE: str = "Failed to set operator value"


def _level_from_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value or not value.strip():
        return default
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    print(f"WARNING: Unknown log level {value!r} in {name}, using default")
    return default


LOG_LEVEL_ENV = "GRAPHICALCALCULATOR_LOG_LEVEL"
LOG_FILE_ENV = "GRAPHICALCALCULATOR_LOG_FILE"


def log_settings() -> tuple[int, str | None]:
    """Current (level, file) read from the environment."""
    level = _level_from_env(LOG_LEVEL_ENV, logging.INFO)
    log_file = os.environ.get(LOG_FILE_ENV, "").strip() or None
    return level, log_file

