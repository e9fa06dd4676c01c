"""
Expression Editor (Data Model)
==============================
This module defines the state machine behind the calculator panel.

Why is this file needed?
------------------------
1. State Management: It holds the three operands, the two operators and the
   selected region in one place.
2. Validation: `set_selected_contents` is the only way user input reaches the
   stored values, so every check lives here.
3. Decoupling: The widgets read from this object and forward gestures to it;
   it never imports Qt.

The expression has five regions, laid out left to right:

    region:  0         1          2         3          4
    value:   operand0  operator0  operand1  operator1  operand2

Even regions hold operands, odd regions hold operators. Evaluation is
strictly left to right, so `2 + 3 * 4` evaluates to `(2 + 3) * 4 = 20`.

Classes:
    RegionKind: Operand or operator, derived from the region index.
    ExpressionEditor: The editor itself.
"""
from __future__ import annotations

import logging
import operator
import re
from enum import Enum
from typing import Callable

from graphicalcalculator.config import DEFAULT_OPERANDS, DEFAULT_OPERATORS, REGION_COUNT

logger = logging.getLogger(__name__)

OPERAND_MIN = 0
OPERAND_MAX = 9

OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}

# Optional sign, leading zeros, then a single ASCII digit. Longer literals
# are out of range anyway and never reach int().
_OPERAND_RE = re.compile(r"([+-]?)0*([0-9])")


class RegionKind(Enum):
    """What a region holds. Never stored, always derived from the index."""
    OPERAND = "operand"
    OPERATOR = "operator"

    @classmethod
    def of(cls, region_index: int) -> RegionKind:
        return cls.OPERAND if region_index % 2 == 0 else cls.OPERATOR


def apply_operator(symbol: str, x: int, y: int) -> int:
    """Apply a binary operator given by its symbol."""
    try:
        func = OPERATORS[symbol]
    except KeyError:
        raise ValueError(f"Unknown operator '{symbol}'.") from None
    return func(x, y)


def parse_operand(content: str) -> int | None:
    """
    Parse a single-digit operand.

    Returns the value, or None when `content` is not an integer literal or
    falls outside [OPERAND_MIN, OPERAND_MAX].
    """
    match = _OPERAND_RE.fullmatch(content)
    if match is None:
        return None
    sign, digit = match.groups()
    value = -int(digit) if sign == "-" else int(digit)
    if not OPERAND_MIN <= value <= OPERAND_MAX:
        return None
    return value


class ExpressionEditor:
    """
    Editor for a fixed `operand operator operand operator operand` expression.

    The editor owns its values; callers mutate them only through `select` and
    `set_selected_contents` and read them through the read-only properties.
    """

    def __init__(self) -> None:
        self._operands: list[int] = list(DEFAULT_OPERANDS)
        self._operators: list[str] = list(DEFAULT_OPERATORS)
        self._selection: int = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(operands={self._operands}, "
            f"operators={self._operators}, selection={self._selection})"
        )

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    @property
    def selection(self) -> int:
        return self._selection

    @property
    def operands(self) -> tuple[int, ...]:
        return tuple(self._operands)

    @property
    def operators(self) -> tuple[str, ...]:
        return tuple(self._operators)

    @property
    def selected_kind(self) -> RegionKind:
        return RegionKind.of(self._selection)

    @staticmethod
    def region_kind(region_index: int) -> RegionKind:
        return RegionKind.of(region_index)

    def region_text(self, region_index: int) -> str:
        """The text displayed inside a region, e.g. "7" or "*"."""
        if not self._in_range(region_index):
            raise ValueError(f"Region index {region_index} out of range.")
        if RegionKind.of(region_index) is RegionKind.OPERAND:
            return str(self._operands[region_index // 2])
        return self._operators[region_index // 2]

    # ------------------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------------------

    def select(self, region_index: int) -> bool:
        """
        Make `region_index` the selected region.

        Callers are expected to pass an index in 0..4 only. Anything else is
        rejected: the selection stays as it was and False is returned.
        """
        if not self._in_range(region_index):
            logger.warning("Ignoring selection of invalid region %r", region_index)
            return False
        self._selection = region_index
        logger.debug("Selected region %d (%s)", region_index, self.selected_kind.value)
        return True

    def set_selected_contents(self, content: str) -> bool:
        """
        Attempt to write `content` into the selected region.

        Operand regions accept an integer literal in [0, 9]; operator regions
        accept exactly "+", "-" or "*". Returns True when the value was
        stored and False when it was rejected, in which case nothing changes.
        """
        index = self._selection // 2

        if self.selected_kind is RegionKind.OPERAND:
            value = parse_operand(content)
            if value is None:
                logger.debug("Rejected operand %r for region %d", content, self._selection)
                return False
            self._operands[index] = value
        else:
            if content not in OPERATORS:
                logger.debug("Rejected operator %r for region %d", content, self._selection)
                return False
            self._operators[index] = content

        logger.debug("Region %d set to %r", self._selection, content)
        return True

    def evaluate(self) -> int:
        """Evaluate the expression left to right, ignoring precedence."""
        total = apply_operator(self._operators[0], self._operands[0], self._operands[1])
        return apply_operator(self._operators[1], total, self._operands[2])

    @staticmethod
    def _in_range(region_index: int) -> bool:
        # bool is an int subclass, but True/False are not region indices
        return (
            isinstance(region_index, int)
            and not isinstance(region_index, bool)
            and 0 <= region_index < REGION_COUNT
        )
