"""
Tests for the ExpressionEditor state machine.
"""

import pytest

from graphicalcalculator.model.editor import (
    ExpressionEditor,
    RegionKind,
    apply_operator,
    parse_operand,
)


def build(operands, operators):
    """Drive an editor into the given state through the public operations."""
    editor = ExpressionEditor()
    for i, value in enumerate(operands):
        assert editor.select(2 * i)
        assert editor.set_selected_contents(str(value))
    for i, symbol in enumerate(operators):
        assert editor.select(2 * i + 1)
        assert editor.set_selected_contents(symbol)
    return editor


class TestDefaults:
    """Tests for a freshly created editor."""

    def test_initial_state(self, editor):
        assert editor.selection == 0
        assert editor.operands == (0, 0, 0)
        assert editor.operators == ("+", "+")
        assert editor.evaluate() == 0

    def test_queries_are_read_only(self, editor):
        assert isinstance(editor.operands, tuple)
        assert isinstance(editor.operators, tuple)
        with pytest.raises(AttributeError):
            editor.selection = 3


class TestRegionKind:
    """Region kind is derived from index parity."""

    @pytest.mark.parametrize("index", [0, 2, 4])
    def test_even_is_operand(self, editor, index):
        assert editor.region_kind(index) is RegionKind.OPERAND

    @pytest.mark.parametrize("index", [1, 3])
    def test_odd_is_operator(self, editor, index):
        assert editor.region_kind(index) is RegionKind.OPERATOR

    def test_selected_kind_follows_selection(self, editor):
        assert editor.selected_kind is RegionKind.OPERAND
        editor.select(3)
        assert editor.selected_kind is RegionKind.OPERATOR


class TestSelect:
    """Tests for select()."""

    @pytest.mark.parametrize("index", range(5))
    def test_select_then_query(self, editor, index):
        assert editor.select(index) is True
        assert editor.selection == index

    @pytest.mark.parametrize("index", [-1, 5, 100, True, "2", 2.0, None])
    def test_invalid_index_rejected(self, editor, index):
        editor.select(3)
        assert editor.select(index) is False
        assert editor.selection == 3


class TestSetOperand:
    """Tests for set_selected_contents() on operand regions."""

    @pytest.mark.parametrize("region", [0, 2, 4])
    @pytest.mark.parametrize("value", range(10))
    def test_digits_accepted(self, editor, region, value):
        editor.select(region)
        assert editor.set_selected_contents(str(value)) is True
        assert editor.operands[region // 2] == value

    def test_only_selected_operand_changes(self, editor):
        editor.select(2)
        editor.set_selected_contents("7")
        assert editor.operands == (0, 7, 0)
        assert editor.operators == ("+", "+")

    @pytest.mark.parametrize("region", [0, 2, 4])
    @pytest.mark.parametrize("content", ["10", "-1", "15", "abc", "", " 5", "5 ", "3.0", "+", "1_0"])
    def test_invalid_content_rejected(self, editor, region, content):
        editor.select(region)
        editor.set_selected_contents("4")
        before = (editor.operands, editor.operators, editor.selection)

        assert editor.set_selected_contents(content) is False
        assert (editor.operands, editor.operators, editor.selection) == before

    @pytest.mark.parametrize("content, expected", [("07", 7), ("+3", 3), ("-0", 0), ("00000", 0)])
    def test_integer_literals(self, editor, content, expected):
        assert editor.set_selected_contents(content) is True
        assert editor.operands[0] == expected

    def test_long_zero_padded_operand_accepted(self, editor):
        assert editor.set_selected_contents("0" * 5000 + "5") is True
        assert editor.operands[0] == 5

    @pytest.mark.parametrize("content", ["9" * 5000, "-" + "1" * 5000, "1" + "0" * 5000])
    def test_long_out_of_range_operand_rejected(self, editor, content):
        assert editor.set_selected_contents(content) is False
        assert editor.operands == (0, 0, 0)


class TestSetOperator:
    """Tests for set_selected_contents() on operator regions."""

    @pytest.mark.parametrize("region", [1, 3])
    @pytest.mark.parametrize("symbol", ["+", "-", "*"])
    def test_symbols_accepted(self, editor, region, symbol):
        editor.select(region)
        assert editor.set_selected_contents(symbol) is True
        assert editor.operators[region // 2] == symbol

    @pytest.mark.parametrize("region", [1, 3])
    @pytest.mark.parametrize("content", ["x", " +", "+ ", "plus", "", "/", "**", "5"])
    def test_other_strings_rejected(self, editor, region, content):
        editor.select(region)
        before = (editor.operands, editor.operators)
        assert editor.set_selected_contents(content) is False
        assert (editor.operands, editor.operators) == before


class TestEvaluate:
    """Tests for evaluate()."""

    def test_left_to_right_without_precedence(self):
        editor = build([2, 3, 4], ["+", "*"])
        assert editor.evaluate() == 20

    def test_subtraction_order(self):
        editor = build([5, 2, 3], ["-", "-"])
        assert editor.evaluate() == 0

    def test_negative_result(self):
        editor = build([0, 9, 9], ["-", "*"])
        assert editor.evaluate() == -81

    def test_largest_result(self):
        editor = build([9, 9, 9], ["*", "*"])
        assert editor.evaluate() == 729

    def test_idempotent(self):
        editor = build([4, 2, 7], ["*", "-"])
        assert editor.evaluate() == editor.evaluate() == 1

    def test_evaluate_does_not_mutate(self):
        editor = build([1, 2, 3], ["+", "+"])
        before = repr(editor)
        editor.evaluate()
        assert repr(editor) == before


class TestScenarios:
    """End-to-end scenarios."""

    def test_edit_then_evaluate(self, editor):
        editor.select(2)
        assert editor.set_selected_contents("7") is True
        assert editor.operands == (0, 7, 0)
        editor.select(3)
        assert editor.set_selected_contents("*") is True
        assert editor.operators == ("+", "*")
        assert editor.evaluate() == 0

    def test_failure_then_recovery(self, editor):
        editor.select(0)
        assert editor.set_selected_contents("15") is False
        assert editor.operands == (0, 0, 0)
        assert editor.set_selected_contents("5") is True
        assert editor.operands == (5, 0, 0)


class TestHelpers:
    """Tests for module-level helpers."""

    def test_region_text(self):
        editor = build([1, 2, 3], ["-", "*"])
        assert [editor.region_text(i) for i in range(5)] == ["1", "-", "2", "*", "3"]

    def test_region_text_out_of_range(self, editor):
        with pytest.raises(ValueError):
            editor.region_text(5)

    def test_apply_unknown_operator(self):
        with pytest.raises(ValueError):
            apply_operator("/", 1, 2)

    def test_parse_operand(self):
        assert parse_operand("9") == 9
        assert parse_operand("10") is None
        assert parse_operand("x") is None
