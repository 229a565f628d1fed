"""
Tests for the end-to-end evaluation pipeline.

Chained '^' is right-associative by default: 2^3^2 == 2^(3^2) == 512.
"""

import pytest
import structlog

from infix_calc.config import configure_logging
from infix_calc.errors import (
    CalculatorError,
    MalformedExpressionError,
    StackUnderflowError,
    UnbalancedParenthesesError,
    UnexpectedSymbolError,
    UnresolvedIdentifierError,
)
from infix_calc.lexer import tokenize
from infix_calc.models import Associativity, TokenKind
from infix_calc.pipeline import analyze, evaluate_batch, evaluate_expression


class TestExpressionEvaluator:
    """Test expression evaluation."""

    def test_precedence(self):
        assert evaluate_expression("1+2*3") == 7.0

    def test_parentheses(self):
        assert evaluate_expression("(1+2)*3") == 9.0

    def test_division_then_subtraction(self):
        assert evaluate_expression("10/2-3") == 2.0

    def test_left_associative_subtraction(self):
        assert evaluate_expression("8-2-3") == 3.0

    def test_left_associative_division(self):
        assert evaluate_expression("16/4/2") == 2.0

    def test_complex_expression(self):
        assert evaluate_expression("((10 + 5) * 2) / 3") == 10.0

    def test_whitespace(self):
        assert evaluate_expression("  2 +   3 ") == 5.0

    def test_decimals(self):
        assert evaluate_expression("0.5 * 4") == 2.0

    @pytest.mark.parametrize("expression", [
        "1 + 2 * 3 - 4 / 2",
        "(1 + 2) * (3 - 4) / 5",
        "10 - 2 * 3 + 4 / 2",
        "((2 + 3) * (4 - 1)) - 7 * 2",
        "100 / 10 / 5 - 3 - 1",
    ])
    def test_matches_python_arithmetic(self, expression):
        assert evaluate_expression(expression) == pytest.approx(eval(expression))


class TestPowerAssociativity:
    """Test the configurable grouping of chained exponentiation."""

    def test_right_associative_default(self):
        assert evaluate_expression("2^3^2") == 512.0

    def test_left_associative(self):
        assert evaluate_expression("2^3^2", power_associativity=Associativity.LEFT) == 64.0

    def test_power_before_multiplication(self):
        assert evaluate_expression("2*3^2") == 18.0


class TestErrorPropagation:
    """Test that each stage's error reaches the caller."""

    def test_identifier_lexes_but_fails_evaluation(self):
        tokens = tokenize("1+a")
        assert tokens[-1].kind == TokenKind.IDENTIFIER
        with pytest.raises(UnresolvedIdentifierError):
            evaluate_expression("1+a")

    def test_identifier_lenient_underflows(self):
        with pytest.raises(StackUnderflowError):
            evaluate_expression("1+a", strict=False)

    def test_unexpected_symbol(self):
        with pytest.raises(UnexpectedSymbolError) as exc_info:
            evaluate_expression("1+@")
        assert exc_info.value.symbol == "@"

    def test_empty_input(self):
        assert tokenize("") == []
        with pytest.raises(MalformedExpressionError):
            evaluate_expression("")

    def test_unbalanced_strict(self):
        with pytest.raises(UnbalancedParenthesesError):
            evaluate_expression("(1+2")

    def test_unbalanced_lenient(self):
        assert evaluate_expression("(1+2", strict=False) == 3.0
        assert evaluate_expression("1+2)*3", strict=False) == 9.0

    def test_unary_minus_is_not_supported(self):
        with pytest.raises(StackUnderflowError):
            evaluate_expression("-1")

    def test_adjacent_numbers_strict(self):
        with pytest.raises(MalformedExpressionError):
            evaluate_expression("1 2")

    def test_adjacent_numbers_lenient_takes_first(self):
        assert evaluate_expression("1 2", strict=False) == 1.0

    def test_all_errors_share_base_class(self):
        for expression in ["1+@", "(1", "1+", "", "1.2.3", "x"]:
            with pytest.raises(CalculatorError):
                evaluate_expression(expression)


class TestAnalyze:
    """Test the full evaluation trace."""

    def test_stages_are_recorded(self):
        result = analyze("(1+2)*3")
        assert result.expression == "(1+2)*3"
        assert [t.text for t in result.tokens] == ["(", "1", "+", "2", ")", "*", "3"]
        assert [t.text for t in result.postfix] == ["1", "2", "+", "3", "*"]
        assert result.value == 9.0

    def test_idempotent(self):
        first = analyze("2^0.5 + 7/3")
        second = analyze("2^0.5 + 7/3")
        assert first == second


class TestBatch:
    """Test batch evaluation with per-expression error capture."""

    def test_continues_after_errors(self):
        outcomes = evaluate_batch(["1+1", "1+@", "(2", "3*3"])
        assert [o.ok for o in outcomes] == [True, False, False, True]
        assert outcomes[0].value == 2.0
        assert outcomes[3].value == 9.0

    def test_error_details(self):
        outcome = evaluate_batch(["1+@"])[0]
        assert outcome.value is None
        assert outcome.error_type == "UnexpectedSymbolError"
        assert "@" in outcome.error

    def test_empty_batch(self):
        assert evaluate_batch([]) == []

    def test_options_forwarded(self):
        outcomes = evaluate_batch(["2^3^2"], power_associativity="left")
        assert outcomes[0].value == 64.0


class TestLogging:
    """Test that evaluation keeps stdout free of log output."""

    def test_unconfigured_structlog_writes_nothing_to_stdout(self, capsys):
        structlog.reset_defaults()
        assert evaluate_expression("1+2*3") == 7.0
        assert capsys.readouterr().out == ""

    def test_debug_events_go_to_stderr(self, capsys):
        configure_logging("DEBUG")
        evaluate_expression("1+2")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Tokenized expression" in captured.err

    def test_batch_writes_nothing_to_stdout(self, capsys):
        structlog.reset_defaults()
        evaluate_batch(["1+1", "1+@"])
        assert capsys.readouterr().out == ""
