"""Tests for polish_notation.validator and polish_notation.errors."""

import pytest
from polish_notation import PNValidator, PolishError, PolishNotationError, error_message


class TestSyntaxCheck:
    def test_valid_expression(self):
        assert PNValidator.syntax_check("* + 5 1 - 7 1") is None

    def test_empty_checked_first(self):
        with pytest.raises(PolishNotationError) as exc_info:
            PNValidator.syntax_check("")
        assert exc_info.value.kind is PolishError.NOT_ENTERED_EXPRESSION

    def test_spaces_only_pass(self):
        assert PNValidator.syntax_check("   ") is None

    @pytest.mark.parametrize("expression", ["+ 1.5 2", "+ a 1", "+\t5 2", "+ 5 2\n", "^ 2 3"])
    def test_unavailable_character(self, expression):
        with pytest.raises(PolishNotationError) as exc_info:
            PNValidator.syntax_check(expression)
        assert exc_info.value.kind is PolishError.USE_UNAVAILABLE_CHARACTER


class TestPredicates:
    def test_is_expression(self):
        assert PNValidator.is_expression(" ")
        assert not PNValidator.is_expression("")

    def test_has_unavailable_character(self):
        assert not PNValidator.has_unavailable_character("+-*/% 0123456789")
        assert PNValidator.has_unavailable_character("=")


class TestErrorMessages:
    @pytest.mark.parametrize("kind, message", [
        (PolishError.FAILED_CALCULATE, "failed calculate"),
        (PolishError.NOT_ENOUGH_OPERANDS, "not enough operands"),
        (PolishError.USE_UNAVAILABLE_CHARACTER, "use unavailable character"),
        (PolishError.NOT_ENTERED_EXPRESSION, "not entered exoression"),
    ])
    def test_fixed_messages(self, kind, message):
        assert error_message(kind) == message
        assert str(kind) == message
        assert str(PolishNotationError(kind)) == message

    def test_closed_set(self):
        assert len(PolishError) == 4
