"""Tests for the arithmetic expression evaluator."""

import math

import pytest

from husky.core.errors import ParseError
from husky.core.expression import (
    ExpressionParser,
    MAX_NESTING,
    evaluate,
    real_power,
    real_power_logexp,
    square_root,
)


class TestPrecedence:
    def test_multiplication_before_addition(self):
        assert evaluate("2 + 3 * 4") == 14.0

    def test_parentheses(self):
        assert evaluate("(2 + 3) * 4") == 20.0

    def test_left_associative_subtraction(self):
        assert evaluate("10 - 4 - 3") == 3.0

    def test_left_associative_division(self):
        assert evaluate("100 / 10 / 5") == 2.0

    def test_power_before_multiplication(self):
        assert evaluate("2 * 3 ^ 2") == 18.0

    def test_power_right_associative(self):
        assert evaluate("2 ^ 3 ^ 2") == 512.0

    def test_nested(self):
        assert evaluate("((1 + 2) * (3 + 4)) / 7") == 3.0

    def test_no_whitespace(self):
        assert evaluate("2+3*4-1") == 13.0


class TestNumbers:
    def test_integer(self):
        assert evaluate("42") == 42.0
        assert isinstance(evaluate("42"), float)

    def test_float(self):
        assert evaluate("3.25") == 3.25

    def test_leading_dot(self):
        assert evaluate(".5 * 4") == 2.0

    def test_signed(self):
        assert evaluate("-3 + 5") == 2.0
        assert evaluate("+3") == 3.0

    def test_subtract_negative(self):
        assert evaluate("2 - -3") == 5.0

    def test_scientific(self):
        assert evaluate("1.5e3") == 1500.0
        assert evaluate("2E-2") == pytest.approx(0.02)

    def test_surrounding_whitespace(self):
        assert evaluate("   7   ") == 7.0

    def test_large_integer(self):
        assert evaluate("12345678901234567890") == pytest.approx(1.2345678901234567e19)

    def test_integer_beyond_double_range(self):
        assert evaluate("1" + "0" * 400) == math.inf


class TestFunctions:
    def test_sqrt(self):
        assert evaluate("sqrt(16)") == 4.0

    def test_sqrt_of_expression(self):
        assert evaluate("sqrt(2 * 8) + 1") == 5.0

    def test_sqrt_negative_is_nan(self):
        assert math.isnan(evaluate("sqrt(-1)"))

    def test_real_power(self):
        assert evaluate("2 ^ 0.5") == pytest.approx(1.4142135623730951, rel=1e-15)

    def test_negative_exponent(self):
        assert evaluate("2 ^ -1") == 0.5

    def test_negative_base_fractional_exponent(self):
        assert math.isnan(evaluate("(-8) ^ (1/3)"))


class TestIEEE:
    def test_division_by_zero(self):
        assert evaluate("1 / 0") == math.inf
        assert evaluate("-1 / 0") == -math.inf

    def test_zero_by_zero(self):
        assert math.isnan(evaluate("0 / 0"))

    def test_overflow(self):
        assert evaluate("10 ^ 400") == math.inf


class TestRealPower:
    @pytest.mark.parametrize(
        "a, x, expected",
        [
            (2.0, 10.0, 1024.0),
            (10.0, -2.0, 0.01),
            (9.0, 0.5, 3.0),
            (math.e, 1.0, math.e),
            (2.0, math.pi, 8.824977827076287),
        ],
    )
    def test_values(self, a, x, expected):
        assert real_power(a, x) == pytest.approx(expected, rel=1e-15)

    def test_matches_log_exp_identity(self):
        for a, x in [(2.0, 0.5), (10.0, -2.0), (3.7, 2.2), (0.5, -1.5)]:
            assert real_power(a, x) == pytest.approx(real_power_logexp(a, x), rel=1e-12)

    def test_square_root(self):
        assert square_root(2.0) == pytest.approx(math.sqrt(2.0))
        assert math.isnan(square_root(-4.0))


class TestParseErrors:
    def test_missing_operand(self):
        with pytest.raises(ParseError) as exc:
            evaluate("2 + ")
        assert exc.value.position == 4
        assert exc.value.found is None
        assert str(exc.value).startswith("Parse error at column 5: unexpected end of input")

    def test_empty(self):
        with pytest.raises(ParseError) as exc:
            evaluate("")
        assert exc.value.position == 0

    def test_unbalanced_open(self):
        with pytest.raises(ParseError) as exc:
            evaluate("(1 + 2")
        assert exc.value.position == 6
        assert exc.value.expected == "')'"

    def test_unbalanced_close(self):
        with pytest.raises(ParseError) as exc:
            evaluate("1 + 2)")
        assert exc.value.position == 5
        assert exc.value.found == ")"

    def test_unknown_token(self):
        with pytest.raises(ParseError) as exc:
            evaluate("2 $ 3")
        assert exc.value.position == 2
        assert "'$'" in str(exc.value)

    def test_sqrt_requires_parentheses(self):
        with pytest.raises(ParseError) as exc:
            evaluate("sqrt 4")
        assert exc.value.position == 5

    def test_trailing_word(self):
        with pytest.raises(ParseError):
            evaluate("1 m")

    def test_deep_parentheses(self):
        with pytest.raises(ParseError) as exc:
            evaluate("(" * 400 + "1" + ")" * 400)
        assert exc.value.expected == "less deeply nested expression"
        # the opening parenthesis one level past the limit has been consumed
        assert exc.value.position == MAX_NESTING + 1

    def test_long_power_chain(self):
        with pytest.raises(ParseError) as exc:
            evaluate(" ^ ".join(["1"] * 1500))
        assert exc.value.expected == "less deeply nested expression"

    def test_nesting_within_limit(self):
        depth = MAX_NESTING - 1
        assert evaluate("(" * depth + "2" + ")" * depth) == 2.0
        assert evaluate("sqrt(" * 3 + "256" + ")" * 3) == 2.0
        assert evaluate(" ^ ".join(["1"] * 50)) == 1.0


class TestExpressionParser:
    def test_prefix_then_words(self):
        parser = ExpressionParser("3 * 4 m to ft")
        assert parser.expression() == 12.0
        assert parser.word() == "m"
        assert parser.word() == "to"
        assert parser.word() == "ft"
        assert parser.at_end()

    def test_word_absent(self):
        parser = ExpressionParser("1 + 2")
        assert parser.word() is None
        assert parser.pos == 0
