import dataclasses
import random

import pytest

from core.equation import (
    OPERAND_MAX,
    OPERAND_MIN,
    RESULT_TOLERANCE,
    Equation,
    apply_operator,
    format_result,
    generate_equation,
    parse_equation_text,
)


def test_comparison_text():
    assert Equation.comparison(3, 7).text == "3 ? 7"


@pytest.mark.parametrize("a, b, op, text", [
    (4, 2, "*", "4 ? 2 = 8"),
    (2, 9, "-", "2 ? 9 = -7"),
    (6, 3, "/", "6 ? 3 = 2"),
    (7, 3, "/", "7 ? 3 = 2.333333"),
    (1, 8, "/", "1 ? 8 = 0.125"),
])
def test_arithmetic_text(a, b, op, text):
    assert Equation.arithmetic(a, b, op).text == text


def test_division_result_is_float():
    equation = Equation.arithmetic(6, 3, "/")
    assert isinstance(equation.result, float)
    assert equation.result == 2.0


def test_division_by_zero_guard():
    assert apply_operator(5, 0, "/") == 0.0


def test_unknown_operator_rejected():
    with pytest.raises(ValueError):
        apply_operator(1, 2, "%")


def test_equation_is_immutable():
    equation = Equation.comparison(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        equation.a = 5


def test_format_result():
    assert format_result(8) == "8"
    assert format_result(2.0) == "2"
    assert format_result(0.5) == "0.5"


def test_check_comparison():
    equation = Equation.comparison(3, 7)
    assert equation.check_comparison("<")
    assert not equation.check_comparison(">")
    assert not equation.check_comparison("=")
    with pytest.raises(ValueError):
        equation.check_comparison("!")


def test_check_operator_accepts_any_true_claim():
    equation = Equation.arithmetic(2, 2, "+")
    assert equation.check_operator("+")
    assert equation.check_operator("*")
    assert not equation.check_operator("-")


def test_generated_comparison_round_trip():
    rng = random.Random(3)
    for _ in range(100):
        equation = generate_equation(True, rng)
        assert OPERAND_MIN <= equation.a <= OPERAND_MAX
        assert OPERAND_MIN <= equation.b <= OPERAND_MAX
        assert parse_equation_text(equation.text, True) == (equation.a, equation.b)


def test_generated_arithmetic_round_trip():
    rng = random.Random(11)
    for _ in range(100):
        equation = generate_equation(False, rng)
        a, b, result = parse_equation_text(equation.text, False)
        assert (a, b) == (equation.a, equation.b)
        assert abs(result - equation.result) < RESULT_TOLERANCE


@pytest.mark.parametrize("text, comparison_mode", [
    ("3 < 7", True),
    ("3 ? 7 = 10", True),
    ("3 ? 7", False),
    ("3 ? 7 + 10", False),
    ("tres ? 7", True),
])
def test_malformed_text_rejected(text, comparison_mode):
    with pytest.raises(ValueError):
        parse_equation_text(text, comparison_mode)
