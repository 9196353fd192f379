import pytest

from pinfall.calculator import CalculatorInput, evaluate

OPS = {op.value: op for op in CalculatorInput}


def calculator_input(s):
    return [OPS[t] if t in OPS else int(t) for t in s.split()]


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("", None),
        ("10", 10),
        ("2 2 +", 4),
        ("7 11 -", -4),
        ("6 9 *", 54),
        ("57 19 /", 3),
        ("4 8 + 7 5 - /", 6),
        ("-7 2 /", -3),
        ("2 +", None),
        ("2 2", None),
        ("+", None),
        ("+ 2 2 *", None),
        ("1 0 /", None),
    ],
)
def test_evaluate(expr, expected):
    assert evaluate(calculator_input(expr)) == expected


@pytest.mark.parametrize("tokens", [[2.7], ["3"], [2, "3", CalculatorInput.ADD], [True]])
def test_non_integer_values_give_no_result(tokens):
    assert evaluate(tokens) is None
