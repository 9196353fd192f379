"""Postfix (RPN) integer calculator."""
from __future__ import annotations
from enum import Enum
from typing import Optional, Sequence, Union


class CalculatorInput(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


Token = Union[CalculatorInput, int]


def _div(a: int, b: int) -> Optional[int]:
    if b == 0:
        return None
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q  # truncate toward zero


def calculate(a: int, b: int, op: CalculatorInput) -> Optional[int]:
    if op is CalculatorInput.ADD:
        return a + b
    if op is CalculatorInput.SUBTRACT:
        return a - b
    if op is CalculatorInput.MULTIPLY:
        return a * b
    if op is CalculatorInput.DIVIDE:
        return _div(a, b)
    raise ValueError(f"unknown operator {op!r}")


def evaluate(tokens: Sequence[Token]) -> Optional[int]:
    """Evaluate `tokens`; None for an empty or malformed expression."""
    stack: list[int] = []
    for tok in tokens:
        if not isinstance(tok, CalculatorInput):
            if not isinstance(tok, int) or isinstance(tok, bool):
                return None
            stack.append(tok)
            continue
        if len(stack) < 2:
            return None
        b = stack.pop()
        a = stack.pop()
        value = calculate(a, b, tok)
        if value is None:
            return None
        stack.append(value)
    if len(stack) != 1:
        return None
    return stack[0]
