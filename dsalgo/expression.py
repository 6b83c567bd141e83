"""Infix arithmetic evaluation and the first-non-repeating-character stream."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from dsalgo.stack_queue import Queue, Stack

_DIGITS = frozenset("0123456789")


class ExpressionError(ValueError):
    """Raised when an expression cannot be evaluated."""

    def __init__(self, message: str = "Expression invalid") -> None:
        super().__init__(message)


def calculate(left: float, right: float, operation: str) -> float:
    """Apply a binary arithmetic operator."""
    if operation == "+":
        return left + right
    if operation == "-":
        return left - right
    if operation == "*":
        return left * right
    if operation == "/":
        if right == 0:
            raise ExpressionError()
        return left / right
    raise ExpressionError()


def _apply(operands: Stack, operators: Stack) -> None:
    right = operands.pop()
    left = operands.pop()
    operation = operators.pop()
    operands.push(calculate(left, right, operation))


def _apply_pending_products(operands: Stack, operators: Stack) -> None:
    if not operators.is_empty() and operators.peek() in ("*", "/"):
        while operators.peek() in ("*", "/"):
            _apply(operands, operators)


def _evaluate(text: str) -> float:
    operands: Stack = Stack()
    operators: Stack = Stack()
    prev = " "
    decimal_point = False
    decimal_place = 10
    size = len(text)
    i = 0

    while i < size:
        token = text[i]
        if token in _DIGITS or token == ".":
            if token == ".":
                if decimal_point:
                    raise ExpressionError()
                decimal_point = True
            else:
                digit = float(token)
                if prev in _DIGITS or prev == ".":
                    total = operands.pop()
                    if not decimal_point:
                        total = total * 10 + digit
                    else:
                        total = (total * decimal_place + digit) / decimal_place
                        decimal_place *= 10
                    operands.push(total)
                else:
                    operands.push(digit)
            prev = token
        else:
            decimal_point = False
            decimal_place = 10
            if token == "-" and prev not in _DIGITS and prev != ")":
                if prev != "(":
                    raise ExpressionError()
                negative = 0.0
                i += 1
                while True:
                    if i >= size:
                        raise ExpressionError()
                    char = text[i]
                    if char == ")":
                        break
                    if char == ".":
                        if decimal_point:
                            raise ExpressionError()
                        decimal_point = True
                    elif char in _DIGITS:
                        digit = float(char)
                        if not decimal_point:
                            negative = -((-negative) * 10 + digit)
                        else:
                            negative = -((-negative) * decimal_place + digit)
                            negative /= decimal_place
                            decimal_place *= 10
                    else:
                        raise ExpressionError()
                    i += 1
                operators.pop()
                operands.push(negative)
                decimal_point = False
                prev = ")"
            elif token in ("+", "-"):
                _apply_pending_products(operands, operators)
                operators.push(token)
                prev = token
            elif token in ("*", "/", "("):
                operators.push(token)
                prev = token
            elif token == ")":
                while operators.peek() != "(":
                    _apply(operands, operators)
                operators.pop()
                prev = token
            elif token in (" ", "\n"):
                if prev == ".":
                    raise ExpressionError()
            else:
                raise ExpressionError()
        i += 1

    if not operators.is_empty():
        raise ExpressionError()
    return operands.peek()


def evaluate(expression: str) -> float:
    """Evaluate an infix expression of numbers, + - * / and parentheses.

    A negative literal is written in parentheses, as ``(-5)``.
    """
    try:
        return _evaluate("(" + expression + ")")
    except IndexError as exc:
        raise ExpressionError() from exc


def first_non_repeating(text: str) -> str:
    """For each letter of ``text``, the first letter so far seen only once.

    Letters are case-insensitive; spaces and newlines are skipped; ``#``
    marks a point where every letter so far has repeated.
    """
    result: List[str] = []
    queue: Queue[str] = Queue()
    counts = dict.fromkeys("abcdefghijklmnopqrstuvwxyz", 0)

    for raw in text:
        char = raw.lower()
        if char in (" ", "\n"):
            continue
        if char not in counts:
            raise ValueError("Character Not Valid")
        queue.enqueue(char)
        counts[char] += 1
        while not queue.is_empty() and counts[queue.front()] > 1:
            queue.dequeue()
        result.append("#" if queue.is_empty() else queue.front())

    return "".join(result)


def _read_until_stop(stream):
    for line in stream:
        line = line.rstrip("\n").rstrip("\r")
        if line == "Stop":
            return
        yield line


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate expressions, then report first non-repeating characters."""
    print("Expression evaluation")
    print('Type "Stop" to end')
    for line in _read_until_stop(sys.stdin):
        try:
            value = evaluate(line)
        except ExpressionError:
            print("Expression Invalid")
        else:
            print(f"{value:g}")

    print("First non repeated character")
    print('Type "Stop" to end')
    for line in _read_until_stop(sys.stdin):
        try:
            print(first_non_repeating(line))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())