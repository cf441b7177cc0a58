"""Stack applications: bracket matching and single-digit arithmetic."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dsprimer.stack import SeqStack

_OPENERS = frozenset("([{")
_MATCH = {")": "(", "]": "[", "}": "{"}
_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-*/")


def bracket_check(text: str) -> bool:
    """Return True if every bracket in ``text`` is matched and nested."""
    stack = SeqStack()
    for ch in text:
        if ch in _OPENERS:
            stack.push(ch)
        elif ch in _MATCH:
            if stack.is_empty() or stack.pop() != _MATCH[ch]:
                return False
    return stack.is_empty()


def bracket_check_counts(text: str) -> bool:
    """Check brackets by counting each kind; nesting order is not checked."""
    counts = dict.fromkeys("([{", 0)
    for ch in text:
        if ch in _OPENERS:
            counts[ch] += 1
        elif ch in _MATCH:
            counts[_MATCH[ch]] -= 1
            if counts[_MATCH[ch]] < 0:
                return False
    return not any(counts.values())


def bracket_check_array(text: str) -> bool:
    """Same check as :func:`bracket_check`, using a plain list as the stack."""
    pending: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            pending.append(ch)
        elif ch in _MATCH:
            if not pending or pending[-1] != _MATCH[ch]:
                return False
            pending.pop()
    return not pending


def _binds_tighter(op: str, top: str) -> bool:
    return op in "*/" and top in "+-"


def _divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    return _divide(a, b)


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression of single digits to postfix notation.

    Characters other than digits, parentheses and ``+-*/`` are ignored.
    """
    stack = SeqStack()
    out: list[str] = []
    for ch in expr:
        if ch in _DIGITS:
            out.append(ch)
        elif ch == "(":
            stack.push(ch)
        elif ch == ")":
            while not stack.is_empty():
                top = stack.pop()
                if top == "(":
                    break
                out.append(top)
        elif ch in _OPERATORS:
            while not stack.is_empty():
                top = stack.top()
                if top == "(" or _binds_tighter(ch, top):
                    break
                out.append(stack.pop())
            stack.push(ch)
    while not stack.is_empty():
        top = stack.pop()
        if top != "(":
            out.append(top)
    return "".join(out)


def evaluate_postfix(expr: str) -> int:
    """Evaluate a postfix expression of single digits with integer division."""
    stack = SeqStack()
    try:
        for ch in expr:
            if ch in _DIGITS:
                stack.push(int(ch))
            elif ch in _OPERATORS:
                b = stack.pop()
                a = stack.pop()
                stack.push(_apply(ch, a, b))
        return stack.pop()
    except IndexError as exc:
        raise ValueError(f"malformed postfix expression: {expr!r}") from exc


def evaluate_infix(expr: str) -> int:
    """Evaluate an infix expression of single digits with integer division."""
    operands = SeqStack()
    operators = SeqStack()

    def reduce(op: str) -> None:
        b = operands.pop()
        a = operands.pop()
        operands.push(_apply(op, a, b))

    try:
        for ch in expr:
            if ch in _DIGITS:
                operands.push(int(ch))
            elif ch == "(":
                operators.push(ch)
            elif ch == ")":
                while not operators.is_empty():
                    op = operators.pop()
                    if op == "(":
                        break
                    reduce(op)
            elif ch in _OPERATORS:
                while not operators.is_empty():
                    top = operators.top()
                    if top == "(" or _binds_tighter(ch, top):
                        break
                    reduce(operators.pop())
                operators.push(ch)
        while not operators.is_empty():
            op = operators.pop()
            if op != "(":
                reduce(op)
        return operands.pop()
    except IndexError as exc:
        raise ValueError(f"malformed infix expression: {expr!r}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Show bracket checking, postfix conversion and evaluation."""
    args = sys.argv[1:] if argv is None else list(argv)
    expr = args[0] if args else "3+2*(1+2)"
    print(int(bracket_check("([)]")))
    postfix = infix_to_postfix(expr)
    print(postfix)
    print(evaluate_postfix(postfix))
    print(evaluate_infix(expr))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())