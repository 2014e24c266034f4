"""Arithmetic expressions: postfix evaluation, infix conversion and expression trees."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass


def _truncating_div(y: int, x: int) -> int:
    if x == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(y) // abs(x)
    return quotient if (y < 0) == (x < 0) else -quotient


_BINARY: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
    "^": operator.xor,
}


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Operators are ``+ - * /`` and ``^``, which is bitwise exclusive or.
    Division truncates toward zero. Whitespace is ignored.
    """
    stack: list[int] = []
    for ch in expression:
        if ch.isspace():
            continue
        if "0" <= ch <= "9":
            stack.append(int(ch))
            continue
        if ch not in _BINARY:
            raise ValueError(f"unsupported character {ch!r}")
        if len(stack) < 2:
            raise ValueError(f"missing operand for {ch!r}")
        x = stack.pop()
        y = stack.pop()
        stack.append(_BINARY[ch](y, x))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


_PREFIX_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3, "(": 0}
_SWAP_PARENS = {"(": ")", ")": "("}


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix notation.

    The expression is scanned right to left with an operator stack; operators
    of equal precedence group from the left.
    """
    stack = ["("]
    out: list[str] = []
    scanned = [_SWAP_PARENS.get(ch, ch) for ch in reversed(infix)] + [")"]
    for ch in scanned:
        if _is_operand(ch):
            out.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        elif ch in _PREFIX_PRECEDENCE:
            while stack and _PREFIX_PRECEDENCE[ch] < _PREFIX_PRECEDENCE[stack[-1]]:
                out.append(stack.pop())
            stack.append(ch)
        else:
            raise ValueError(f"unsupported character {ch!r}")
    if stack:
        raise ValueError("unbalanced parentheses")
    return "".join(reversed(out))


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of ``+ - * /`` to postfix without an operator stack.

    A recursive descent does the work: ``*`` and ``/`` bind tighter than
    ``+`` and ``-``, and operators of equal precedence group from the left.
    """
    pos = 0

    def peek() -> str:
        return infix[pos] if pos < len(infix) else ""

    def take() -> str:
        nonlocal pos
        ch = infix[pos]
        pos += 1
        return ch

    def factor() -> str:
        ch = peek()
        if ch == "(":
            take()
            inner = expression()
            if peek() != ")":
                raise ValueError(f"expected ')' at position {pos}")
            take()
            return inner
        if ch and _is_operand(ch):
            return take()
        if not ch:
            raise ValueError("unexpected end of expression")
        raise ValueError(f"unexpected {ch!r} at position {pos}")

    def term() -> str:
        out = factor()
        while peek() in {"*", "/"}:
            op = take()
            out += factor() + op
        return out

    def expression() -> str:
        out = term()
        while peek() in {"+", "-"}:
            op = take()
            out += term() + op
        return out

    result = expression()
    if pos != len(infix):
        raise ValueError(f"unexpected {infix[pos]!r} at position {pos}")
    return result


@dataclass
class ExprNode:
    """A node of an expression tree: an operand leaf or an operator with two children."""

    value: str
    left: ExprNode | None = None
    right: ExprNode | None = None


_IN_STACK = {"+": 2, "-": 2, "*": 4, "/": 4, "^": 5, "(": 0}
_INCOMING = {"+": 1, "-": 1, "*": 3, "/": 3, "^": 6, "(": 7}


def expression_tree(infix: str) -> ExprNode:
    """Build the expression tree of an infix expression.

    ``+ - * /`` group from the left and ``^`` groups from the right.
    """
    operators = ["("]
    nodes: list[ExprNode] = []

    def reduce() -> None:
        op = operators.pop()
        if len(nodes) < 2:
            raise ValueError(f"missing operand for {op!r}")
        right = nodes.pop()
        left = nodes.pop()
        nodes.append(ExprNode(op, left, right))

    for ch in infix + ")":
        if _is_operand(ch):
            nodes.append(ExprNode(ch))
        elif ch == ")":
            while operators and operators[-1] != "(":
                reduce()
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        elif ch in _INCOMING:
            while operators and _INCOMING[ch] <= _IN_STACK[operators[-1]]:
                reduce()
            operators.append(ch)
        else:
            raise ValueError(f"unsupported character {ch!r}")
    if operators:
        raise ValueError("unbalanced parentheses")
    if len(nodes) != 1:
        raise ValueError("malformed infix expression")
    return nodes[0]


def _preorder(node: ExprNode | None) -> Iterator[str]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def prefix_of(node: ExprNode) -> str:
    """The prefix notation of an expression tree, read off in preorder."""
    return "".join(_preorder(node))