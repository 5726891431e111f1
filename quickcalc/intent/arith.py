"""Safe arithmetic evaluator.

Only digits, `.`, `+ - * / % ^` and parentheses are accepted. The expression is tokenized and
evaluated by a small recursive-descent parser; nothing is ever compiled or executed.

Grammar (usual precedence, `^` right-associative and tighter than unary minus on its left):

    expr  := term (("+" | "-") term)*
    term  := unary (("*" | "/" | "%") unary)*
    unary := ("+" | "-") unary | power
    power := atom ("^" unary)?
    atom  := NUMBER | "(" expr ")"
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from quickcalc.intent.formatting import format_integer, strip_zeros, to_fixed

MAX_EXPRESSION_LENGTH = 1000
MAX_NESTING_DEPTH = 100

_WHITESPACE_RE = re.compile(r"\s+")
_ALLOWED_RE = re.compile(r"[\d+\-*/().%^]+", flags=re.ASCII)
_TOKEN_RE = re.compile(r"(?P<number>\d+(?:\.\d*)?|\.\d+)|(?P<op>[-+*/%^()])", flags=re.ASCII)


class ArithmeticSyntaxError(ValueError):
    """Raised when a whitelisted expression is still not well-formed."""


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str


def strip_whitespace(expr: str) -> str:
    return _WHITESPACE_RE.sub("", expr or "")


def is_safe_expression(expr: str) -> bool:
    """Whether `expr` (whitespace ignored) uses only the arithmetic character set."""

    return _ALLOWED_RE.fullmatch(strip_whitespace(expr)) is not None


def _tokenize(expr: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    while pos < len(expr):
        match = _TOKEN_RE.match(expr, pos)
        if match is None:
            raise ArithmeticSyntaxError(f"unexpected character at {pos}")
        kind = match.lastgroup or "op"
        tokens.append(_Token(kind=kind, text=match.group(kind)))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, tokens: list[_Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._depth = 0

    def parse(self) -> float:
        value = self._expr()
        if self._peek() is not None:
            raise ArithmeticSyntaxError("trailing input")
        return value

    def _peek(self) -> str | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos].text
        return None

    def _next(self) -> _Token:
        if self._pos >= len(self._tokens):
            raise ArithmeticSyntaxError("unexpected end of expression")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > MAX_NESTING_DEPTH:
            raise ArithmeticSyntaxError("expression is nested too deeply")

    def _leave(self) -> None:
        self._depth -= 1

    def _expr(self) -> float:
        value = self._term()
        while self._peek() in {"+", "-"}:
            op = self._next().text
            rhs = self._term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def _term(self) -> float:
        value = self._unary()
        while self._peek() in {"*", "/", "%"}:
            op = self._next().text
            rhs = self._unary()
            if op == "*":
                value = value * rhs
            elif op == "/":
                value = value / rhs
            else:
                value = math.fmod(value, rhs)
        return value

    def _unary(self) -> float:
        if self._peek() in {"+", "-"}:
            op = self._next().text
            self._enter()
            try:
                value = self._unary()
            finally:
                self._leave()
            return -value if op == "-" else value
        return self._power()

    def _power(self) -> float:
        base = self._atom()
        if self._peek() != "^":
            return base
        self._next()
        self._enter()
        try:
            exponent = self._unary()
        finally:
            self._leave()
        return math.pow(base, exponent)

    def _atom(self) -> float:
        token = self._next()
        if token.kind == "number":
            return float(token.text)
        if token.text == "(":
            self._enter()
            try:
                value = self._expr()
            finally:
                self._leave()
            if self._next().text != ")":
                raise ArithmeticSyntaxError("expected ')'")
            return value
        raise ArithmeticSyntaxError(f"unexpected token {token.text!r}")


def evaluate(expr: str) -> float:
    """Evaluate a whitelisted arithmetic expression.

    Raises:
        ArithmeticSyntaxError: Malformed, too long or too deeply nested input.
        ZeroDivisionError, ValueError, OverflowError: Mathematically undefined results.
    """

    compact = strip_whitespace(expr)
    if len(compact) > MAX_EXPRESSION_LENGTH:
        raise ArithmeticSyntaxError("expression is too long")
    if _ALLOWED_RE.fullmatch(compact) is None:
        raise ArithmeticSyntaxError("unsupported character")
    return _Parser(_tokenize(compact)).parse()


def format_number(value: float) -> str:
    """Integers without decimal point; otherwise up to six decimals, trailing zeros stripped."""

    if value.is_integer():
        return format_integer(value)
    return strip_zeros(to_fixed(value, 6))


def eval_math(expr: str) -> str:
    """Evaluate `expr` and format the result.

    Returns an empty string when the input is not a valid arithmetic expression or the result is
    not a finite number.
    """

    try:
        value = evaluate(expr)
    except (ArithmeticSyntaxError, ArithmeticError, ValueError):
        return ""
    if not math.isfinite(value):
        return ""
    return format_number(value)
