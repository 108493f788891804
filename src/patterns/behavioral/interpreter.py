"""Interpreter: gramática mínima de expresiones aritméticas.

Gramática (tokens separados por espacios, evaluación izquierda a derecha
con `*` más prioritario que `+`/`-`)::

    expr   := term (("+" | "-") term)*
    term   := number ("*" number)*
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class Expression(ABC):
    @abstractmethod
    def interpret(self) -> int: ...


class Number(Expression):
    def __init__(self, value: int) -> None:
        self.value = value

    def interpret(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return str(self.value)


class BinaryExpression(Expression):
    symbol = "?"

    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"({self.left!r} {self.symbol} {self.right!r})"


class Add(BinaryExpression):
    symbol = "+"

    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


class Subtract(BinaryExpression):
    symbol = "-"

    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


class Multiply(BinaryExpression):
    symbol = "*"

    def interpret(self) -> int:
        return self.left.interpret() * self.right.interpret()


_ADDITIVE: dict[str, type[BinaryExpression]] = {"+": Add, "-": Subtract}


def _number(token: str) -> Number:
    try:
        return Number(int(token))
    except ValueError:
        raise ValueError(f"unexpected token: {token!r}") from None


def parse(source: str) -> Expression:
    tokens = source.split()
    if not tokens or len(tokens) % 2 == 0:
        raise ValueError(f"malformed expression: {source!r}")

    def term(start: int) -> tuple[Expression, int]:
        node: Expression = _number(tokens[start])
        pos = start + 1
        while pos < len(tokens) and tokens[pos] == "*":
            node = Multiply(node, _number(tokens[pos + 1]))
            pos += 2
        return node, pos

    tree, pos = term(0)
    while pos < len(tokens):
        operator = tokens[pos]
        if operator not in _ADDITIVE:
            raise ValueError(f"unexpected token: {operator!r}")
        right, pos = term(pos + 1)
        tree = _ADDITIVE[operator](tree, right)
    return tree


class InterpreterDemo(DemoBase):
    info = PatternInfo(
        slug="interpreter",
        name="Interpreter",
        category=PatternCategory.BEHAVIORAL,
        intent="Given a language, define a representation for its grammar along with an interpreter for it.",
        intent_es="Dado un lenguaje, define una representación de su gramática y un intérprete para ella.",
    )

    def run(self, emit: Emit) -> None:
        for source in ("5 + 3 - 2", "2 * 3 + 4", "10 - 2 * 3 * 1"):
            tree = parse(source)
            emit(f"{source} => {tree!r} = {tree.interpret()}")

        try:
            parse("4 / 2")
        except ValueError as exc:
            emit(f"Parse error: {exc}")
