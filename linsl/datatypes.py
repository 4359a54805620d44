"""Expression and error types of the Linsl language."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, Sequence


def _format_number(value: float) -> str:
    """Render a number in plain decimal notation, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    exact = Decimal(repr(value))
    if value.is_integer():
        exact = exact.to_integral_value()
    return format(exact, "f")


class Expr:
    """Base class of every Linsl expression."""

    __slots__ = ()


@dataclass(frozen=True)
class Bool(Expr):
    """One of '#t' or '#f'."""

    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True)
class Number(Expr):
    """A floating point number."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return _format_number(self.value)


@dataclass(frozen=True)
class Symbol(Expr):
    """A name, looked up in the environment when evaluated."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListExpr(Expr):
    """A sequence of expressions."""

    items: tuple[Expr, ...] = ()

    def __init__(self, items: Iterable[Expr] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class Closure(Expr):
    """A lambda function: a parameter list and a body."""

    params: Expr
    body: Expr

    def __str__(self) -> str:
        return f"(lambda {self.params}, {self.body})"


@dataclass(frozen=True)
class Macro(Expr):
    """Like a closure, but its arguments are passed unevaluated."""

    params: Expr
    body: Expr

    def __str__(self) -> str:
        return f"(macro {self.params}, {self.body})"


@dataclass(frozen=True)
class Primitive(Expr):
    """A built-in transformation of already evaluated arguments."""

    func: Callable[[Sequence[Expr]], Expr]

    def __str__(self) -> str:
        return "Primitive operator"


class LinslError(Exception):
    """Base class of errors raised while parsing or evaluating code."""


class InternalError(LinslError):
    """An error of the interpreter itself rather than of the code."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LinslSyntaxError(LinslError):
    """An error in the code, with the path of positions where it occurred.

    Positions are ordered from the innermost expression outwards.
    """

    def __init__(self, message: str, positions: Iterable[int] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.positions = tuple(positions)

    def with_position(self, pos: int) -> LinslSyntaxError:
        """Return a copy of this error with an enclosing position appended."""
        return LinslSyntaxError(self.message, (*self.positions, pos))

    def __str__(self) -> str:
        shown = ", ".join(str(p) for p in reversed(self.positions[:-1]))
        return f"Syntax error at ({shown}): {self.message}"


class UnbalancedParens(LinslError):
    """The numbers of opening and closing parentheses differ."""

    def __init__(self, opening: int, closing: int) -> None:
        super().__init__(opening, closing)
        self.opening = opening
        self.closing = closing

    def __str__(self) -> str:
        return f"Unbalanced Parenthesis ({self.opening}, {self.closing})"