"""Tokenizing and parsing Linsl source text into expressions."""

from __future__ import annotations

import itertools
from contextlib import contextmanager
from typing import Iterator, Sequence

from linsl.datatypes import (
    Bool,
    Expr,
    InternalError,
    LinslSyntaxError,
    ListExpr,
    Number,
    Symbol,
    UnbalancedParens,
)


@contextmanager
def at_position(pos: int) -> Iterator[None]:
    """Append ``pos`` to the positions of any syntax error raised inside."""
    try:
        yield
    except LinslSyntaxError as err:
        raise err.with_position(pos) from None


def tokenize(text: str) -> list[str]:
    """Split source text into tokens, checking that parentheses balance."""
    opening = text.count("(")
    closing = text.count(")")
    if opening != closing:
        raise UnbalancedParens(opening, closing)
    return text.replace("(", " ( ").replace(")", " ) ").split()


def parse(tokens: Sequence[str], start_pos: int = 0) -> tuple[Expr, list[str]]:
    """Parse one expression from ``tokens``; return it and the remaining tokens."""
    if not tokens:
        raise InternalError("Unexpected EOF")
    token, rest = tokens[0], list(tokens[1:])
    if token == "(":
        with at_position(start_pos):
            return _read_list(rest)
    if token == ")":
        raise LinslSyntaxError("Unexpected closing parenthesis.", (start_pos,))
    return parse_atom(token), rest


def _read_list(tokens: list[str]) -> tuple[Expr, list[str]]:
    if not tokens:
        raise LinslSyntaxError("Found only opening parentheses.", (0,))
    elements: list[Expr] = []
    remaining = tokens
    for position in itertools.count():
        if not remaining:
            raise LinslSyntaxError("Could not read element of list.", (position,))
        if remaining[0] == ")":
            return ListExpr(elements), remaining[1:]
        element, remaining = parse(remaining, position)
        elements.append(element)
    raise InternalError("Could not read list")  # pragma: no cover


def parse_atom(atom: str) -> Expr:
    """Turn a single token into a boolean, number or symbol."""
    if atom == "#t":
        return Bool(True)
    if atom == "#f":
        return Bool(False)
    if atom.isascii() and "_" not in atom:
        try:
            return Number(float(atom))
        except ValueError:
            pass
    return Symbol(atom)


def parse_num(expr: Expr, position: int) -> float:
    """Return the value of a number expression, or raise a syntax error."""
    if isinstance(expr, Number):
        return expr.value
    raise LinslSyntaxError(f"Expected numbers, found '{expr}'", (position,))


def parse_list_of_nums(exprs: Sequence[Expr], start_index: int) -> list[float]:
    """Return the values of number expressions, numbering them from ``start_index``."""
    return [parse_num(expr, index) for index, expr in enumerate(exprs, start_index)]


def parse_list_of_symbols(expr: Expr) -> list[str]:
    """Return the names in a list of symbols."""
    if not isinstance(expr, ListExpr):
        raise LinslSyntaxError(f"Expected list of symbols, found '{expr}'", (0,))
    names = []
    for index, item in enumerate(expr.items):
        if not isinstance(item, Symbol):
            raise LinslSyntaxError(f"Expected symbol, found '{item}'", (index,))
        names.append(item.name)
    return names