"""The built-in functions: just enough to define everything else in Linsl."""

from __future__ import annotations

from typing import Sequence

from linsl.datatypes import (
    Bool,
    Closure,
    Expr,
    InternalError,
    LinslSyntaxError,
    ListExpr,
    Macro,
    Number,
    Primitive,
    Symbol,
)
from linsl.parsing import parse_list_of_nums, parse_num


def add(args: Sequence[Expr]) -> Expr:
    """Sum numeric arguments."""
    return Number(sum(parse_list_of_nums(args, 1), 0.0))


def neg(args: Sequence[Expr]) -> Expr:
    """Negate a single number; with no argument, negate zero."""
    value = parse_num(args[0], 1) if args else 0.0
    return Number(-value)


def mul(args: Sequence[Expr]) -> Expr:
    """Multiply numeric arguments."""
    product = 1.0
    for value in parse_list_of_nums(args, 1):
        product *= value
    return Number(product)


def inv(args: Sequence[Expr]) -> Expr:
    """Return the multiplicative inverse of a number."""
    if not args:
        raise LinslSyntaxError("No number to invert!", (1,))
    value = parse_num(args[0], 1)
    if value == 0:
        raise LinslSyntaxError("Cannot invert 0", (1,))
    return Number(1.0 / value)


def eq(args: Sequence[Expr]) -> Expr:
    """Compare two numbers, symbols or booleans for equality."""
    if len(args) != 2:
        raise LinslSyntaxError(f"Expected 2 arguments to compare, got {len(args)}", (0,))
    match tuple(args):
        case (Bool(a), Bool(b)) | (Number(a), Number(b)) | (Symbol(a), Symbol(b)):
            return Bool(a == b)
    raise LinslSyntaxError(
        "Can only compare expressions the same types, and only bools, numbers and symbols.",
        (0,),
    )


def gr(args: Sequence[Expr]) -> Expr:
    """Return whether the first number is greater than the second."""
    if len(args) != 2:
        raise InternalError(f"Expected two numbers two compare, got {len(args)}")
    match tuple(args):
        case (Number(a), Number(b)):
            return Bool(a > b)
    raise LinslSyntaxError("Can only compare numbers with >", (0,))


def _single_argument(args: Sequence[Expr]) -> Expr:
    if len(args) != 1:
        raise LinslSyntaxError(f"Expected 1 argument, found {len(args)}", (1,))
    return args[0]


def car(args: Sequence[Expr]) -> Expr:
    """Return the first element of a list, or the empty list."""
    arg = _single_argument(args)
    if not isinstance(arg, ListExpr):
        raise LinslSyntaxError("Can only find car of lists", (1,))
    return arg.items[0] if arg.items else ListExpr()


def cdr(args: Sequence[Expr]) -> Expr:
    """Return a list without its first element."""
    arg = _single_argument(args)
    if not isinstance(arg, ListExpr):
        raise LinslSyntaxError("Can only find cdr of lists.", (1,))
    return ListExpr(arg.items[1:])


def is_nil(args: Sequence[Expr]) -> Expr:
    """Return whether the argument is the empty list."""
    arg = _single_argument(args)
    return Bool(isinstance(arg, ListExpr) and not arg.items)


_KINDS = (Bool, Closure, ListExpr, Number, Primitive, Symbol, Macro)


def eq_types(args: Sequence[Expr]) -> Expr:
    """Return whether two expressions are of the same kind."""
    if len(args) != 2:
        raise LinslSyntaxError(f"Expected 2 arguments, found {len(args)}", (1,))
    first, second = args
    same = any(isinstance(first, kind) and isinstance(second, kind) for kind in _KINDS)
    return Bool(same)