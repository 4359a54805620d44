"""Evaluation of Linsl expressions."""

from __future__ import annotations

from typing import Sequence

from linsl.datatypes import (
    Bool,
    Closure,
    Expr,
    LinslSyntaxError,
    ListExpr,
    Macro,
    Number,
    Primitive,
    Symbol,
)
from linsl.environment import Environment
from linsl.parsing import at_position, parse_list_of_symbols


def bind(symbols: Expr, values: Expr, env: Environment) -> Environment:
    """Bind each symbol to the matching value in ``env`` and return ``env``.

    When there are more values than symbols, the last symbol is bound to the
    list of the remaining values. More symbols than values is an error.
    """
    names = parse_list_of_symbols(symbols)
    if not isinstance(values, ListExpr):
        raise LinslSyntaxError("Expected list of values.", (2,))
    items = values.items

    if not names:
        return env
    if len(names) > len(items):
        raise LinslSyntaxError(
            f"Got {len(names)} symbols and {len(items)} values; "
            "cannot have more symbols than values.",
            (1,),
        )

    for name, value in zip(names, items):
        env.define(name, value)
    if len(names) < len(items):
        env.define(names[-1], ListExpr(items[len(names) - 1:]))
    return env


def evaluate(expr: Expr, pos: int, env: Environment) -> Expr:
    """Evaluate ``expr`` in ``env``; ``pos`` is its position within its parent."""
    if isinstance(expr, (Bool, Number)):
        return expr
    if isinstance(expr, ListExpr):
        with at_position(pos):
            return _evaluate_list(expr.items, env)
    if isinstance(expr, Symbol):
        try:
            return env.lookup(expr.name)
        except KeyError:
            raise LinslSyntaxError(f"Undefined symbol '{expr.name}'", (pos,)) from None
    raise LinslSyntaxError(f"Expected list or atom, found '{expr}'", (pos,))


def _evaluate_list(exprs: Sequence[Expr], env: Environment) -> Expr:
    if not exprs:
        raise LinslSyntaxError("Expected non-empty list", (0,))
    head, params = exprs[0], exprs[1:]

    if isinstance(head, Symbol) and head.name in _BUILT_IN_FORMS:
        return _BUILT_IN_FORMS[head.name](params, env)

    operator = evaluate(head, 0, env)
    if isinstance(operator, Closure):
        args = ListExpr(evaluate(form, index, env) for index, form in enumerate(params))
        scope = env.child()
        with at_position(1):
            bind(operator.params, args, scope)
        return evaluate(operator.body, 2, scope)
    if isinstance(operator, Primitive):
        args = [evaluate(form, index, env) for index, form in enumerate(params, 1)]
        return operator.func(args)
    if isinstance(operator, Macro):
        scope = env.child()
        with at_position(1):
            bind(operator.params, ListExpr(params), scope)
        expansion = evaluate(operator.body, 2, scope)
        return evaluate(expansion, 1, env)
    raise LinslSyntaxError(
        f"Expected the head of list to be a primitive, found '{operator}'", (0,)
    )


def _evaluate_define(exprs: Sequence[Expr], env: Environment) -> Expr:
    if len(exprs) != 2:
        raise LinslSyntaxError(f"define must have two forms, found '{len(exprs)}'", (0,))
    name_form, value_form = exprs
    if not isinstance(name_form, Symbol):
        raise LinslSyntaxError(
            f"First define form must be a symbol, found '{name_form}'", (1,)
        )
    value = evaluate(value_form, 2, env)
    env.define(name_form.name, value)
    return name_form


def _evaluate_if(exprs: Sequence[Expr], env: Environment) -> Expr:
    if len(exprs) != 3:
        raise LinslSyntaxError(f"Expected 3 arguments to if, found {len(exprs)}", (0,))
    test_form, then_form, else_form = exprs
    test = evaluate(test_form, 1, env)
    if not isinstance(test, Bool):
        raise LinslSyntaxError(
            f"Test form must evaluate to bool, but evaluated to '{test}'", (1,)
        )
    if test.value:
        return evaluate(then_form, 2, env)
    return evaluate(else_form, 3, env)


def _params_and_body(exprs: Sequence[Expr]) -> tuple[Expr, Expr]:
    if len(exprs) != 2:
        raise LinslSyntaxError(
            f"Lambda must be given two expressions, found {len(exprs)}", (0,)
        )
    params, body = exprs
    return params, body


def _evaluate_lambda(exprs: Sequence[Expr], env: Environment) -> Expr:
    return Closure(*_params_and_body(exprs))


def _evaluate_macro(exprs: Sequence[Expr], env: Environment) -> Expr:
    return Macro(*_params_and_body(exprs))


def _evaluate_quote(exprs: Sequence[Expr], env: Environment) -> Expr:
    if not exprs:
        raise LinslSyntaxError("Found no expression to quote.", (0,))
    return exprs[0]


_BUILT_IN_FORMS = {
    "define": _evaluate_define,
    "if": _evaluate_if,
    "lambda": _evaluate_lambda,
    "macro": _evaluate_macro,
    "quote": _evaluate_quote,
}