"""The interactive read-eval-print loop."""

from __future__ import annotations

import argparse
from typing import Sequence

from linsl.datatypes import Expr, LinslError, LinslSyntaxError
from linsl.environment import Environment
from linsl.evaluation import evaluate
from linsl.parsing import parse, tokenize

PROMPT = "Linsl> "


def parse_eval(text: str, env: Environment) -> Expr:
    """Parse a single expression from ``text`` and evaluate it in ``env``."""
    expr, rest = parse(tokenize(text), 0)
    if rest:
        raise LinslSyntaxError("Unexpected characters at end.", ())
    return evaluate(expr, 0, env)


def main(argv: Sequence[str] | None = None) -> int:
    """Read expressions line by line, printing each result or error."""
    parser = argparse.ArgumentParser(
        prog="linsl", description="A simple interpreter for a lisp-like language."
    )
    parser.parse_args(argv)

    env = Environment.default()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        try:
            result = parse_eval(line, env)
        except LinslError as err:
            print(err)
        else:
            print(result)