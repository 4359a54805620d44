import io

import pytest

from linsl.datatypes import (
    InternalError,
    LinslSyntaxError,
    ListExpr,
    Number,
    Symbol,
    UnbalancedParens,
)
from linsl.environment import Environment
from linsl.repl import main, parse_eval


@pytest.fixture
def env():
    return Environment.default()


def test_parse_eval_returns_result(env):
    assert parse_eval("(quote (a b))", env) == ListExpr([Symbol("a"), Symbol("b")])


def test_parse_eval_keeps_definitions(env):
    assert parse_eval("(define x 4)", env) == Symbol("x")
    assert parse_eval("x", env) == Number(4)


def test_trailing_tokens_are_error(env):
    with pytest.raises(LinslSyntaxError) as info:
        parse_eval("1 2", env)
    assert str(info.value) == "Syntax error at (): Unexpected characters at end."


def test_unbalanced_parentheses(env):
    with pytest.raises(UnbalancedParens) as info:
        parse_eval("(+ 1 2", env)
    assert (info.value.opening, info.value.closing) == (1, 0)
    assert str(info.value) == "Unbalanced Parenthesis (1, 0)"


def test_empty_input(env):
    with pytest.raises(InternalError) as info:
        parse_eval("", env)
    assert str(info.value) == "Unexpected EOF"


def test_main_prints_results_and_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(define x 4)\nx\n(car 1)\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Linsl> x\n"
        "Linsl> 4\n"
        "Linsl> Syntax error at (1): Can only find car of lists\n"
        "Linsl> \n"
    )


def test_main_reports_unbalanced(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 1\n"))
    assert main([]) == 0
    assert "Unbalanced Parenthesis (1, 0)" in capsys.readouterr().out