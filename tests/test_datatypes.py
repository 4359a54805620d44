import math

from linsl.datatypes import (
    Bool,
    Closure,
    InternalError,
    ListExpr,
    LinslSyntaxError,
    Macro,
    Number,
    Primitive,
    Symbol,
    UnbalancedParens,
)


def test_bool_display():
    assert str(Bool(True)) == "#t"
    assert str(Bool(False)) == "#f"


def test_primitive_display():
    assert str(Primitive(lambda args: Number(0))) == "Primitive operator"


def test_symbol_display_is_name():
    assert str(Symbol("abc")) == "abc"


def test_list_display():
    assert str(ListExpr([Symbol("a"), Bool(True)])) == "(a #t)"


def test_list_items_become_tuple():
    items = [Symbol("a"), Number(1)]
    assert ListExpr(items).items == tuple(items)


def test_integral_number_display():
    assert str(Number(3.0)) == "3"


def test_number_display_round_trips():
    for value in (0.5, 1e23, 1e-7, -2.25, 123456.0):
        text = str(Number(value))
        assert "e" not in text.lower()
        assert float(text) == value


def test_negative_zero_display_keeps_sign():
    text = str(Number(-0.0))
    assert text.startswith("-")
    assert math.copysign(1.0, float(text)) < 0


def test_number_converts_ints():
    assert Number(2).value == 2.0
    assert isinstance(Number(2).value, float)


def test_closure_display():
    closure = Closure(ListExpr([Symbol("x")]), Symbol("x"))
    assert str(closure) == "(lambda (x), x)"


def test_macro_display_starts_with_macro():
    macro = Macro(ListExpr([Symbol("x")]), Symbol("x"))
    assert str(macro).startswith("(macro ")
    assert str(macro).endswith(str(Symbol("x")) + ")")


def test_internal_error_message():
    assert str(InternalError("boom")) == "boom"


def test_with_position_appends_and_copies():
    err = LinslSyntaxError("m", (1,))
    outer = err.with_position(2)
    assert outer.positions == (1, 2)
    assert err.positions == (1,)
    assert outer.message == "m"


def test_syntax_error_display_drops_outermost_position():
    assert str(LinslSyntaxError("m", (5,))) == str(LinslSyntaxError("m", ()))
    assert str(LinslSyntaxError("m", (4, 5))) != str(LinslSyntaxError("m", (4,)))
    assert str(LinslSyntaxError("m", ())).startswith("Syntax error at ")
    assert str(LinslSyntaxError("m", (1, 2))).endswith(": m")


def test_unbalanced_parens_counts():
    err = UnbalancedParens(2, 1)
    assert (err.opening, err.closing) == (2, 1)
    assert str(err).startswith("Unbalanced Parenthesis")