import pytest

from linsl.datatypes import Number, Primitive, Symbol
from linsl.environment import Environment
from linsl.primitives import add, car, cdr, eq, eq_types, gr, inv, is_nil, mul, neg


@pytest.mark.parametrize(
    "name, func",
    [
        ("+", add),
        ("neg", neg),
        ("*", mul),
        ("inv", inv),
        ("=", eq),
        (">", gr),
        ("car", car),
        ("cdr", cdr),
        ("empty?", is_nil),
        ("eqt?", eq_types),
    ],
)
def test_default_holds_primitives(name, func):
    assert Environment.default().lookup(name) == Primitive(func)


def test_default_holds_only_primitives():
    env = Environment.default()
    assert all(isinstance(value, Primitive) for value in env.bindings.values())
    assert env.outer is None


def test_define_and_lookup():
    env = Environment()
    env.define("x", Number(1))
    assert env.lookup("x") == Number(1)


def test_missing_name_raises_key_error():
    with pytest.raises(KeyError):
        Environment.default().lookup("undefined-name")


def test_child_sees_outer_bindings():
    parent = Environment()
    parent.define("x", Symbol("outer"))
    child = parent.child()
    assert child.outer is parent
    assert child.lookup("x") == Symbol("outer")


def test_child_shadows_without_touching_parent():
    parent = Environment()
    parent.define("x", Symbol("outer"))
    child = parent.child()
    child.define("x", Symbol("inner"))
    assert child.lookup("x") == Symbol("inner")
    assert parent.lookup("x") == Symbol("outer")


def test_lookup_through_several_scopes():
    root = Environment.default()
    grandchild = root.child().child()
    assert grandchild.lookup("+") == Primitive(add)
    with pytest.raises(KeyError):
        root.lookup("y") if not grandchild.define("y", Number(2)) else None
    assert grandchild.lookup("y") == Number(2)