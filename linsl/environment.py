"""Scoped bindings between symbol names and expressions."""

from __future__ import annotations

from dataclasses import dataclass, field

from linsl.datatypes import Expr, Primitive
from linsl.primitives import add, car, cdr, eq, eq_types, gr, inv, is_nil, mul, neg

_PRIMITIVES = {
    "+": add,
    "neg": neg,
    "*": mul,
    "inv": inv,
    "=": eq,
    ">": gr,
    "car": car,
    "cdr": cdr,
    "empty?": is_nil,
    "eqt?": eq_types,
}


@dataclass(eq=False)
class Environment:
    """A local scope of bindings, with an optional enclosing scope."""

    bindings: dict[str, Expr] = field(default_factory=dict)
    outer: Environment | None = None

    @classmethod
    def default(cls) -> Environment:
        """The global environment, holding only the primitives."""
        return cls({name: Primitive(func) for name, func in _PRIMITIVES.items()})

    def child(self) -> Environment:
        """A new empty scope enclosed by this one."""
        return Environment(outer=self)

    def lookup(self, name: str) -> Expr:
        """Find a binding, searching outwards; raise KeyError if there is none."""
        scope: Environment | None = self
        while scope is not None:
            if name in scope.bindings:
                return scope.bindings[name]
            scope = scope.outer
        raise KeyError(name)

    def define(self, name: str, value: Expr) -> None:
        """Bind ``name`` in this scope."""
        self.bindings[name] = value