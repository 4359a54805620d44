"""An interpreter for a small Lisp/Scheme-like language, with an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["datatypes", "environment", "evaluation", "parsing", "primitives", "repl"]