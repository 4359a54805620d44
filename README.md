# linsl

`linsl` is a small interpreter for a Lisp/Scheme-like language. It has only a
few built-in primitives. They are enough to write everything else in the
language itself.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The interactive prompt

```
linsl
```

This starts a read–eval–print loop with the prompt `Linsl> `. Each line is read
as one expression and evaluated. The result, or the error message, is printed:

```
Linsl> (define square (lambda (x) (* x x)))
square
Linsl> (square 7)
49
Linsl> (if (> 3 2) #t #f)
#t
Linsl> (inv 0)
Syntax error at (): Cannot invert 0
```

Definitions last for the rest of the session. End the session with
end-of-file (Ctrl-D). `linsl --help` shows a short usage message. The command
takes no other options.

## The language

Atoms:

- `#t`, `#f`: booleans
- numbers, such as `3` or `-1.5`, all held as floating point values. Whole
  numbers are printed without a decimal point.
- any other token is a symbol

Special forms:

- `(define name expr)` binds `name` to the value of `expr` in the current
  scope and returns the symbol `name`
- `(if test then else)`: `test` must evaluate to a boolean
- `(lambda (params...) body)` creates a closure
- `(macro (params...) body)` creates a macro. Its arguments are bound without
  being evaluated. Its body produces an expression, which is then evaluated in
  the calling scope.
- `(quote expr)` returns `expr` unevaluated

A closure or macro given more arguments than parameters binds the remaining
arguments, as a list, to its last parameter. Fewer arguments than parameters
is an error. The body of a closure runs in a new scope nested inside the scope
of the *call*, so it sees the caller's bindings.

Primitives:

| Name     | Meaning                                              |
|----------|------------------------------------------------------|
| `+`      | sum of numbers                                       |
| `neg`    | negation of a number (0 when given nothing)          |
| `*`      | product of numbers                                   |
| `inv`    | multiplicative inverse (error for 0)                 |
| `=`      | equality of two bools, numbers or symbols            |
| `>`      | whether the first number is greater than the second  |
| `car`    | first element of a list (`()` for an empty list)     |
| `cdr`    | list without its first element                       |
| `empty?` | whether the argument is the empty list               |
| `eqt?`   | whether two values are of the same kind              |

## Using it from Python

```python
from linsl.environment import Environment
from linsl.repl import parse_eval

env = Environment.default()
parse_eval("(define double (lambda (x) (+ x x)))", env)
print(parse_eval("(double 21)", env))  # 42
```

Modules:

- `linsl.datatypes`: the expression types `Bool`, `Number`, `Symbol`,
  `ListExpr`, `Closure`, `Macro`, `Primitive` (all subclasses of `Expr`), and
  the errors.
- `linsl.parsing`: `tokenize`, `parse` and `parse_atom`, plus helpers for
  reading numbers and symbol lists out of expressions.
- `linsl.primitives`: the built-in functions listed above.
- `linsl.environment`: `Environment`, with `default()`, `child()`,
  `lookup(name)` and `define(name, value)`.
- `linsl.evaluation`: `evaluate(expr, pos, env)` and `bind(symbols, values, env)`.
- `linsl.repl`: `parse_eval(text, env)` and the `main` function of the command.

Errors are raised as subclasses of `linsl.datatypes.LinslError`:

- `LinslSyntaxError` carries a `message` and a tuple of `positions`, ordered
  from the innermost expression outwards.
- `UnbalancedParens` carries the `opening` and `closing` counts.
- `InternalError` carries a `message`.

## Limits

- Each input is a single expression. More than one expression on a line is an
  error ("Unexpected characters at end."). An expression cannot span several
  lines at the prompt.
- There is no way to run a file of code. There are no strings, no input or
  output from within the language, and no definitions beyond the primitives
  above.