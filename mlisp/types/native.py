from __future__ import annotations

from typing import Callable

from mlisp import LispValue, SExpression


class Primitive:
    """A native procedure applied to an already-evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[LispValue], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: LispValue) -> LispValue:
        return self.fn(args)

    def __repr__(self):
        return f"<primitive {self.name}>"


class Syntax:
    """A native special form; receives the raw call expression and env."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, expr: SExpression, env: LispValue, evaluate_fn) -> LispValue:
        return self.fn(expr, env, evaluate_fn)

    def __repr__(self):
        return f"<syntax {self.name}>"
