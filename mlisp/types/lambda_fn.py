"""Closure and Macro: user procedures capturing a lexical environment."""

from __future__ import annotations

from mlisp import SExpression, LispValue


class Lambda:
    """Shared shape of Closure and Macro: params, body and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: LispValue = None):
        self.params: SExpression = params
        self.body: SExpression = body
        # Environments are Pair chains; absent is the empty environment.
        self.env: LispValue = env

    def __repr__(self) -> str:
        from mlisp.printer import to_string
        return to_string(self)


class Closure(Lambda):
    """Arguments are evaluated before binding."""

    __slots__ = ()

    def to_macro(self) -> Macro:
        return Macro(self.params, self.body, self.env)


class Macro(Lambda):
    """Arguments are bound unevaluated; the body's result is returned as is."""

    __slots__ = ()
