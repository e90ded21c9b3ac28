"""Runtime environment for mlisp.

An environment is not a distinct type: it is a Pair chain whose elements are
binding entries, each the two-element list (symbol value). The innermost
binding comes first. Extending prepends entries, so parent chains are shared
and never mutated.
"""

from __future__ import annotations

from typing import Mapping

from mlisp import LispValue
from mlisp.types.pair import Pair, cons
from mlisp.types.symbol import Symbol


class _Unbound:
    __slots__ = ()

    def __repr__(self):
        return "#<unbound>"


# Distinct from absent, which is a legal bound value.
UNBOUND = _Unbound()


def entry(symbol: Symbol, value: LispValue) -> Pair:
    return cons(symbol, cons(value, None))


def lookup(env: LispValue, symbol: Symbol) -> LispValue:
    """Return the innermost value bound to `symbol`, or UNBOUND."""
    while isinstance(env, Pair):
        binding = env.first
        if isinstance(binding, Pair) and binding.first is symbol:
            rest = binding.rest
            return rest.first if isinstance(rest, Pair) else None
        env = env.rest
    return UNBOUND


def define(env: LispValue, symbol: Symbol, value: LispValue) -> Pair:
    """Return `env` extended with a single binding."""
    return cons(entry(symbol, value), env)


def from_mapping(mapping: Mapping[Symbol, LispValue], parent: LispValue = None) -> LispValue:
    """Bulk-define a mapping of Symbol -> value on top of `parent`."""
    env = parent
    for symbol, value in mapping.items():
        env = define(env, symbol, value)
    return env
