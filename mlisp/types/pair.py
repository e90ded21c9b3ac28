"""Pairs, the only composite value, and list helpers over them."""

from __future__ import annotations

from typing import Iterable, Iterator

from mlisp import LispValue
from mlisp.types.symbol import intern


class Pair:
    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue = None, rest: LispValue = None):
        self.first = first
        self.rest = rest

    def __repr__(self):
        # Imported lazily: the printer depends on this module.
        from mlisp.printer import to_string
        return to_string(self)


def cons(a: LispValue, b: LispValue) -> Pair:
    return Pair(a, b)


def first(x: LispValue) -> LispValue:
    return x.first if isinstance(x, Pair) else None


def rest(x: LispValue) -> LispValue:
    return x.rest if isinstance(x, Pair) else None


def from_list(items: Iterable[LispValue], tail: LispValue = None) -> LispValue:
    """Build a Pair chain from `items`, ending in `tail` (absent by default)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(chain: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a chain; an improper tail is ignored."""
    while isinstance(chain, Pair):
        yield chain.first
        chain = chain.rest


def to_list(chain: LispValue) -> list[LispValue]:
    return list(iter_list(chain))


_QUOTE = intern("quote")
_T = intern("t")


def make_true() -> Pair:
    """Canonical truth: a fresh (quote t) list. Falsity is absence."""
    return from_list([_QUOTE, _T])


def truth(flag: bool) -> LispValue:
    return make_true() if flag else None
