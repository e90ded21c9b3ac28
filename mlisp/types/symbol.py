"""Symbols and the process-wide symbol table.

Symbols are only ever created through `intern`, so identity comparison
(`is`) is name comparison. Names are significant up to `bound - 1`
characters; two names sharing that prefix intern to the same Symbol.
"""

from __future__ import annotations

from typing import Iterator

from mlisp.config import get_symbol_max


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Append-only registry mapping (bounded) names to unique Symbols."""

    __slots__ = ("bound", "_symbols", "_index")

    def __init__(self, bound: int | None = None):
        self.bound: int = get_symbol_max() if bound is None else bound
        self._symbols: list[Symbol] = []
        self._index: dict[str, Symbol] = {}

    def key(self, name: str) -> str:
        """Return the significant prefix of `name` used for comparison."""
        if self.bound <= 0:
            return name
        return name[: self.bound - 1]

    def intern(self, name: str) -> Symbol:
        k = self.key(name)
        sym = self._index.get(k)
        if sym is None:
            sym = Symbol(name)
            self._symbols.append(sym)
            self._index[k] = sym
        return sym

    def rebound(self, bound: int) -> None:
        """Switch to a new significance bound and re-key existing symbols.

        Symbols keep their identity. When the new bound makes two existing
        names collide, the one interned first keeps the key.
        """
        self.bound = bound
        self._index = {}
        for sym in self._symbols:
            self._index.setdefault(self.key(sym.name), sym)

    def __contains__(self, name: str) -> bool:
        return self.key(name) in self._index

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)


# NOTE: process-global. Concurrent evaluation would need a lock around intern().
SYMBOLS = SymbolTable()


def intern(name: str) -> Symbol:
    return SYMBOLS.intern(name)
