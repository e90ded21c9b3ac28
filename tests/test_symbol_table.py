import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from mlisp.types.symbol import SYMBOLS, Symbol, SymbolTable, intern


def test_intern_returns_same_instance():
    assert intern("alpha") is intern("alpha")
    assert intern("alpha") is not intern("beta")


def test_intern_symbol_name():
    sym = intern("gamma")
    assert isinstance(sym, Symbol)
    assert sym.name == "gamma"
    assert str(sym) == "gamma"
    assert repr(sym) == "Symbol('gamma')"


def test_table_is_append_only():
    table = SymbolTable(bound=32)
    a = table.intern("a")
    b = table.intern("b")
    table.intern("a")
    assert len(table) == 2
    assert list(table) == [a, b]
    assert "a" in table
    assert "c" not in table


def test_names_significant_up_to_bound_minus_one():
    table = SymbolTable(bound=32)
    prefix = "p" * 31
    first = table.intern(prefix + "x")
    second = table.intern(prefix + "y")
    assert first is second
    # The first spelling interned is the one kept.
    assert first.name == prefix + "x"
    assert table.intern(prefix) is first


def test_names_differing_within_bound_are_distinct():
    table = SymbolTable(bound=32)
    assert table.intern("p" * 30 + "x") is not table.intern("p" * 30 + "y")


def test_small_bound():
    table = SymbolTable(bound=4)
    assert table.intern("abcX") is table.intern("abcY")
    assert table.intern("abd") is not table.intern("abc")


def test_unbounded_table_compares_exact_names():
    table = SymbolTable(bound=0)
    prefix = "q" * 40
    assert table.intern(prefix + "x") is not table.intern(prefix + "y")
    assert table.intern(prefix + "x") is table.intern(prefix + "x")


def test_global_table_holds_builtin_names():
    intern("quote")
    assert "quote" in SYMBOLS


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.text(min_size=0, max_size=64))
def test_intern_idempotent_for_any_length(name):
    assert intern(name) is intern(name)


@pytest.mark.parametrize("bound", [0, 2, 8, 32])
def test_intern_idempotent_for_any_bound(bound):
    table = SymbolTable(bound=bound)
    name = "long-symbol-name-" * 3
    assert table.intern(name) is table.intern(name)


def test_rebound_rekeys_existing_symbols():
    table = SymbolTable(bound=0)
    first = table.intern("abcdef")
    second = table.intern("abcxyz")
    assert first is not second
    table.rebound(4)
    assert table.intern("abc") is first
    assert table.intern("abcxyz") is first
    assert len(table) == 2
    table.rebound(0)
    assert table.intern("abcxyz") is second
