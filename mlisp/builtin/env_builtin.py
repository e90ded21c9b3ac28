from __future__ import annotations

from mlisp import LispValue
from mlisp.evaluation.special_forms import SPECIAL_FORMS
from mlisp.printer import write as write_obj
from mlisp.runtime_context import get_current_reader, get_output_port
from mlisp.types.environment import from_mapping
from mlisp.types.native import Primitive
from mlisp.types.pair import Pair, first, make_true, rest, truth
from mlisp.types.symbol import Symbol, intern

# Primitives receive their evaluated arguments as a Pair chain.


# -------------------------------
# Pairs
# -------------------------------
def cons(args: LispValue) -> LispValue:
    return Pair(first(args), first(rest(args)))


def car(args: LispValue) -> LispValue:
    """(car x) -> first of x; absent if x is not a pair"""
    return first(first(args))


def cdr(args: LispValue) -> LispValue:
    """(cdr x) -> rest of x; absent if x is not a pair"""
    return rest(first(args))


# -------------------------------
# Equality and predicates
# -------------------------------
def is_eq(args: LispValue) -> LispValue:
    # Identity: symbols are interned, so equal names compare equal.
    return truth(first(args) is first(rest(args)))


def is_pair(args: LispValue) -> LispValue:
    return truth(isinstance(first(args), Pair))


def is_symbol(args: LispValue) -> LispValue:
    return truth(isinstance(first(args), Symbol))


def is_null(args: LispValue) -> LispValue:
    return truth(first(args) is None)


# -------------------------------
# I/O
# -------------------------------
def read_builtin(args: LispValue) -> LispValue:
    """(read) -> next form from the current input port"""
    return get_current_reader().parse_expr()


def write_builtin(args: LispValue) -> LispValue:
    """(write x) -> prints x and a newline to the current output port; true"""
    write_obj(first(args), get_output_port())
    return make_true()


PRIMITIVES = {
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "eq?": is_eq,
    "pair?": is_pair,
    "symbol?": is_symbol,
    "null?": is_null,
    "read": read_builtin,
    "write": write_builtin,
}


def register(env: LispValue = None) -> LispValue:
    """Return `env` extended with every builtin procedure, special form and
    constant."""
    bindings: dict[Symbol, LispValue] = {
        intern("null"): None,
        intern("nil"): None,
    }
    bindings.update(SPECIAL_FORMS)
    bindings.update({intern(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
    return from_mapping(bindings, env)
