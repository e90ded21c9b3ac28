from __future__ import annotations

from mlisp import LispValue, SExpression
from mlisp.errors import MLispArityShortfall
from mlisp.runtime_context import report
from mlisp.types.environment import define, entry
from mlisp.types.pair import Pair, from_list
from mlisp.types.symbol import Symbol, intern

# (x . xs) is read as the three symbols x, ".", xs.
VARIADIC_MARKER = intern(".")


def extend(params: SExpression, args: LispValue, parent: LispValue) -> LispValue:
    """
    Single source of truth for parameter binding.

    Walks `params` and `args` pairwise and chains one entry per parameter,
    in parameter order, onto `parent`; with a repeated name the first
    occurrence wins. Supports:
    - Positional parameters
    - The variadic marker: `(a . rest)` binds `rest` to the remaining args
      list (absent when none remain) and stops
    - A bare symbol parameter spec, bound to the whole argument list

    Running out of arguments stops binding early; the missing parameters stay
    unbound. Surplus arguments are ignored. `parent` is never mutated.
    """
    if isinstance(params, Symbol):
        return define(parent, params, args)

    entries: list[Pair] = []
    while isinstance(params, Pair):
        name = params.first
        if name is VARIADIC_MARKER:
            rest_param = params.rest.first if isinstance(params.rest, Pair) else None
            if isinstance(rest_param, Symbol):
                entries.append(entry(rest_param, args))
            break
        if not isinstance(args, Pair):
            missing = [str(p) for p in _iter_params(params)]
            report(MLispArityShortfall(missing))
            break
        entries.append(entry(name, args.first))
        params, args = params.rest, args.rest
    return from_list(entries, parent)


def _iter_params(params: SExpression):
    while isinstance(params, Pair):
        if params.first is not VARIADIC_MARKER:
            yield params.first
        params = params.rest
