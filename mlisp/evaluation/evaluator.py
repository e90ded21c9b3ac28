"""Core evaluator for the mlisp interpreter.

`evaluate` dispatches on the variant of the expression; `apply` dispatches on
the variant of an evaluated call head. Failures are reported and replaced by
absent so evaluation of the surrounding form carries on.
"""

from __future__ import annotations

import logging

from mlisp import SExpression, LispValue
from mlisp.errors import MLispNotEvaluable, MLispUnboundVariable
from mlisp.evaluation.apply import apply_procedure
from mlisp.printer import to_string
from mlisp.runtime_context import report
from mlisp.types.bind import extend
from mlisp.types.environment import UNBOUND, lookup
from mlisp.types.lambda_fn import Closure, Macro
from mlisp.types.native import Syntax
from mlisp.types.pair import Pair
from mlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: LispValue) -> LispValue:
    match expr:
        case Symbol():
            value = lookup(env, expr)
            if value is UNBOUND:
                report(MLispUnboundVariable(expr.name))
                return None
            return value

        case Closure():
            # A closure used as an expression runs its body in its own scope.
            return evaluate(expr.body, expr.env)

        case Pair(first=head):
            return apply(evaluate(head, env), expr, env)

        case None:
            return None

    report(MLispNotEvaluable(to_string(expr)))
    return None


def evaluate_list(exprs: SExpression, env: LispValue) -> LispValue:
    """Evaluate each element of `exprs` left to right into a new chain."""
    head: Pair | None = None
    tail: Pair | None = None
    while isinstance(exprs, Pair):
        cell = Pair(evaluate(exprs.first, env), None)
        if tail is None:
            head = cell
        else:
            tail.rest = cell
        tail = cell
        exprs = exprs.rest
    return head


def apply(fn: LispValue, expr: Pair, env: LispValue) -> LispValue:
    """Apply the evaluated head `fn` of the call form `expr`.

    - Macro: bind params to the unevaluated arguments and return the body's
      value directly (no second evaluation).
    - Syntax: the handler receives the whole call form and decides what to
      evaluate.
    - Otherwise: evaluate the arguments and defer to apply_procedure.
    """
    args = expr.rest
    if isinstance(fn, Macro):
        logger.debug("expanding macro call %s", to_string(expr.first))
        return evaluate(fn.body, extend(fn.params, args, fn.env))
    if isinstance(fn, Syntax):
        return fn(expr, env, evaluate)
    return apply_procedure(fn, evaluate_list(args, env), evaluate)
