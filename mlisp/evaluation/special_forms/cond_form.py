"""Special form: cond.

(cond (test result) ...) evaluates tests in order and returns the value of
the result paired with the first non-absent test. Later clauses are not
touched. With no match the value is absent.
"""

from mlisp import SExpression, LispValue, EvaluatorFn
from mlisp.types.pair import first, iter_list, rest


def cond_form(expr: SExpression, env: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    for clause in iter_list(rest(expr)):
        if evaluate_fn(first(clause), env) is not None:
            return evaluate_fn(first(rest(clause)), env)
    return None
