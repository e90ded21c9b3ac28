from mlisp import SExpression, LispValue, EvaluatorFn
from mlisp.types.pair import first, rest


def quote_form(expr: SExpression, env: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote x) -> x, unevaluated."""
    return first(rest(expr))
