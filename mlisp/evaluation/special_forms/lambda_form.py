from mlisp import SExpression, LispValue, EvaluatorFn
from mlisp.errors import MLispTypeError
from mlisp.printer import to_string
from mlisp.runtime_context import report
from mlisp.types.lambda_fn import Closure
from mlisp.types.pair import first, rest


def lambda_form(expr: SExpression, env: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda params body): a single body expression, nothing evaluated here.
    params = first(rest(expr))
    body = first(rest(rest(expr)))
    return Closure(params, body, env)


def macro_form(expr: SExpression, env: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """(macro f): evaluate f and re-tag the resulting closure as a macro."""
    fn = evaluate_fn(first(rest(expr)), env)
    if not isinstance(fn, Closure):
        report(MLispTypeError(f"macro expects a closure, got {to_string(fn)}"))
        return None
    return fn.to_macro()
