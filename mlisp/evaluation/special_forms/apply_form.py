from mlisp import SExpression, LispValue, EvaluatorFn
from mlisp.evaluation.apply import apply_procedure
from mlisp.types.pair import Pair, first, rest


def apply_form(expr: SExpression, env: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (apply fn a1 ... an lst)

    Evaluates a1 ... an, then lst (which should yield a list) and splices it
    in as the trailing arguments. The function expression is evaluated last
    and applied to the combined list through the central engine.
    Only procedures are applicable here; macros and syntax are not.
    """
    fn_expr = first(rest(expr))
    arg_exprs = rest(rest(expr))

    leading: list[LispValue] = []
    spliced: LispValue = None
    while isinstance(arg_exprs, Pair):
        value = evaluate_fn(arg_exprs.first, env)
        if arg_exprs.rest is None:
            spliced = value
        else:
            leading.append(value)
        arg_exprs = arg_exprs.rest

    args = spliced
    for value in reversed(leading):
        args = Pair(value, args)
    return apply_procedure(evaluate_fn(fn_expr, env), args, evaluate_fn)
