from mlisp import SExpression, LispValue, EvaluatorFn
from mlisp.types.pair import cons, first, from_list, iter_list, rest
from mlisp.types.symbol import intern


def let_form(expr: SExpression, env: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (let ((n1 v1) (n2 v2) ...) body)

    Rewritten to ((lambda (n1 n2 ...) body) v1 v2 ...) and evaluated in the
    current env, so each v is evaluated once, in the outer scope, before body.
    """
    bindings = first(rest(expr))
    body = first(rest(rest(expr)))
    names = from_list(first(b) for b in iter_list(bindings))
    values = from_list(first(rest(b)) for b in iter_list(bindings))
    fn = from_list([intern("lambda"), names, body])
    return evaluate_fn(cons(fn, values), env)
