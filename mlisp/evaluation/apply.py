"""Application engine for mlisp.

Applies a procedure (Primitive or Closure) to an already-evaluated argument
list. Shared by the evaluator and the `apply` special form so both follow the
same binding rules.
"""

from mlisp import LispValue, EvaluatorFn
from mlisp.errors import MLispNotApplicable
from mlisp.printer import to_string
from mlisp.runtime_context import report
from mlisp.types.bind import extend
from mlisp.types.lambda_fn import Closure
from mlisp.types.native import Primitive


def apply_procedure(fn: LispValue, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply `fn` to the evaluated argument chain `args`.

    - Primitive: call its native function on `args`.
    - Closure: bind params to `args` over the captured env, evaluate the body.
    - Anything else: not applicable; reports a diagnostic and returns absent.
    """
    if isinstance(fn, Primitive):
        return fn(args)
    if isinstance(fn, Closure):
        return evaluate_fn(fn.body, extend(fn.params, args, fn.env))
    report(MLispNotApplicable(to_string(fn)))
    return None
