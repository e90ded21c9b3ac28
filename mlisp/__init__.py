# Type aliases shared across mlisp. Values are the classes in mlisp.types;
# absence (the empty list, false) is Python None. Code and data share one
# representation, so forms and values are the same alias.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator passed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
