"""Registry of special forms for the mlisp evaluator.

Maps Symbols to Syntax values implementing non-standard evaluation rules.
They are bound in the global environment like any other value, so the
evaluator dispatches to them through the ordinary call path.
"""

from mlisp.types.native import Syntax
from mlisp.types.symbol import intern
from mlisp.evaluation.special_forms.quote_form import quote_form
from mlisp.evaluation.special_forms.lambda_form import lambda_form, macro_form
from mlisp.evaluation.special_forms.cond_form import cond_form
from mlisp.evaluation.special_forms.let_form import let_form
from mlisp.evaluation.special_forms.apply_form import apply_form

SPECIAL_FORMS = {
    intern(name): Syntax(name, fn)
    for name, fn in (
        ("quote", quote_form),
        ("lambda", lambda_form),
        ("cond", cond_form),
        ("let", let_form),
        ("macro", macro_form),
        ("apply", apply_form),
    )
}
