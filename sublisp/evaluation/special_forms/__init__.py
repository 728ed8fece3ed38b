"""Registry of special forms for the sublisp evaluator.

Maps names to handler functions that receive their argument list
unevaluated. At startup each entry is bound in the environment as a
Builtin flagged as a special form.
"""

from sublisp.evaluation.special_forms.quote_forms import quote_form
from sublisp.evaluation.special_forms.define_form import define_form
from sublisp.evaluation.special_forms.lambda_form import lambda_form
from sublisp.evaluation.special_forms.if_form import if_form
from sublisp.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "define": define_form,
    "lambda": lambda_form,
    "if": if_form,
    "and": and_form,
    "or": or_form,
}
