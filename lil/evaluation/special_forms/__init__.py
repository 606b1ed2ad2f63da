"""Registry of special forms for the lil evaluator.

Maps leading identifiers to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary
application, so these names are recognized purely by syntax.
"""

from lil.evaluation.special_forms.list_forms import list_form, first_form, rest_form
from lil.evaluation.special_forms.print_form import print_form
from lil.evaluation.special_forms.lambda_form import lambda_form
from lil.evaluation.special_forms.let_form import let_form
from lil.evaluation.special_forms.quote_forms import quote_form
from lil.evaluation.special_forms.eval_form import eval_form
from lil.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "list": list_form,
    "first": first_form,
    "rest": rest_form,
    "print": print_form,
    "lambda": lambda_form,
    "let": let_form,
    "quote": quote_form,
    "eval": eval_form,
    "if": if_form,
}
