from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.errors import LilArityError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment
from lil.types.values import QuotedForm


def quote_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Long spelling of the ' prefix: (quote x) is 'x
    if len(tail) != 1:
        raise LilArityError("quote expects exactly one argument")
    return QuotedForm(tail[0])
