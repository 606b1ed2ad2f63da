from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.debug_utils.pprint import to_lisp_string
from lil.errors import LilArityError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment


def print_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise LilArityError("print expects exactly one argument")
    value = evaluate_fn(tail[0], env, context)
    context.output(to_lisp_string(value))
    return value
