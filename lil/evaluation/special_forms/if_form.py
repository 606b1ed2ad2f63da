from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.errors import LilArityError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment


def is_false(value: LispValue) -> bool:
    """Only values numerically equal to zero are false."""
    return isinstance(value, (int, float)) and value == 0


def if_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise LilArityError("if expects (if condition then else)")

    cond = evaluate_fn(tail[0], env, context)
    if is_false(cond):
        return evaluate_fn(tail[2], env, context)
    return evaluate_fn(tail[1], env, context)
