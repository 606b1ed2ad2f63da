import logging

from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.errors import LilArityError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment
from lil.types.nodes import Constant, Form
from lil.types.values import QuotedForm

logger = logging.getLogger(__name__)


def list_to_form(items: list[LispValue]) -> Form:
    """Build a form from a runtime list.

    Quoted elements contribute their syntax node; every other element is
    spliced in as an already evaluated Constant.
    """
    return Form(tuple(
        item.node if isinstance(item, QuotedForm) else Constant(item)
        for item in items
    ))


def eval_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise LilArityError("eval expects exactly one argument")
    value = evaluate_fn(tail[0], env, context)

    if isinstance(value, QuotedForm):
        logger.debug("eval: re-entering evaluator on quoted node")
        return evaluate_fn(value.node, env, context)
    if isinstance(value, list):
        logger.debug("eval: synthesizing form from %d list element(s)", len(value))
        return evaluate_fn(list_to_form(value), env, context)
    # Numbers, strings, Empty, Absent and closures are already values
    return value
