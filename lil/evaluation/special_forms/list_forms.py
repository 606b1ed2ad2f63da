from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.errors import LilArityError, LilEmptyListError, LilTypeError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment


def list_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (list) is an empty Python list, not Empty
    return [evaluate_fn(e, env, context) for e in tail]


def _list_operand(
    name: str,
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> list:
    if len(tail) != 1:
        raise LilArityError(f"{name} expects exactly one argument")
    value = evaluate_fn(tail[0], env, context)
    if not isinstance(value, list):
        raise LilTypeError(f"{name} expects a list, got {value!r}")
    return value


def first_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    items = _list_operand("first", tail, env, context, evaluate_fn)
    if not items:
        raise LilEmptyListError("first of an empty list")
    return items[0]


def rest_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    items = _list_operand("rest", tail, env, context, evaluate_fn)
    return items[1:]
