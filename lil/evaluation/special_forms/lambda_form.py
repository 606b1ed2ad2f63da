from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.errors import LilArityError, LilTypeError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment
from lil.types.nodes import Form, Identifier
from lil.types.values import Closure


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body node, nothing is evaluated here.
    if len(tail) != 2:
        raise LilArityError("lambda requires a parameter list and a single body")

    params, body = tail
    if not isinstance(params, Form):
        raise LilTypeError(f"lambda parameters must be a list, got {params!r}")

    names = []
    for p in params.children:
        if not isinstance(p, Identifier):
            raise LilTypeError(f"lambda parameter must be an identifier, got {p!r}")
        names.append(p.name)

    return Closure(names, body, env)
