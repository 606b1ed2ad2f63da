from lil import EvaluatorFn
from lil import SExpression, LispValue
from lil.errors import LilArityError, LilTypeError
from lil.evaluation.context import EvalContext
from lil.types.environment import Environment
from lil.types.nodes import Form, Identifier


def let_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(let ((n1 v1) (n2 v2) ...) body)

    Every initializer is evaluated in the enclosing environment, left to
    right, so later bindings never see earlier ones. All names are then bound
    in a single new frame in which the body is evaluated.
    """
    if len(tail) != 2:
        raise LilArityError("let requires a binding list and a single body")

    bindings, body = tail
    if not isinstance(bindings, Form):
        raise LilTypeError(f"let bindings must be a list, got {bindings!r}")

    evaluated = []
    for binding in bindings.children:
        match binding:
            case Form(children=(Identifier(name=name), init)):
                evaluated.append((name, evaluate_fn(init, env, context)))
            case _:
                raise LilTypeError(f"Malformed let binding {binding!r}")

    let_env = env.child()
    for name, value in evaluated:
        let_env.define(name, value)
    return evaluate_fn(body, let_env, context)
