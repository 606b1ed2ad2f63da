"""Application engine for lil.

Centralizes what happens once an operator position has been evaluated:
- Closures get a fresh frame chained to their captured environment.
- Host callables (injected through the initial bindings) are called with the
  evaluated arguments, positionally.
- Anything else is a degenerate application when no arguments were given,
  and an error otherwise.
"""

from __future__ import annotations

import logging

from lil import LispValue, EvaluatorFn
from lil.errors import LilArityError, LilNotCallableError
from lil.evaluation.context import EvalContext
from lil.types.values import Closure

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `args` to the closure's parameters in a new frame and evaluate its body.

    The new frame's outer link is the environment captured when the lambda
    was evaluated, not the caller's environment.
    """
    if len(args) != len(fn.params):
        raise LilArityError(
            f"Expected {len(fn.params)} argument(s) for {fn}, got {len(args)}"
        )
    call_env = fn.env.child()
    for name, value in zip(fn.params, args):
        call_env.define(name, value)
    logger.debug("apply closure (%s) to %d argument(s)", " ".join(fn.params), len(args))
    return evaluate_fn(fn.body, call_env, context)


def apply(
    head: LispValue,
    args: list[LispValue],
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated operator to evaluated arguments.

    - Closure: defer to apply_closure.
    - Python callable: invoke as head(*args).
    - Non-callable with no arguments: the operator value itself.
    - Non-callable with arguments: LilNotCallableError.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, context, evaluate_fn)
    if callable(head):
        return head(*args)
    if not args:
        return head
    raise LilNotCallableError(f"Cannot apply non-function {head!r} to {args!r}")
