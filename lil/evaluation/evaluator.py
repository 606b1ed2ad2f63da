"""Core evaluator for the lil interpreter.

A plain recursive tree walker: literals evaluate to themselves, identifiers
are looked up, quotes become data, and forms either dispatch to a special
form by their leading identifier or are applied.
"""

from __future__ import annotations

import logging

from lil import SExpression, LispValue
from lil.errors import LilTypeError
from lil.evaluation.apply import apply
from lil.evaluation.context import EvalContext
from lil.evaluation.special_forms import SPECIAL_FORMS
from lil.types.environment import Environment
from lil.types.nodes import Constant, Form, Identifier, Number, Quote, String
from lil.types.values import Empty, QuotedForm

logger = logging.getLogger(__name__)


def evaluate(
    expr: SExpression, env: Environment, context: EvalContext | None = None
) -> LispValue:
    """Evaluate a syntax node under `env`. The node itself is never modified."""
    if context is None:
        context = EvalContext.default()

    match expr:
        case Number(value=value) | String(value=value) | Constant(value=value):
            return value

        case Identifier(name=name):
            return env.lookup(name)

        case Quote(inner=inner):
            return QuotedForm(inner)

        case Form(children=()):
            return Empty

        case Form(children=(Identifier(name=name), *operands)) if name in SPECIAL_FORMS:
            logger.debug("special form %s with %d operand(s)", name, len(operands))
            return SPECIAL_FORMS[name](operands, env, context, evaluate)

        case Form(children=(head, *operands)):
            fn = evaluate(head, env, context)
            args = [evaluate(arg, env, context) for arg in operands]
            return apply(fn, args, context, evaluate)

    raise LilTypeError(f"Cannot evaluate {expr!r}: not a syntax node")
