from __future__ import annotations

import logging
from typing import Mapping

from lil import SExpression, LispValue
from lil.builtin.host_builtin import host_bindings
from lil.config import host_builtins_enabled
from lil.evaluation.context import EvalContext, OutputSink, default_output
from lil.evaluation.evaluator import evaluate
from lil.reader.parser import parse
from lil.types.environment import Environment

logger = logging.getLogger(__name__)


def _root_environment(bindings: Mapping[str, LispValue] | None) -> Environment:
    env = Environment()
    if bindings:
        env.update(bindings)
    return env


def interpret(
    node: SExpression,
    bindings: Mapping[str, LispValue] | None = None,
    output: OutputSink | None = None,
) -> LispValue:
    """Evaluate a parsed node under a root environment built from `bindings`.

    `bindings` maps names to host values or Python callables; `output`
    receives the text of every `print`, defaulting to the LIL_OUTPUT sink.
    """
    env = _root_environment(bindings)
    context = EvalContext(output if output is not None else default_output())
    return evaluate(node, env, context)


class Interpreter:
    """
    Reads and evaluates lil source text against a persistent root environment.
    Each call to eval() runs in a fresh child frame of the root, so names bound
    by one program never collide with the next.
    """

    def __init__(
        self,
        bindings: Mapping[str, LispValue] | None = None,
        output: OutputSink | None = None,
    ):
        if bindings is None and host_builtins_enabled():
            bindings = host_bindings()
        self.env: Environment = _root_environment(bindings)
        self.context = EvalContext(output if output is not None else default_output())

    def eval(self, code: str) -> LispValue:
        logger.debug("evaluating %d characters of source", len(code))
        node = parse(code)
        return evaluate(node, self.env.child(), self.context)
