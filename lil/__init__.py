# Core type aliases for lil's data model.
# Syntax nodes (lil.types.nodes) are immutable dataclasses produced by the parser.
# Runtime values are plain Python data (int, float, str, list) plus the small
# set of marker types in lil.types.values.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntax nodes.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntax node alias
SExpression = Any

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

from lil.interpreter import Interpreter, interpret, parse  # noqa: E402

__all__ = ["LispValue", "SExpression", "EvaluatorFn", "Interpreter", "interpret", "parse"]
