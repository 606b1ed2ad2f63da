"""Textual rendering of lil values and syntax nodes.

`to_lisp_string` is what `print` hands to the output sink. `node_to_source`
turns a syntax node back into source text. `unannotate` strips a syntax tree
down to nested Python lists of raw atom values, which is handy when
comparing parser output against expected structure.
"""

from __future__ import annotations

from lil import LispValue, SExpression
from lil.types.nodes import Constant, Form, Identifier, Number, Quote, String
from lil.types.values import AbsentType, Closure, EmptyType, QuotedForm


def node_to_source(node: SExpression) -> str:
    match node:
        case Identifier(name=name):
            return name
        case Number(value=value):
            return str(value)
        case String(value=value):
            return f'"{value}"'
        case Quote(inner=inner):
            return "'" + node_to_source(inner)
        case Form(children=children):
            return "(" + " ".join(node_to_source(c) for c in children) + ")"
        case Constant(value=value):
            return to_lisp_string(value)
    return repr(node)


def to_lisp_string(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "(" + " ".join(to_lisp_string(v) for v in value) + ")"
    if isinstance(value, (EmptyType, AbsentType, Closure)):
        return repr(value)
    if isinstance(value, QuotedForm):
        return "'" + node_to_source(value.node)
    if callable(value):
        return f"<host {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)


def unannotate(node: SExpression):
    """Flatten a syntax tree into nested lists of raw atom values.

    (x (y) 1) -> ["x", ["y"], 1]; a lone atom flattens to its raw value and
    a quote flattens to whatever it wraps.
    """
    match node:
        case Form(children=children):
            return [unannotate(c) for c in children]
        case Quote(inner=inner):
            return unannotate(inner)
        case Identifier(name=name):
            return name
        case Number(value=value) | String(value=value) | Constant(value=value):
            return value
    raise TypeError(f"Not a syntax node: {node!r}")
