"""Syntax nodes produced by the parser.

Nodes are frozen dataclasses and are never mutated after parsing. The
evaluator walks them directly; quoted nodes travel through the runtime
wrapped in QuotedForm until `eval` hands them back to the evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Form:
    children: tuple = ()


@dataclass(frozen=True)
class Quote:
    inner: Any


@dataclass(frozen=True)
class Constant:
    """An already evaluated value spliced into a form synthesized by `eval`.

    Never produced by the parser.
    """
    value: Any


Atom = Union[Identifier, Number, String]
Node = Union[Identifier, Number, String, Form, Quote, Constant]
