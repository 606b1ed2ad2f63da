"""Runtime value markers.

Numbers, strings and lists are plain Python int/float, str and list. The
types here cover the remaining cases: the `()` result, the unbound-name
sentinel, quoted syntax carried as data, and closures.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from lil import SExpression

if TYPE_CHECKING:
    from lil.types.environment import Environment


class EmptyType:
    """Result of evaluating the literal empty form `()`."""
    __slots__ = ()

    def __repr__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return hash(EmptyType)


class AbsentType:
    """Value of an identifier bound in no enclosing frame."""
    __slots__ = ()

    def __repr__(self): return "absent"

    def __eq__(self, other):
        return isinstance(other, AbsentType)

    def __hash__(self):
        return hash(AbsentType)


Empty = EmptyType()
Absent = AbsentType()


@dataclass(frozen=True)
class QuotedForm:
    node: SExpression


class Closure:
    """A first-class lambda with parameter names, body node, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[str], body: SExpression, env: Environment):
        self.params: list[str] = params
        self.body: SExpression = body
        # Shared with the frame the lambda was evaluated in, never copied
        self.env: Environment = env

    def __str__(self) -> str:
        from lil.debug_utils.pprint import node_to_source
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(node_to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
