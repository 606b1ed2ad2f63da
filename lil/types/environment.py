"""Runtime environment for lil.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Frames are only ever added to: a name is
bound at most once per frame, and an unresolved lookup yields Absent rather
than raising.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from lil import LispValue
from lil.errors import LilDuplicateBindingError, LilTypeError
from lil.types.values import Absent


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises LilDuplicateBindingError if this frame already binds `name`;
        shadowing a binding from an outer frame is fine.
        """
        if not isinstance(name, str):
            raise LilTypeError(f"Cannot bind {name!r}: names must be strings")
        if name in self.vars:
            raise LilDuplicateBindingError(f"{name} is already bound in this frame")
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, or Absent if nothing binds it."""
        env = self.find(name)
        if env is None:
            return Absent
        return env.vars[name]

    def child(self) -> Environment:
        """Create a new empty frame chained to this one."""
        return Environment(outer=self)

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
