"""Runtime environment for toylisp.

An Environment is one frame of bindings from Symbols to evaluated values,
chained to its enclosing frame through `outer`. Bindings are single
assignment: a name may be bound once per frame, while inner frames may shadow
names bound further out.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from toylisp import LispValue
from toylisp.errors import ToyRebindError, ToyUnboundNameError
from toylisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def extend(self) -> Environment:
        """Return a new, empty frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises ToyRebindError if `name` is already bound here. Bindings in
        outer frames are not consulted, so shadowing them is allowed.
        """
        if name in self.vars:
            raise ToyRebindError(name)
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises ToyUnboundNameError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise ToyUnboundNameError(name)
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def depth(self) -> int:
        """Number of frames between this one and the root."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
