"""Closure representation and argument binding for toylisp."""

from __future__ import annotations

from io import StringIO

from toylisp import LispValue
from toylisp.errors import ToyArityError
from toylisp.types.environment import Environment
from toylisp.types.forms import Form
from toylisp.types.symbol import Symbol


class Closure:
    """A first-class function: parameters, body forms and the captured frame."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: tuple[Symbol, ...],
        body: tuple[Form, ...],
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: tuple[Symbol, ...] = params
        self.body: tuple[Form, ...] = body
        # The frame visible where the `fn` was evaluated, not where it is called
        self.env: Environment = env
        self.name: Symbol | None = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<fn ")
            if self.name is not None:
                buffer.write(f"{self.name} ")
            buffer.write("(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return the new call frame, a child of the captured frame.
        """
        if len(args) != len(self.params):
            raise ToyArityError(
                f"{self.name or 'fn'} expects {len(self.params)} argument(s), got {len(args)}"
            )
        call_env = self.env.extend()
        for param, arg in zip(self.params, args):
            call_env.define(param, arg)
        return call_env
