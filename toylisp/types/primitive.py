from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from toylisp import LispValue
from toylisp.errors import ToyArityError


@dataclass(frozen=True)
class Primitive:
    """A built-in operation with a fixed arity, callable like any function."""
    name: str
    arity: int
    fn: Callable[..., LispValue]

    def __call__(self, args: list[LispValue]) -> LispValue:
        if len(args) != self.arity:
            raise ToyArityError(
                f"{self.name} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.fn(*args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}/{self.arity}>"
