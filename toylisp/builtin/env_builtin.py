"""Built-in primitives for the toylisp runtime environment.

This module defines the arithmetic, comparison and boolean primitives exposed
to toylisp code, and the PrimitiveRegistry through which a host installs them
(or its own primitives) into an Environment before evaluation begins.
"""
from __future__ import annotations

import logging
from typing import Callable

from toylisp import LispValue
from toylisp.errors import ToyArithmeticError, ToyTypeError
from toylisp.types.environment import Environment
from toylisp.types.primitive import Primitive
from toylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def is_number(value: LispValue) -> bool:
    # bool subclasses int in Python, but true/false are not numbers here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numbers(name: str, a: LispValue, b: LispValue) -> tuple:
    if not (is_number(a) and is_number(b)):
        raise ToyTypeError(f"All arguments to {name} must be numbers, got {a!r} and {b!r}")
    return a, b


def _booleans(name: str, *args: LispValue) -> tuple:
    for x in args:
        if not isinstance(x, bool):
            raise ToyTypeError(f"All arguments to {name} must be booleans, got {x!r}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: LispValue, b: LispValue) -> LispValue:
    """Return the sum of two numbers."""
    a, b = _numbers("add", a, b)
    return a + b


def sub(a: LispValue, b: LispValue) -> LispValue:
    a, b = _numbers("sub", a, b)
    return a - b


def mul(a: LispValue, b: LispValue) -> LispValue:
    a, b = _numbers("mul", a, b)
    return a * b


def div(a: LispValue, b: LispValue) -> LispValue:
    """Divide; integers truncate toward zero, floats divide exactly."""
    a, b = _numbers("div", a, b)
    if b == 0:
        raise ToyArithmeticError("Division by zero")
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


# -------------------------------
# Comparison
# -------------------------------
def gt(a: LispValue, b: LispValue) -> bool:
    a, b = _numbers("gt", a, b)
    return a > b


def gte(a: LispValue, b: LispValue) -> bool:
    a, b = _numbers("gte", a, b)
    return a >= b


def lt(a: LispValue, b: LispValue) -> bool:
    a, b = _numbers("lt", a, b)
    return a < b


def lte(a: LispValue, b: LispValue) -> bool:
    a, b = _numbers("lte", a, b)
    return a <= b


def eq(a: LispValue, b: LispValue) -> bool:
    """Equality of two numbers or two booleans; mixing kinds is an error."""
    if is_number(a) and is_number(b):
        return a == b
    a, b = _booleans("eq", a, b)
    return a == b


def neq(a: LispValue, b: LispValue) -> bool:
    return not eq(a, b)


# -------------------------------
# Boolean logic
# -------------------------------
def and_(a: LispValue, b: LispValue) -> bool:
    a, b = _booleans("and", a, b)
    return a and b


def or_(a: LispValue, b: LispValue) -> bool:
    a, b = _booleans("or", a, b)
    return a or b


def not_(a: LispValue) -> bool:
    (a,) = _booleans("not", a)
    return not a


class PrimitiveRegistry:
    """Name -> Primitive table that a host fills before evaluation begins."""

    def __init__(self):
        self.primitives: dict[str, Primitive] = {}

    def register(self, name: str, arity: int, fn: Callable[..., LispValue]) -> Primitive:
        """Register (or replace) the primitive `name` with a fixed arity."""
        if arity < 0:
            raise ValueError(f"Arity of {name} must not be negative")
        prim = Primitive(name, arity, fn)
        self.primitives[name] = prim
        logger.debug("registered primitive %s", prim)
        return prim

    def names(self) -> list[str]:
        return sorted(self.primitives)

    def install(self, env: Environment) -> Environment:
        """Bind every registered primitive into `env`."""
        for prim in self.primitives.values():
            env.define(Symbol(prim.name), prim)
        return env


def register(registry: PrimitiveRegistry) -> PrimitiveRegistry:
    """Register the standard primitives."""
    registry.register("add", 2, add)
    registry.register("sub", 2, sub)
    registry.register("mul", 2, mul)
    registry.register("div", 2, div)
    registry.register("gt", 2, gt)
    registry.register("gte", 2, gte)
    registry.register("lt", 2, lt)
    registry.register("lte", 2, lte)
    registry.register("eq", 2, eq)
    registry.register("neq", 2, neq)
    registry.register("and", 2, and_)
    registry.register("or", 2, or_)
    registry.register("not", 1, not_)
    return registry


def default_registry() -> PrimitiveRegistry:
    return register(PrimitiveRegistry())
