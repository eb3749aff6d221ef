"""Validated core forms.

The expander turns raw s-expressions into these tagged records; the evaluator
consumes nothing else. All forms are immutable so a closure can share its body
with every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from toylisp.types.symbol import Symbol


@dataclass(frozen=True)
class Sequence:
    body: tuple[Form, ...]


@dataclass(frozen=True)
class Lambda:
    params: tuple[Symbol, ...]
    body: tuple[Form, ...]


@dataclass(frozen=True)
class Definition:
    name: Symbol
    value: Lambda


@dataclass(frozen=True)
class Binding:
    name: Symbol
    value: Form


@dataclass(frozen=True)
class Reference:
    name: Symbol


@dataclass(frozen=True)
class Application:
    callee: Form
    args: tuple[Form, ...]


@dataclass(frozen=True)
class Literal:
    value: int | float | bool


@dataclass(frozen=True)
class If:
    test: Form
    then: Form
    orelse: Form


Form = Union[Sequence, Definition, Lambda, Binding, Reference, Application, Literal, If]
