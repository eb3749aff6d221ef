"""Expander/validator for toylisp.

Maps raw s-expressions from the reader onto the fixed set of core forms,
rejecting malformed syntax before anything is evaluated.
"""

from __future__ import annotations

from toylisp import SExpression
from toylisp.errors import ToyUnknownFormError
from toylisp.types.forms import Application, Form, Literal, Reference
from toylisp.types.symbol import Symbol
from toylisp.expansion.special_forms import SPECIAL_FORMS
from toylisp.expansion.special_forms.common import RESERVED


def expand(expr: SExpression) -> Form:
    """Expand one s-expression into its validated core Form."""
    match expr:
        case bool() | int() | float():
            return Literal(expr)
        case Symbol():
            if expr in RESERVED:
                raise ToyUnknownFormError(f"Reserved word {expr} used as a value")
            return Reference(expr)
        case []:
            raise ToyUnknownFormError("Empty list is not an expression")
        case [head, *tail]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, expand)
            return Application(expand(head), tuple(expand(arg) for arg in tail))
    raise ToyUnknownFormError(f"Cannot expand {expr!r}")


def expand_all(exprs: list[SExpression]) -> list[Form]:
    return [expand(e) for e in exprs]
