"""Helpers shared by the special-form expanders."""

from typing import Callable

from toylisp import SExpression
from toylisp.errors import ToyUnknownFormError
from toylisp.types.forms import Form
from toylisp.types.symbol import Symbol

# Recursive expander handed to every special form
ExpanderFn = Callable[[SExpression], Form]

RESERVED = frozenset(Symbol(k) for k in ("do", "defn", "fn", "let", "if"))


def check_name(name: SExpression, form_name: str) -> None:
    """Reject anything that cannot be bound: non-symbols and reserved words."""
    if not isinstance(name, Symbol):
        raise ToyUnknownFormError(f"{form_name} expects a symbol, got {name!r}")
    if name in RESERVED:
        raise ToyUnknownFormError(f"{form_name} cannot bind reserved word {name}")
