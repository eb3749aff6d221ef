from toylisp import SExpression
from toylisp.errors import ToyArityError
from toylisp.types.forms import Form, If
from toylisp.expansion.special_forms.common import ExpanderFn


def if_form(tail: list[SExpression], expand_fn: ExpanderFn) -> Form:
    """
    (if test then else)
    Both branches are required; only the chosen one is evaluated.
    """
    if len(tail) != 3:
        raise ToyArityError("if requires exactly 3 arguments")
    test, then, orelse = (expand_fn(e) for e in tail)
    return If(test, then, orelse)
