from toylisp import SExpression
from toylisp.errors import ToyArityError
from toylisp.types.forms import Form, Sequence
from toylisp.expansion.special_forms.common import ExpanderFn


def do_form(tail: list[SExpression], expand_fn: ExpanderFn) -> Form:
    """
    (do expr...)
    At least one expression is required; the value is that of the last one.
    """
    if not tail:
        raise ToyArityError("do requires at least 1 expression")
    return Sequence(tuple(expand_fn(e) for e in tail))
