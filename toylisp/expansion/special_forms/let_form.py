from toylisp import SExpression
from toylisp.errors import ToyArityError
from toylisp.types.forms import Binding, Form
from toylisp.expansion.special_forms.common import ExpanderFn, check_name


def let_form(tail: list[SExpression], expand_fn: ExpanderFn) -> Form:
    """
    (let name value)
    """
    if len(tail) != 2:
        raise ToyArityError("let requires exactly 2 arguments")
    name, val_expr = tail
    check_name(name, "let")
    return Binding(name, expand_fn(val_expr))
