from toylisp import SExpression
from toylisp.errors import ToyUnknownFormError
from toylisp.types.forms import Definition, Form
from toylisp.expansion.special_forms.common import ExpanderFn, check_name
from toylisp.expansion.special_forms.fn_form import expand_lambda


def defn_form(tail: list[SExpression], expand_fn: ExpanderFn) -> Form:
    """
    (defn name (param...) body...)
    Sugar for binding `name` to (fn (param...) body...) in the current frame.
    """
    if len(tail) < 3:
        raise ToyUnknownFormError("defn requires a name, a parameter list and a body")
    name = tail[0]
    check_name(name, "defn")
    return Definition(name, expand_lambda(tail[1:], expand_fn, "defn"))
