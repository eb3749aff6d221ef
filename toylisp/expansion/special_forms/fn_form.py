from toylisp import SExpression
from toylisp.errors import ToyDuplicateParamError, ToyUnknownFormError
from toylisp.types.forms import Form, Lambda
from toylisp.types.symbol import Symbol
from toylisp.expansion.special_forms.common import ExpanderFn, check_name


def expand_params(params: SExpression, form_name: str) -> tuple[Symbol, ...]:
    """Validate a parameter list: distinct, non-reserved symbols."""
    if not isinstance(params, list):
        raise ToyUnknownFormError(f"{form_name} requires a parameter list, got {params!r}")
    seen: set[Symbol] = set()
    for p in params:
        check_name(p, form_name)
        if p in seen:
            raise ToyDuplicateParamError(p)
        seen.add(p)
    return tuple(params)


def expand_lambda(tail: list[SExpression], expand_fn: ExpanderFn, form_name: str) -> Lambda:
    # (params body...), shared by fn and defn
    if not tail:
        raise ToyUnknownFormError(f"{form_name} requires a parameter list")
    params = expand_params(tail[0], form_name)
    body_forms = tail[1:]
    if not body_forms:
        raise ToyUnknownFormError(f"{form_name} requires at least 1 body expression")
    return Lambda(params, tuple(expand_fn(e) for e in body_forms))


def fn_form(tail: list[SExpression], expand_fn: ExpanderFn) -> Form:
    """
    (fn (param...) body...)
    Several body expressions are evaluated in order in the call frame.
    """
    return expand_lambda(tail, expand_fn, "fn")
