"""Registry of special forms for the toylisp expander.

Maps reserved Symbols to handler functions that validate the form's shape and
build its core Form. Any list whose head is not in this table expands to an
ordinary application.
"""

from toylisp.types.symbol import Symbol
from toylisp.expansion.special_forms.do_form import do_form
from toylisp.expansion.special_forms.defn_form import defn_form
from toylisp.expansion.special_forms.fn_form import fn_form
from toylisp.expansion.special_forms.let_form import let_form
from toylisp.expansion.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("do"): do_form,
    Symbol("defn"): defn_form,
    Symbol("fn"): fn_form,
    Symbol("let"): let_form,
    Symbol("if"): if_form,
}
