"""Display text for toylisp values."""

from toylisp import LispValue
from toylisp.types.closure import Closure
from toylisp.types.primitive import Primitive


def to_string(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int() | float():
            return repr(value)
        case Closure() | Primitive():
            return str(value)
    return repr(value)
