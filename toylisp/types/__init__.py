from toylisp.types.symbol import Symbol
from toylisp.types.environment import Environment
from toylisp.types.closure import Closure
from toylisp.types.primitive import Primitive
from toylisp.types import forms

__all__ = ["Symbol", "Environment", "Closure", "Primitive", "forms"]
