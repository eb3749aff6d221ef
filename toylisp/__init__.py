# Core type aliases for toylisp's data model.
# Source-level data (s-expressions) uses plain Python types: Symbol atoms,
# int/float/bool literals and Python lists. Evaluated values are numbers,
# booleans, Closure and Primitive objects.
#
# Naming guidance:
# - SExpression: use in reader/expander code to denote raw syntax.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Raw syntax produced by the reader
SExpression = Any

# Evaluator function type, handed to the application engine
EvaluatorFn = Callable[..., LispValue]
