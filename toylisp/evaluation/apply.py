"""Application engine for toylisp.

Closures and primitives are both applied here, so the evaluator, and any host
code that wants to call a toylisp function, share one set of rules:

- arguments arrive already evaluated, left to right, in the caller's frame;
- a closure body runs in a fresh frame whose parent is the closure's
  captured frame, never the caller's;
- a primitive's native behaviour receives the argument values directly;
- anything else is not callable.
"""

from __future__ import annotations

import logging

from toylisp import EvaluatorFn, LispValue
from toylisp.errors import ToyNotCallableError
from toylisp.types.closure import Closure
from toylisp.types.primitive import Primitive

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    depth: int,
    max_depth: int,
) -> LispValue:
    """Apply a Closure to evaluated arguments.

    Raises ToyArityError when the argument count differs from the parameter
    count. Body forms are evaluated in order in the call frame; the last
    value is returned.
    """
    call_env = fn.extend_env(args)
    logger.debug("apply %s to %r", fn, args)
    result: LispValue = None
    for form in fn.body:
        result = evaluate_fn(form, call_env, depth, max_depth)
    return result


def apply(
    head: object,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    depth: int,
    max_depth: int,
) -> LispValue:
    """Apply either a Closure or a Primitive; raise ToyNotCallableError otherwise."""
    match head:
        case Closure():
            return apply_closure(head, args, evaluate_fn, depth, max_depth)
        case Primitive():
            return head(args)
        case _:
            raise ToyNotCallableError(f"Cannot apply non-function {head!r}")
