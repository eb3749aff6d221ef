"""Core evaluator for the toylisp interpreter.

Walks validated Forms against an Environment. Evaluation is synchronous and
recursive; nesting is bounded by `max_depth` so that runaway recursion in a
program surfaces as ToyResourceExhaustedError rather than a host crash.
"""

from __future__ import annotations

import logging

from toylisp import LispValue
from toylisp.config import DEFAULT_MAX_DEPTH
from toylisp.errors import (
    ToyEmptySequenceError,
    ToyResourceExhaustedError,
    ToyTypeError,
)
from toylisp.types.closure import Closure
from toylisp.types.environment import Environment
from toylisp.types.forms import (
    Application,
    Binding,
    Definition,
    Form,
    If,
    Lambda,
    Literal,
    Reference,
    Sequence,
)
from toylisp.evaluation.apply import apply

logger = logging.getLogger(__name__)


def evaluate(
    form: Form,
    env: Environment,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> LispValue:
    """
    Evaluate `form` in `env`, converting host stack exhaustion into
    ToyResourceExhaustedError.
    """
    try:
        return evaluate0(form, env, depth, max_depth)
    except RecursionError:
        raise ToyResourceExhaustedError("Host recursion limit reached during evaluation") from None


def evaluate0(
    form: Form,
    env: Environment,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> LispValue:
    """Single recursive evaluation step."""
    if depth > max_depth:
        raise ToyResourceExhaustedError(f"Evaluation depth exceeded {max_depth}")
    depth += 1

    match form:
        case Literal(value=value):
            return value

        case Reference(name=name):
            return env.lookup(name)

        case Lambda(params=params, body=body):
            return Closure(params, body, env)

        case Definition(name=name, value=Lambda(params=params, body=body)):
            # The closure captures the frame it is bound in, so it can call itself
            fn = Closure(params, body, env, name)
            env.define(name, fn)
            logger.debug("defn %s", fn)
            return fn

        case Binding(name=name, value=value_form):
            value = evaluate0(value_form, env, depth, max_depth)
            env.define(name, value)
            return value

        case Sequence(body=body):
            if not body:
                raise ToyEmptySequenceError("do with an empty body")
            seq_env = env.extend()
            result: LispValue = None
            for sub in body:
                result = evaluate0(sub, seq_env, depth, max_depth)
            return result

        case If(test=test, then=then, orelse=orelse):
            flag = evaluate0(test, env, depth, max_depth)
            if not isinstance(flag, bool):
                raise ToyTypeError(f"if test must be a boolean, got {flag!r}")
            return evaluate0(then if flag else orelse, env, depth, max_depth)

        case Application(callee=callee, args=arg_forms):
            head = evaluate0(callee, env, depth, max_depth)
            args = [evaluate0(a, env, depth, max_depth) for a in arg_forms]
            return apply(head, args, evaluate0, depth, max_depth)

    raise TypeError(f"Not a toylisp form: {form!r}")
