import pytest

from toylisp.errors import (
    ToyArityError,
    ToyEmptySequenceError,
    ToyNotCallableError,
    ToyRebindError,
    ToyResourceExhaustedError,
    ToyTypeError,
    ToyUnboundNameError,
)
from toylisp.evaluation.evaluator import evaluate
from toylisp.expansion.expander import expand
from toylisp.reader.parser import read_one
from toylisp.types.closure import Closure
from toylisp.types.forms import Lambda, Literal, Reference, Sequence
from toylisp.types.primitive import Primitive
from toylisp.types.symbol import Symbol


def run(source, env, **kwargs):
    return evaluate(expand(read_one(source)), env, **kwargs)


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert run("1", env) == 1
    assert run("3.14", env) == 3.14
    assert run("true", env) is True
    assert run("false", env) is False


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert run("x", env) == 42
    with pytest.raises(ToyUnboundNameError):
        run("z", env)


def test_primitive_lookup(env):
    add = run("add", env)
    assert isinstance(add, Primitive)
    assert add.arity == 2


def test_simple_expression(env):
    assert run("(add 1 2)", env) == 3
    assert run("(add 1 (mul 2 3))", env) == 7


def test_do_returns_last_value(env):
    assert run("(do 1 2 3)", env) == 3
    assert run("(do (add 1 2) (mul 2 3))", env) == 6


def test_let_returns_bound_value(env):
    assert run("(let foo 1)", env) == 1
    assert env.lookup(Symbol("foo")) == 1
    assert run("(do (let foo 2) foo)", env) == 2


def test_do_opens_a_child_frame(env):
    assert run("(do (let foo 1) (do (let foo 2) foo))", env) == 2
    assert run("(do (let foo 1) (do (let foo 2) foo) foo)", env) == 1
    # Bindings made inside a do do not leak out
    with pytest.raises(ToyUnboundNameError):
        run("foo", env)


def test_rebind_in_same_sequence_fails(env):
    with pytest.raises(ToyRebindError):
        run("(do (let x 1) (let x 2))", env)


def test_rebinding_a_parameter_fails(env):
    with pytest.raises(ToyRebindError):
        run("((fn (x) (let x 2) x) 1)", env)


def test_parameter_may_be_shadowed_in_nested_do(env):
    assert run("((fn (x) (do (let x 2) x)) 1)", env) == 2


def test_lambda_does_not_evaluate_body(env):
    fn = run("(fn (a) (undefined_name a))", env)
    assert isinstance(fn, Closure)
    assert fn.params == (Symbol("a"),)
    assert fn.env is env


def test_lambda_simple(env):
    assert run("((fn (a b) (add a b)) 2 3)", env) == 5


def test_lambda_body_returns_last_form(env):
    assert run("((fn (a) (let b (mul a 2)) (add a b)) 5)", env) == 15


def test_defn_returns_named_closure(env):
    fn = run("(defn double (n) (mul n 2))", env)
    assert isinstance(fn, Closure)
    assert fn.name == Symbol("double")
    assert env.lookup(Symbol("double")) is fn


def test_defn_can_recurse(env):
    source = """
    (do
      (defn fact (n) (if (lte n 1) 1 (mul n (fact (sub n 1)))))
      (fact 10))
    """
    assert run(source, env) == 3628800


def test_mutual_recursion_within_a_sequence(env):
    source = """
    (do
      (defn is_even (n) (if (eq n 0) true (is_odd (sub n 1))))
      (defn is_odd (n) (if (eq n 0) false (is_even (sub n 1))))
      (is_even 10))
    """
    assert run(source, env) is True


def test_if_expression(env):
    assert run("(if true 1 2)", env) == 1
    assert run("(if false 1 2)", env) == 2
    assert run("(if (gt 3 2) 10 20)", env) == 10


def test_if_evaluates_only_chosen_branch(env):
    assert run("(if true 1 (undefined_name))", env) == 1
    assert run("(if false (undefined_name) 2)", env) == 2


def test_if_requires_boolean(env):
    with pytest.raises(ToyTypeError):
        run("(if 1 2 3)", env)


def test_arguments_evaluate_in_caller_frame(env):
    source = """
    (do
      (let y 5)
      (defn f (x) x)
      (f y))
    """
    assert run(source, env) == 5


def test_closure_does_not_see_caller_bindings(env):
    # Lexical, not dynamic, scoping: `y` is bound where g is called, not where it was made
    source = """
    (do
      (defn g () y)
      (defn h (y) (g))
      (h 1))
    """
    with pytest.raises(ToyUnboundNameError):
        run(source, env)


@pytest.mark.parametrize("source", ["(1 2)", "(true)", "((add 1 2) 3)"])
def test_not_callable(env, source):
    with pytest.raises(ToyNotCallableError):
        run(source, env)


@pytest.mark.parametrize("source", ["((fn (x) x))", "((fn (x) x) 1 2)", "(add 1)", "(not true false)"])
def test_arity_errors(env, source):
    with pytest.raises(ToyArityError):
        run(source, env)


def test_arguments_are_evaluated_left_to_right(env):
    seen = []
    env.define(Symbol("note"), Primitive("note", 1, lambda v: seen.append(v) or v))
    run("(add (note 1) (note 2))", env)
    assert seen == [1, 2]


def test_empty_sequence_form_is_rejected(env):
    # The expander never builds this; the evaluator still refuses it
    with pytest.raises(ToyEmptySequenceError):
        evaluate(Sequence(()), env)


def test_forms_can_be_built_directly(env):
    form = Sequence((Lambda((Symbol("a"),), (Reference(Symbol("a")),)), Literal(7)))
    assert evaluate(form, env) == 7


def test_depth_limit(env):
    source = """
    (do
      (defn loop (n) (loop (add n 1)))
      (loop 0))
    """
    with pytest.raises(ToyResourceExhaustedError):
        run(source, env, max_depth=50)


def test_deep_recursion_is_bounded_by_default(env):
    source = """
    (do
      (defn count (n) (if (eq n 0) 0 (add 1 (count (sub n 1)))))
      (count 100000))
    """
    with pytest.raises(ToyResourceExhaustedError):
        run(source, env)
