import pytest
from hypothesis import given, strategies as st

from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.types.nil import Nil
from quill.types.closure import Closure
from quill.evaluation.evaluator import evaluate
from quill.builtin.env_builtin import register
from quill import errors

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    e = Environment()
    register(e)
    e.define(Symbol("x"), 42)
    e.define(Symbol("y"), 100)
    return e


atom_strat = st.one_of(
    st.integers(),
    st.floats(allow_nan=False),
    st.booleans(),
    st.text(max_size=20),
    st.just(Nil),
)

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate(Nil, env) is Nil
    assert evaluate([], env) == []


@given(atom_strat)
def test_atoms_evaluate_to_themselves(value):
    assert evaluate(value, Environment()) == value


@given(st.recursive(
    st.one_of(st.integers(), st.text(max_size=5).map(lambda s: Symbol("s" + s))),
    lambda children: st.lists(children, max_size=4),
    max_leaves=10,
))
def test_quote_returns_form_verbatim(form):
    assert evaluate([Symbol("quote"), form], Environment()) == form


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("y"), env) == 100


def test_unbound_symbol(env):
    with pytest.raises(errors.QuillUnboundSymbol) as exc:
        evaluate(Symbol("z"), env)
    assert exc.value.symbol == Symbol("z")


def test_simple_expression(env):
    assert evaluate([Symbol("+"), 1, 2], env) == 3
    assert evaluate([Symbol("+"), Symbol("x"), [Symbol("*"), 2, 3]], env) == 48


def test_fn_simple(env):
    expr = [Symbol("fn*"), [Symbol("a"), Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]
    fn = evaluate(expr, env)
    assert isinstance(fn, Closure)
    assert evaluate([fn, 2, 3], env) == 5


def test_fn_called_inline(env):
    expr = [[Symbol("fn*"), [Symbol("a")], [Symbol("*"), Symbol("a"), Symbol("a")]], 7]
    assert evaluate(expr, env) == 49


def test_def_and_lookup(env):
    assert evaluate([Symbol("def!"), Symbol("v"), 5], env) == 5
    assert evaluate(Symbol("v"), env) == 5


def test_closure_arity_mismatch(env):
    evaluate([Symbol("def!"), Symbol("add"),
              [Symbol("fn*"), [Symbol("a"), Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]], env)
    with pytest.raises(errors.QuillArityError):
        evaluate([Symbol("add"), 1], env)
    with pytest.raises(errors.QuillArityError):
        evaluate([Symbol("add"), 1, 2, 3], env)


def test_arity_error_names_callee(env):
    evaluate([Symbol("def!"), Symbol("add"),
              [Symbol("fn*"), [Symbol("a"), Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]], env)
    with pytest.raises(errors.QuillArityError, match="add expects 2") as excinfo:
        evaluate([Symbol("add"), 1, 2, 3], env)
    assert excinfo.value.form == [Symbol("add"), 1, 2, 3]


def test_arity_error_for_anonymous_closure(env):
    call = [[Symbol("fn*"), [Symbol("a")], Symbol("a")]]
    with pytest.raises(errors.QuillArityError, match=r"fn\* expects 1") as excinfo:
        evaluate(call, env)
    assert excinfo.value.form == call


def test_closure_captures_defining_frame(env):
    # (def! x 5) (def! f (fn* (y) (+ y x)))
    evaluate([Symbol("def!"), Symbol("x"), 5], env)
    evaluate([Symbol("def!"), Symbol("f"),
              [Symbol("fn*"), [Symbol("y")], [Symbol("+"), Symbol("y"), Symbol("x")]]], env)

    # Rebinding x in a different (child) frame does not affect f
    other = Environment(outer=env)
    evaluate([Symbol("def!"), Symbol("x"), 10], other)
    assert evaluate([Symbol("f"), 1], other) == 6
    assert evaluate([Symbol("f"), 1], env) == 6

    # Mutating x in the frame f closed over is visible to f
    evaluate([Symbol("def!"), Symbol("x"), 10], env)
    assert evaluate([Symbol("f"), 1], env) == 11


def test_closure_outlives_creating_call(env):
    # (def! make-adder (fn* (n) (fn* (m) (+ n m))))
    evaluate([Symbol("def!"), Symbol("make-adder"),
              [Symbol("fn*"), [Symbol("n")],
               [Symbol("fn*"), [Symbol("m")], [Symbol("+"), Symbol("n"), Symbol("m")]]]], env)
    add3 = evaluate([Symbol("make-adder"), 3], env)
    add10 = evaluate([Symbol("make-adder"), 10], env)
    assert evaluate([add3, 1], env) == 4
    assert evaluate([add10, 1], env) == 11


def test_call_frame_does_not_leak(env):
    evaluate([Symbol("def!"), Symbol("g"),
              [Symbol("fn*"), [Symbol("q")], [Symbol("def!"), Symbol("inner"), Symbol("q")]]], env)
    assert evaluate([Symbol("g"), 9], env) == 9
    with pytest.raises(errors.QuillUnboundSymbol):
        evaluate(Symbol("inner"), env)
    with pytest.raises(errors.QuillUnboundSymbol):
        evaluate(Symbol("q"), env)


def test_arguments_evaluated_left_to_right(env):
    seen = []
    env.define(Symbol("note"), lambda _, args: seen.append(args[0]) or args[0])
    evaluate([Symbol("list"), [Symbol("note"), 1], [Symbol("note"), 2], [Symbol("note"), 3]], env)
    assert seen == [1, 2, 3]


@pytest.mark.parametrize("head", [1, "text", True, Nil])
def test_not_callable(env, head):
    with pytest.raises(errors.QuillNotCallable):
        evaluate([head, 1], env)


def test_not_callable_via_symbol(env):
    with pytest.raises(errors.QuillNotCallable) as exc:
        evaluate([Symbol("x"), 1], env)
    assert exc.value.value == 42


def test_special_form_beats_binding(env):
    # A global named `if` does not change how (if ...) evaluates
    env.define(Symbol("if"), lambda _, args: "shadowed")
    assert evaluate([Symbol("if"), True, 1, 2], env) == 1


def test_failed_form_keeps_earlier_definitions(env):
    evaluate([Symbol("def!"), Symbol("kept"), 1], env)
    with pytest.raises(errors.QuillUnboundSymbol):
        evaluate([Symbol("do"), [Symbol("def!"), Symbol("also"), 2], Symbol("missing")], env)
    assert evaluate(Symbol("kept"), env) == 1
    assert evaluate(Symbol("also"), env) == 2
