import pytest

from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.types.nil import Nil
from quill.types.macro import Macro
from quill.evaluation.evaluator import evaluate
from quill.builtin.env_builtin import register
from quill.errors import QuillMalformedSpecialForm, QuillArityError, QuillUnboundSymbol


@pytest.fixture
def env():
    e = Environment()
    register(e)
    return e


# ------------------ if ------------------

def test_if_true_and_false(env):
    assert evaluate([Symbol("if"), True, 1, 2], env) == 1
    assert evaluate([Symbol("if"), False, 1, 2], env) == 2
    assert evaluate([Symbol("if"), Nil, 1, 2], env) == 2


def test_if_missing_else_is_nil(env):
    assert evaluate([Symbol("if"), False, 1], env) is Nil


@pytest.mark.parametrize("cond", [0, "", [], Symbol("quote")])
def test_if_only_false_and_nil_are_false(env, cond):
    if isinstance(cond, Symbol):
        cond = [cond, Symbol("anything")]
    assert evaluate([Symbol("if"), cond, "yes", "no"], env) == "yes"


def test_if_only_evaluates_taken_branch(env):
    assert evaluate([Symbol("if"), True, 1, Symbol("unbound")], env) == 1
    assert evaluate([Symbol("if"), False, Symbol("unbound"), 2], env) == 2


@pytest.mark.parametrize("tail", [[], [True], [True, 1, 2, 3]])
def test_if_malformed(env, tail):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("if"), *tail], env)


# ------------------ do ------------------

def test_do_sequencing(env):
    expr = [Symbol("do"),
            [Symbol("def!"), Symbol("a"), 10],
            [Symbol("def!"), Symbol("b"), 20],
            [Symbol("+"), Symbol("a"), Symbol("b")]]
    assert evaluate(expr, env) == 30


def test_empty_do_is_nil(env):
    assert evaluate([Symbol("do")], env) is Nil


# ------------------ def! ------------------

def test_def_overwrites_in_same_frame(env):
    evaluate([Symbol("def!"), Symbol("v"), 1], env)
    evaluate([Symbol("def!"), Symbol("v"), 2], env)
    assert evaluate(Symbol("v"), env) == 2


def test_def_targets_innermost_frame(env):
    child = Environment(outer=env)
    evaluate([Symbol("def!"), Symbol("v"), 1], child)
    assert Symbol("v") in child.vars
    assert Symbol("v") not in env.vars


@pytest.mark.parametrize("tail", [[], [Symbol("v")], [1, 2], ["v", 2], [Symbol("v"), 1, 2]])
def test_def_malformed(env, tail):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("def!"), *tail], env)


# ------------------ fn* ------------------

def test_fn_does_not_evaluate_body(env):
    fn = evaluate([Symbol("fn*"), [], Symbol("unbound")], env)
    with pytest.raises(QuillUnboundSymbol):
        evaluate([fn], env)


def test_fn_multiple_body_forms(env):
    fn = evaluate([Symbol("fn*"), [Symbol("a")],
                   [Symbol("def!"), Symbol("t"), [Symbol("*"), Symbol("a"), 2]],
                   [Symbol("+"), Symbol("t"), 1]], env)
    assert evaluate([fn, 5], env) == 11


def test_fn_empty_body_returns_nil(env):
    fn = evaluate([Symbol("fn*"), []], env)
    assert evaluate([fn], env) is Nil


@pytest.mark.parametrize("tail", [[], [Symbol("a"), 1], [[1, 2], 1]])
def test_fn_malformed(env, tail):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("fn*"), *tail], env)


# ------------------ defmacro! ------------------

def test_defmacro_binds_macro_in_current_frame(env):
    m = evaluate([Symbol("defmacro!"), Symbol("twice"),
                  [Symbol("fn*"), [Symbol("e")],
                   [Symbol("quasiquote"), [Symbol("do"), [Symbol("unquote"), Symbol("e")],
                                           [Symbol("unquote"), Symbol("e")]]]]], env)
    assert isinstance(m, Macro)
    assert env.lookup(Symbol("twice")) is m
    assert m.formals == [Symbol("e")]


def test_defmacro_short_form(env):
    evaluate([Symbol("defmacro!"), Symbol("unless"), [Symbol("c"), Symbol("body")],
              [Symbol("quasiquote"), [Symbol("if"), [Symbol("unquote"), Symbol("c")],
                                      Nil, [Symbol("unquote"), Symbol("body")]]]], env)
    assert evaluate([Symbol("unless"), False, 7], env) == 7
    assert evaluate([Symbol("unless"), True, 7], env) is Nil


def test_defmacro_body_not_evaluated_at_definition(env):
    evaluate([Symbol("defmacro!"), Symbol("m"), [Symbol("fn*"), [], Symbol("unbound")]], env)
    with pytest.raises(QuillUnboundSymbol):
        evaluate([Symbol("m")], env)


@pytest.mark.parametrize("tail", [[], [Symbol("m")], [1, [Symbol("fn*"), [], 1]]])
def test_defmacro_malformed(env, tail):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("defmacro!"), *tail], env)


# ------------------ let* ------------------

def test_let_star_sequential_bindings(env):
    expr = [Symbol("let*"), [Symbol("a"), 2, Symbol("b"), [Symbol("+"), Symbol("a"), 1]],
            [Symbol("*"), Symbol("a"), Symbol("b")]]
    assert evaluate(expr, env) == 6
    with pytest.raises(QuillUnboundSymbol):
        evaluate(Symbol("a"), env)


@pytest.mark.parametrize("bindings", [[Symbol("a")], [1, 2], Symbol("a")])
def test_let_star_malformed(env, bindings):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("let*"), bindings, 1], env)


# ------------------ eval ------------------

def test_eval_evaluates_constructed_form(env):
    form = [Symbol("list"), [Symbol("quote"), Symbol("+")], 1, 2]
    assert evaluate([Symbol("eval"), form], env) == 3


def test_eval_runs_in_current_frame(env):
    # (def! g (fn* (v) (eval '(def! w (+ v 1))) w))
    evaluate([Symbol("def!"), Symbol("g"),
              [Symbol("fn*"), [Symbol("v")],
               [Symbol("eval"), [Symbol("quote"), [Symbol("def!"), Symbol("w"), [Symbol("+"), Symbol("v"), 1]]]],
               Symbol("w")]], env)
    assert evaluate([Symbol("g"), 1], env) == 2
    with pytest.raises(QuillUnboundSymbol):
        env.lookup(Symbol("w"))


# ------------------ quote ------------------

@pytest.mark.parametrize("tail", [[], [1, 2]])
def test_quote_malformed(env, tail):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("quote"), *tail], env)


def test_unquote_outside_quasiquote(env):
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("unquote"), 1], env)
    with pytest.raises(QuillMalformedSpecialForm):
        evaluate([Symbol("unquote-splicing"), [Symbol("list")]], env)
