from quill import SExpression, LispValue, EvaluatorFn
from quill.errors import QuillMalformedSpecialForm
from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.evaluation.quasiquote import quasi_expand


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise QuillMalformedSpecialForm("quote expects exactly 1 argument", [Symbol("quote"), *tail])
    return tail[0]


def quasiquote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise QuillMalformedSpecialForm(
            "quasiquote expects exactly 1 argument", [Symbol("quasiquote"), *tail]
        )
    # Rewrite the template into construction code, then run that code here.
    return evaluate_fn(quasi_expand(tail[0]), env)


def quasiquote_expand_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quasiquote-expand template): the construction code, not evaluated."""
    if len(tail) != 1:
        raise QuillMalformedSpecialForm(
            "quasiquote-expand expects exactly 1 argument", [Symbol("quasiquote-expand"), *tail]
        )
    return quasi_expand(tail[0])


def unquote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise QuillMalformedSpecialForm("unquote not valid outside of quasiquote", [Symbol("unquote"), *tail])


def unquote_splice_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise QuillMalformedSpecialForm(
        "unquote-splicing not valid outside of quasiquote", [Symbol("unquote-splicing"), *tail]
    )
