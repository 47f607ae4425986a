"""Special forms that expose the macro expander to Lisp code.

macroexpand-1: expand a single step at the head position if it is a macro.
macroexpand:   repeat head expansion until the form is no longer a macro call.

Both return the expansion as an S-expression and do not evaluate it. The
argument itself is not evaluated either; a single leading (quote ...) is
unwrapped so that both (macroexpand-1 (when x y)) and
(macroexpand-1 '(when x y)) work.
"""

from quill import SExpression, EvaluatorFn
from quill.errors import QuillMalformedSpecialForm
from quill.types.environment import Environment
from quill.types.symbol import Symbol
from quill.evaluation.macro_expander import expand_1, macroexpand


def _target_form(name: str, tail: list[SExpression]) -> SExpression:
    if len(tail) != 1:
        raise QuillMalformedSpecialForm(f"{name} expects exactly 1 argument", [Symbol(name), *tail])
    form = tail[0]
    if isinstance(form, list) and len(form) == 2 and form[0] == Symbol("quote"):
        form = form[1]
    return form


def macroexpand1_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn):
    return expand_1(_target_form("macroexpand-1", tail), env, evaluate_fn)


def macroexpand_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn):
    return macroexpand(_target_form("macroexpand", tail), env, evaluate_fn)
