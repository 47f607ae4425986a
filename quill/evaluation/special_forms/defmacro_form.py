"""Special form: defmacro!.

Defines a macro transformer and binds it in the current frame. Two shapes are
accepted:

    (defmacro! when (fn* (cond body) `(if ~cond ~body nil)))
    (defmacro! when (cond body) `(if ~cond ~body nil))

In the first shape the `fn*` form is taken apart syntactically; it is never
evaluated, so no closure is created at definition time.
"""

from __future__ import annotations

from quill import EvaluatorFn, SExpression, LispValue
from quill.errors import QuillMalformedSpecialForm
from quill.types.environment import Environment
from quill.types.macro import Macro
from quill.types.symbol import Symbol
from quill.evaluation.special_forms.fn_form import parse_params_and_body

FN_STAR = Symbol("fn*")


def defmacro_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Register a macro named by the first argument; returns the Macro."""
    if len(tail) < 2:
        raise QuillMalformedSpecialForm(
            "defmacro! requires a name and a transformer", [Symbol("defmacro!"), *tail]
        )

    macro_name = tail[0]
    if not isinstance(macro_name, Symbol):
        raise QuillMalformedSpecialForm(
            f"defmacro! first arg must be a symbol. Received: {macro_name!r}",
            [Symbol("defmacro!"), *tail],
        )

    definition = tail[1]
    if len(tail) == 2 and isinstance(definition, list) and definition and definition[0] == FN_STAR:
        params, body = parse_params_and_body("defmacro!", definition[1:])
    else:
        params, body = parse_params_and_body("defmacro!", tail[1:])

    macro = Macro(params, body, env, name=macro_name)
    env.define(macro_name, macro)
    return macro
