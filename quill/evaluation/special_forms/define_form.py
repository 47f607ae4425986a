from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillMalformedSpecialForm
from quill.types.environment import Environment
from quill.types.symbol import Symbol


def define_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (def! name value)
    Binds in the innermost frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise QuillMalformedSpecialForm("def! requires exactly 2 arguments", [Symbol("def!"), *tail])

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise QuillMalformedSpecialForm(
            f"def! first arg must be a symbol. Received: {name!r}", [Symbol("def!"), *tail]
        )
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
