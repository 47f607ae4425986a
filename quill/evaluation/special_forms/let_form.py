from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillMalformedSpecialForm
from quill.types.environment import Environment
from quill.types.nil import Nil
from quill.types.symbol import Symbol


def let_star_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (let* (k1 v1 k2 v2 ...) body...)
    Bindings are made one after another in a single new frame, so each value
    can refer to the names bound before it. The body runs in that frame.
    """
    if not tail:
        raise QuillMalformedSpecialForm("let* requires a binding list", [Symbol("let*")])

    bindings = tail[0]
    if not isinstance(bindings, list) or len(bindings) % 2 != 0:
        raise QuillMalformedSpecialForm(
            f"let* first arg must be a list of key value pairs. Received: {bindings!r}",
            [Symbol("let*"), *tail],
        )

    local_env = Environment(outer=env)
    for key, value_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(key, Symbol):
            raise QuillMalformedSpecialForm(
                f"let* bindings key must be a symbol. Received: {key!r}",
                [Symbol("let*"), *tail],
            )
        local_env.define(key, evaluate_fn(value_expr, local_env))

    result: LispValue = Nil
    for form in tail[1:]:
        result = evaluate_fn(form, local_env)
    return result
