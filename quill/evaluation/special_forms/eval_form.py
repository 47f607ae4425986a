from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillMalformedSpecialForm
from quill.types.environment import Environment
from quill.types.symbol import Symbol


def eval_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (eval expr)
    Evaluates `expr` to obtain a form, then evaluates that form in the current
    environment, so the form sees the caller's local bindings and any `def!`
    it performs lands in the current frame.
    """
    if len(tail) != 1:
        raise QuillMalformedSpecialForm("eval expects exactly one argument", [Symbol("eval"), *tail])
    form = evaluate_fn(tail[0], env)
    return evaluate_fn(form, env)
