from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillMalformedSpecialForm
from quill.types.nil import Nil
from quill.types.symbol import Symbol
from quill.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    """Only false and nil are false; 0, "" and () are all true."""
    return value is not False and value is not Nil


def if_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) not in (2, 3):
        raise QuillMalformedSpecialForm(
            "if requires a condition, a then-branch and an optional else-branch",
            [Symbol("if"), *tail],
        )

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
