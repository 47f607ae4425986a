from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.types.environment import Environment
from quill.types.nil import Nil


def do_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
