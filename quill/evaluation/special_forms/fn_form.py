from quill import EvaluatorFn
from quill import SExpression, LispValue
from quill.errors import QuillMalformedSpecialForm
from quill.types.closure import Closure
from quill.types.environment import Environment
from quill.types.nil import Nil
from quill.types.symbol import Symbol


def parse_params_and_body(
    head: str, tail: list[SExpression]
) -> tuple[list[Symbol], SExpression]:
    """Split `(params body...)` into a formal list and a single body form.

    Zero body forms give a nil body; several are wrapped in an implicit `do`.
    """
    if not tail:
        raise QuillMalformedSpecialForm(f"{head} requires a parameter list", [Symbol(head)])

    params = tail[0]
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise QuillMalformedSpecialForm(
            f"{head} parameters must be a list of symbols. Received: {params!r}",
            [Symbol(head), *tail],
        )

    body_forms = tail[1:]
    if not body_forms:
        body = Nil
    elif len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("do"), *body_forms]
    return list(params), body


def fn_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    params, body = parse_params_and_body("fn*", tail)
    return Closure(params, body, env)
