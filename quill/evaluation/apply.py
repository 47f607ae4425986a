"""Application engine for Quill.

Centralizes how a callable value is applied to already-evaluated arguments:
- Closures get a fresh frame parented by their captured environment.
- Host primitives (Python callables) are invoked with (env, args).
Anything else is not callable.
"""

from typing import Callable

from quill import LispValue, SExpression, EvaluatorFn
from quill.errors import QuillNotCallable
from quill.types.environment import Environment
from quill.types.closure import Closure
from quill.types.macro import Macro


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    form: SExpression = None,
) -> LispValue:
    """Bind `args` to the closure's formals and evaluate its body.

    Raises QuillArityError, carrying the call `form`, when the argument count
    differs from the formal count.
    """
    new_env = fn.extend_env(args, form)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Closure | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: SExpression = None,
) -> LispValue:
    """Apply either a Closure or a Python callable.

    Macros are rejected here: they only make sense in head position of an
    unevaluated form, where the evaluator expands them before application.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn, form)
    if isinstance(head, Macro):
        raise QuillNotCallable(head, f"Macro {head.name} cannot be applied to evaluated arguments")
    if callable(head):
        return head(env, args)
    raise QuillNotCallable(head)
