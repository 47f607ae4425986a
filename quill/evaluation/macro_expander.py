"""Macro expansion for Quill.

Expansion is a separate pass that produces a new form; the evaluator decides
when to evaluate it. A single call to `expand` performs exactly one level of
expansion: macro calls nested inside the produced form are left alone until
the evaluator reaches them.
"""

from __future__ import annotations

import logging

from quill import SExpression, EvaluatorFn
from quill.types.environment import Environment
from quill.types.macro import Macro
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)


def expand(macro: Macro, call_args: list[SExpression], evaluate_fn: EvaluatorFn) -> SExpression:
    """
    Run a macro transformer:
    - Bind the raw, unevaluated argument forms to the macro's formals in a
      throwaway frame whose parent is the macro's defining environment.
    - Evaluate the macro body once in that frame to produce the expansion.
    - Do NOT evaluate the expansion here; just return it.
    """
    call_env = macro.extend_env(call_args)
    expansion = evaluate_fn(macro.body, call_env)
    logger.debug("Expanded macro %s -> %r", macro.name, expansion)
    return expansion


def macro_for(form: SExpression, env: Environment) -> Macro | None:
    """Return the Macro named by the head of `form`, or None if it is not a macro call."""
    # Deferred: special_forms imports this module
    from quill.evaluation.special_forms import SPECIAL_FORMS

    if not isinstance(form, list) or not form:
        return None
    head = form[0]
    if not isinstance(head, Symbol) or head in SPECIAL_FORMS:
        return None
    scope = env.find(head)
    if scope is None:
        return None
    value = scope.vars[head]
    return value if isinstance(value, Macro) else None


def is_macro_call(form: SExpression, env: Environment) -> bool:
    return macro_for(form, env) is not None


def expand_1(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand only the head-position macro if present; otherwise return `form` unchanged."""
    macro = macro_for(form, env)
    if macro is None:
        return form
    return expand(macro, form[1:], evaluate_fn)


def macroexpand(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Repeat head expansion until the form is no longer a macro call."""
    while (macro := macro_for(form, env)) is not None:
        form = expand(macro, form[1:], evaluate_fn)
    return form
