"""Core evaluator for the Quill interpreter.

Dispatch order for a form:
1. Symbols are looked up through the environment chain.
2. Atoms (numbers, booleans, strings, nil, the empty list, function values)
   evaluate to themselves.
3. Lists headed by a special-form symbol go to the special-form handler.
4. Lists whose head resolves to a Macro are expanded once and the expansion
   is evaluated in the same environment.
5. Otherwise the head is applied to the evaluated arguments.
"""

from __future__ import annotations

from quill import SExpression, LispValue
from quill.types.environment import Environment
from quill.types.macro import Macro
from quill.types.symbol import Symbol
from quill.evaluation.apply import apply
from quill.evaluation.macro_expander import expand
from quill.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case [head, *tail_args]:
            if isinstance(head, Symbol):
                # --- Special forms take priority over any binding of the head ---
                handler = SPECIAL_FORMS.get(head)
                if handler is not None:
                    return handler(tail_args, env, evaluate)
                fn = env.lookup(head)
            else:
                fn = evaluate(head, env)

            # Macro call: expand against the raw argument forms, then evaluate.
            if isinstance(fn, Macro):
                expansion = expand(fn, tail_args, evaluate)
                return evaluate(expansion, env)

            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate, form=expr)

    # --- Atoms return as-is ---
    return expr
