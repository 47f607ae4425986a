"""Closure representation for Quill (values produced by `fn*`)."""

from __future__ import annotations

import logging
from io import StringIO

from quill import SExpression, LispValue
from quill.types.environment import Environment
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Closure:
    """A first-class function with formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Shared, not copied: later def!s in the defining frame stay visible
        self.env: Environment = env
        logger.debug("Closure created: params=(%s)", " ".join(str(f) for f in formals))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn* (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue], form: SExpression = None) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new Environment, parented by the captured one, for the body.
        `form` is the call site, used to name the callee in arity errors.
        """
        from quill.types.bind import bind_arguments
        head = form[0] if isinstance(form, list) and form else None
        name = str(head) if isinstance(head, Symbol) else "fn*"
        return bind_arguments(self.formals, list(args), self.env, name=name, form=form)
