"""Macro representation for Quill (values produced by `defmacro!`)."""

from __future__ import annotations

from quill import SExpression
from quill.types.environment import Environment
from quill.types.symbol import Symbol


class Macro:
    """
    A code transformer. Its body is run against the *unevaluated* argument
    forms of a call site, in a throwaway frame parented by the environment the
    macro was defined in. No renaming is performed, so expansions may capture
    or shadow call-site bindings.
    """

    __slots__ = ("name", "formals", "body", "env")

    def __init__(
        self,
        formals: list[Symbol],
        body: SExpression,
        env: Environment,
        name: Symbol | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env
        self.name: Symbol | None = name

    def extend_env(self, forms: list[SExpression]) -> Environment:
        from quill.types.bind import bind_arguments
        label = f"macro {self.name}" if self.name is not None else "macro"
        call = [self.name, *forms] if self.name is not None else None
        return bind_arguments(self.formals, list(forms), self.env, name=label, form=call)

    def __repr__(self) -> str:
        formals = " ".join(str(f) for f in self.formals)
        return f"<Macro {self.name or ''} ({formals})>"
