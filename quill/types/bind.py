from __future__ import annotations

from quill import LispValue, SExpression
from quill.errors import QuillArityError
from quill.types.environment import Environment
from quill.types.symbol import Symbol


def bind_arguments(
    formals: list[Symbol],
    supplied_args: list[LispValue],
    outer: Environment,
    name: str = "function",
    form: SExpression = None,
) -> Environment:
    """
    Single source of truth for parameter binding in Quill.

    Parameters are strictly positional: the supplied count must equal the
    formal count, otherwise QuillArityError is raised naming `name` and
    carrying the call `form`. Returns a new Environment whose outer is
    `outer`, populated with one binding per formal.
    """
    if len(formals) != len(supplied_args):
        raise QuillArityError(
            f"{name} expects {len(formals)} argument(s), received {len(supplied_args)}", form
        )
    local_env = Environment(outer=outer)
    for formal, value in zip(formals, supplied_args):
        local_env.define(formal, value)
    return local_env
