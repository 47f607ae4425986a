"""Render Quill values back into reader syntax."""

from quill import LispValue
from quill.types.closure import Closure
from quill.types.macro import Macro
from quill.types.nil import NilType
from quill.types.symbol import Symbol

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def _escape(s: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in s)


def pr_str(value: LispValue, readably: bool = True) -> str:
    """Return the printed representation of `value`.

    With `readably` set, strings are quoted and escaped so the output can be
    read back; otherwise they are emitted raw (as `print`/`println` do).
    """
    if isinstance(value, NilType):
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, str):
        return f'"{_escape(value)}"' if readably else value
    if isinstance(value, list):
        return "(" + " ".join(pr_str(v, readably) for v in value) + ")"
    if isinstance(value, Closure):
        return "#<function>"
    if isinstance(value, Macro):
        return f"#<macro {value.name}>" if value.name is not None else "#<macro>"
    if callable(value):
        return f"#<function {getattr(value, '__name__', '?')}>"
    return str(value)
