"""Built-in functions for the Quill runtime environment.

This module defines the host primitives the core and the prelude rely on:
arithmetic, comparison, list construction and access, type predicates,
printing, and the reader/file bridges (`compile-string`, `slurp`). Every
primitive uses the (env, args) calling convention.
"""
from __future__ import annotations

import logging
from pathlib import Path

from quill import LispValue
from quill.config import get_load_roots
from quill.errors import QuillTypeError, QuillArityError, QuillIOError, QuillArithmeticError
from quill.types.closure import Closure
from quill.types.environment import Environment
from quill.types.macro import Macro
from quill.types.nil import Nil, NilType
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise QuillArityError(f"{name} expects {n} argument(s), received {len(args)}")


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_sequence(x: LispValue) -> bool:
    return isinstance(x, (list, NilType))


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    if not all(_is_number(x) for x in args):
        raise QuillTypeError(f"All arguments to {name} must be numbers")
    return args


# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a, b) -> bool:
    """Deep equality for Lisp values. nil and () are the same list."""
    if a is b:
        return True
    if _is_sequence(a) and _is_sequence(b):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def equals(env: Environment, args: list[LispValue]) -> bool:
    """True if all arguments are equal (or zero/one arg)."""
    return all(is_equal(args[0], other) for other in args[1:]) if args else True


def _comparison(name: str, op):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__name__ = name
    return compare


less_than = _comparison("<", lambda a, b: a < b)
greater_than = _comparison(">", lambda a, b: a > b)
less_equal = _comparison("<=", lambda a, b: a <= b)
greater_equal = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args))


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise QuillArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise QuillArityError("/ requires at least 1 argument")
    _numbers("/", args)
    try:
        if len(args) == 1:
            return 1 / args[0]
        result = args[0]
        for x in args[1:]:
            result /= x
        return result
    except ZeroDivisionError as e:
        raise QuillArithmeticError("Division by zero") from e


# -------------------------------
# Lists
# -------------------------------
def make_list(env: Environment, args: list[LispValue]) -> list:
    return list(args)


def cons(env: Environment, args: list[LispValue]) -> list:
    """(cons x xs) => a new list with x in front of the elements of xs."""
    _expect_arity("cons", args, 2)
    head, tail = args
    if not _is_sequence(tail):
        raise QuillTypeError(f"cons requires a list as its second argument, got {tail!r}")
    return [head, *tail]


def concat(env: Environment, args: list[LispValue]) -> list:
    """Concatenate any number of lists into a new list."""
    result: list = []
    for seq in args:
        if not _is_sequence(seq):
            raise QuillTypeError(f"concat requires list arguments, got {seq!r}")
        result.extend(seq)
    return result


def count(env: Environment, args: list[LispValue]) -> int:
    _expect_arity("count", args, 1)
    seq = args[0]
    if not isinstance(seq, (list, str, NilType)):
        raise QuillTypeError(f"{seq!r} does not have length")
    return len(seq)


def first(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("first", args, 1)
    seq = args[0]
    if not _is_sequence(seq):
        raise QuillTypeError(f"first requires a list, got {seq!r}")
    return seq[0] if seq else Nil


def rest(env: Environment, args: list[LispValue]) -> list:
    _expect_arity("rest", args, 1)
    seq = args[0]
    if not _is_sequence(seq):
        raise QuillTypeError(f"rest requires a list, got {seq!r}")
    return list(seq)[1:]


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("nth", args, 2)
    seq, index = args
    if not _is_sequence(seq) or not isinstance(index, int) or isinstance(index, bool):
        raise QuillTypeError("nth requires a list and an integer index")
    if not 0 <= index < len(seq):
        raise QuillTypeError(f"nth index {index} out of range for list of length {len(seq)}")
    return seq[index]


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test):
    def predicate(env: Environment, args: list[LispValue]) -> bool:
        _expect_arity(name, args, 1)
        return bool(test(args[0]))
    predicate.__name__ = name
    return predicate


is_nil = _predicate("nil?", lambda x: x is Nil)
is_bool = _predicate("bool?", lambda x: isinstance(x, bool))
is_symbol = _predicate("symbol?", lambda x: isinstance(x, Symbol))
is_number = _predicate("number?", _is_number)
is_string = _predicate("string?", lambda x: isinstance(x, str))
is_list = _predicate("list?", lambda x: isinstance(x, list))
is_function = _predicate(
    "function?", lambda x: isinstance(x, Closure) or (callable(x) and not isinstance(x, Macro))
)
is_macro = _predicate("macro?", lambda x: isinstance(x, Macro))


# -------------------------------
# Printing
# -------------------------------
def print_(env: Environment, args: list[LispValue]) -> LispValue:
    from quill.debug_utils.printer import pr_str
    print("".join(pr_str(a, readably=False) for a in args), end="")
    return Nil


def println(env: Environment, args: list[LispValue]) -> LispValue:
    from quill.debug_utils.printer import pr_str
    print("".join(pr_str(a, readably=False) for a in args))
    return Nil


# -------------------------------
# Reader and file bridges
# -------------------------------
def compile_string_(env: Environment, args: list[LispValue]) -> list:
    """(compile-string src) => (do form1 form2 ...)"""
    from quill.reader.parser import compile_string
    _expect_arity("compile-string", args, 1)
    if not isinstance(args[0], str):
        raise QuillTypeError("compile-string requires a string")
    return compile_string(args[0])


def read_string(env: Environment, args: list[LispValue]) -> LispValue:
    """(read-string src) => the first form in src, or nil."""
    from quill.reader.parser import read_all
    _expect_arity("read-string", args, 1)
    if not isinstance(args[0], str):
        raise QuillTypeError("read-string requires a string")
    forms = read_all(args[0])
    return forms[0] if forms else Nil


def resolve_path(path: str) -> Path:
    """Resolve `path` as given, then against each QUILL_LOAD_PATH root."""
    candidate = Path(path)
    if candidate.is_file() or candidate.is_absolute():
        return candidate
    for root in get_load_roots():
        rooted = root / candidate
        if rooted.is_file():
            return rooted
    return candidate


def slurp(env: Environment, args: list[LispValue]) -> str:
    """(slurp path) => the file's contents as a string."""
    _expect_arity("slurp", args, 1)
    if not isinstance(args[0], str):
        raise QuillTypeError("slurp requires a path string")
    p = resolve_path(args[0])
    logger.debug("slurp %s", p)
    try:
        return p.read_text(encoding="utf-8")
    except OSError as e:
        raise QuillIOError(f"File {args[0]} not found") from e


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": less_than,
    ">": greater_than,
    "<=": less_equal,
    ">=": greater_equal,
    "list": make_list,
    "cons": cons,
    "concat": concat,
    "count": count,
    "first": first,
    "rest": rest,
    "nth": nth,
    "nil?": is_nil,
    "bool?": is_bool,
    "symbol?": is_symbol,
    "number?": is_number,
    "string?": is_string,
    "list?": is_list,
    "function?": is_function,
    "macro?": is_macro,
    "print": print_,
    "println": println,
    "compile-string": compile_string_,
    "read-string": read_string,
    "slurp": slurp,
}


def register(env: Environment) -> None:
    """Register the host primitives in the provided (root) Environment."""
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})
