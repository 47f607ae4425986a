"""
  Quill Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of cons cells:

    - nil -> Nil
    - true / false -> True / False
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - 'x -> (quote x), `x -> (quasiquote x)
    - ~x -> (unquote x), ~@x -> (unquote-splicing x)

Commas are treated as whitespace, so (a, b) reads the same as (a b).
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from quill import SExpression
from quill.errors import QuillSyntaxError
from quill.types.nil import Nil
from quill.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<splice>~@)"  # ~@ (must precede ~)
    r"|(?P<quote>['`~])"  # ' ` ~
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s(),;\'"`~]+)'  # fallback: symbols, numbers, literals
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[-+]?\d+$")
FLOAT_RE = re.compile(r"[-+]?((\d+\.\d*)|(\.\d+)|(\d+))([eE][-+]?\d+)?$")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("unquote-splicing"),
}

UNESCAPES: dict[str, str] = {"n": "\n", "t": "\t", "r": "\r", "\"": "\"", "\\": "\\"}
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:]
            if not rest.replace(",", " ").strip():
                return
            if rest.replace(",", " ").lstrip().startswith('"'):
                raise QuillSyntaxError(f"Unterminated string at {pos}")
            raise QuillSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = next(nm for nm in TOKEN_RE.groupindex if m.group(nm) is not None)
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def _unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: UNESCAPES.get(m.group(1), m.group(1)), body)


def _atom(text: str) -> SExpression:
    if text in LITERALS:
        return LITERALS[text]
    if INT_RE.match(text):
        return int(text)
    if FLOAT_RE.match(text):
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one form. Returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return _atom(tok_val)

        # Quote forms
        if tok_type in ("quote", "splice"):
            self.advance()
            if self.peek()[0] is None:
                raise QuillSyntaxError(f"Expected a form after {tok_val!r}")
            if self.peek()[0] == "rparen":
                raise QuillSyntaxError(f"Unexpected ')' after {tok_val!r}")
            expr = self.parse_expr()
            return [QUOTE_FORMS[tok_val], expr]

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                if self.peek()[0] == "rparen":
                    self.advance()
                    break
                if self.peek()[0] is None:
                    raise QuillSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return items

        if tok_type == "rparen":
            raise QuillSyntaxError("Unexpected ')'")

        if tok_type == "string":
            self.advance()
            return _unescape(tok_val[1:-1])

        raise QuillSyntaxError(f"Unknown token {tok_type}: {tok_val!r}")

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek()[0] is not None:
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Parse every form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def compile_string(source: str) -> list[SExpression]:
    """Parse `source` into a single (do form1 form2 ...) form."""
    return [Symbol("do"), *read_all(source)]
