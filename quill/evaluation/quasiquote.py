"""Quasiquote expansion for Quill.

A quasiquoted template is rewritten into ordinary list-construction code made
of `quote` forms and calls to the `cons`, `concat` and `list` primitives. The
primitives are referenced by name, so the expansion prints as readable code
and resolves them in the environment where it is evaluated.

    `(a ~x ~@ys)  =>  (cons 'a (cons x (concat ys '())))
"""

from __future__ import annotations

from quill import SExpression
from quill.errors import QuillMalformedSpecialForm
from quill.types.symbol import Symbol

QUOTE = Symbol("quote")
QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")
CONS = Symbol("cons")
CONCAT = Symbol("concat")
LIST = Symbol("list")


def _marker_arg(form: list, depth: int) -> SExpression:
    if len(form) != 2:
        raise QuillMalformedSpecialForm(
            f"{form[0]} expects exactly 1 argument (depth {depth})", form
        )
    return form[1]


def _is_marked(form: SExpression, marker: Symbol) -> bool:
    return isinstance(form, list) and bool(form) and form[0] == marker


def _literal_marker(marker: Symbol, inner: SExpression) -> list:
    """Code that rebuilds `(marker <inner-value>)` as data."""
    return [LIST, [QUOTE, marker], inner]


def quasi_expand(template: SExpression, depth: int = 1) -> SExpression:
    """Rewrite `template` into a form that rebuilds it, evaluating unquoted parts.

    `depth` counts enclosing quasiquotes. Only markers at depth 1 are live;
    deeper ones are rebuilt as literal structure with the depth decremented.
    """
    if not isinstance(template, list) or not template:
        return [QUOTE, template]

    if _is_marked(template, UNQUOTE):
        arg = _marker_arg(template, depth)
        if depth == 1:
            return arg
        return _literal_marker(UNQUOTE, quasi_expand(arg, depth - 1))

    if _is_marked(template, QUASIQUOTE):
        arg = _marker_arg(template, depth)
        return _literal_marker(QUASIQUOTE, quasi_expand(arg, depth + 1))

    if _is_marked(template, UNQUOTE_SPLICING):
        arg = _marker_arg(template, depth)
        if depth == 1:
            raise QuillMalformedSpecialForm(
                "unquote-splicing is only valid inside a list", template
            )
        return _literal_marker(UNQUOTE_SPLICING, quasi_expand(arg, depth - 1))

    # Fold the elements right to left onto an empty-list accumulator.
    result: SExpression = [QUOTE, []]
    for element in reversed(template):
        if _is_marked(element, UNQUOTE_SPLICING) and depth == 1:
            result = [CONCAT, _marker_arg(element, depth), result]
        else:
            result = [CONS, quasi_expand(element, depth), result]
    return result
