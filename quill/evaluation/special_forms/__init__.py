"""Registry of special forms for the Quill evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Every handler has the signature ``handler(tail, env, evaluate_fn)`` where
``tail`` is the list of unevaluated operand forms. The evaluator consults this
table before any macro or function lookup, so these names cannot be shadowed.
"""

from quill.types.symbol import Symbol
from quill.evaluation.special_forms.quote_forms import (
    quote_form,
    quasiquote_form,
    quasiquote_expand_form,
    unquote_form,
    unquote_splice_form,
)
from quill.evaluation.special_forms.if_form import if_form
from quill.evaluation.special_forms.do_form import do_form
from quill.evaluation.special_forms.define_form import define_form
from quill.evaluation.special_forms.fn_form import fn_form
from quill.evaluation.special_forms.defmacro_form import defmacro_form
from quill.evaluation.special_forms.let_form import let_star_form
from quill.evaluation.special_forms.eval_form import eval_form
from quill.evaluation.special_forms.macroexpand_forms import macroexpand1_form, macroexpand_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("quasiquote-expand"): quasiquote_expand_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquote-splicing"): unquote_splice_form,
    Symbol("if"): if_form,
    Symbol("do"): do_form,
    Symbol("def!"): define_form,
    Symbol("fn*"): fn_form,
    Symbol("defmacro!"): defmacro_form,
    Symbol("let*"): let_star_form,
    Symbol("eval"): eval_form,
    Symbol("macroexpand-1"): macroexpand1_form,
    Symbol("macroexpand"): macroexpand_form,
}
