"""Registry of special forms for the pairlisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so a
special form's operands reach its handler unevaluated.

Every handler has the signature handler(operands, env, evaluate_fn), where
operands is the Python list of the form's elements after the head.
"""

from pairlisp.types.symbol import Symbol
from pairlisp.evaluation.special_forms.define_form import define_form
from pairlisp.evaluation.special_forms.if_form import if_form
from pairlisp.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("quote"): quote_form,
}
