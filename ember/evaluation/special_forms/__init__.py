"""Registry of special forms for the Ember evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Every handler takes (tail, env, evaluate_fn), where
tail is the Python list of unevaluated operand forms.
"""

from ember.types.symbol import Symbol
from ember.evaluation.special_forms.quote_form import quote_form
from ember.evaluation.special_forms.let_form import let_form
from ember.evaluation.special_forms.fn_form import fn_form
from ember.evaluation.special_forms.letfn_form import letfn_form
from ember.evaluation.special_forms.if_form import if_form
from ember.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("letfn"): letfn_form,
    Symbol("if"): if_form,
    Symbol("eval"): eval_form,
}
