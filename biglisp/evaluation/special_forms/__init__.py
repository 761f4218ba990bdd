"""Registry of special forms for the BigLisp evaluator.

Maps operator names to handler functions that implement non-standard evaluation
rules (lazy branches, short-circuiting, new scopes, error recovery). The
evaluator consults this table before strict builtins and user functions.
"""

from biglisp.evaluation.special_forms.if_form import if_form
from biglisp.evaluation.special_forms.logic_forms import and_form, or_form
from biglisp.evaluation.special_forms.let_form import let_form
from biglisp.evaluation.special_forms.progn_form import progn_form
from biglisp.evaluation.special_forms.define_form import define_form
from biglisp.evaluation.special_forms.call_form import call_form
from biglisp.evaluation.special_forms.try_form import try_form
from biglisp.evaluation.special_forms.do_loop_forms import do_times_n_loop_form
from biglisp.evaluation.special_forms.with_vars_form import with_vars_form
from biglisp.evaluation.special_forms.print_form import println_form

SPECIAL_FORMS = {
    "if": if_form,
    "and": and_form,
    "or": or_form,
    "let": let_form,
    "do": progn_form,
    "defn": define_form,
    "call": call_form,
    "try": try_form,
    "dotimes": do_times_n_loop_form,
    "with-vars": with_vars_form,
    "println": println_form,
}
