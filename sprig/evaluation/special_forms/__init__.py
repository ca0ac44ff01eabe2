"""Registry of special forms for the Sprig evaluator.

Maps Operations to handler functions that receive their argument forms
unevaluated. The evaluator consults this table before falling back to the
built-in table, so together the two cover every reserved word exactly once.
"""

from sprig.types.operation import Operation
from sprig.evaluation.special_forms.begin_form import begin_form, module_form
from sprig.evaluation.special_forms.cond_form import cond_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.let_form import let_form
from sprig.evaluation.special_forms.quote_form import quote_form
from sprig.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    Operation.BEGIN: begin_form,
    Operation.MODULE: module_form,
    Operation.IF: if_form,
    Operation.COND: cond_form,
    Operation.QUOTE: quote_form,
    Operation.DEFINE: define_form,
    Operation.SET: set_form,
    Operation.LAMBDA: lambda_form,
    Operation.LET: let_form,
}
