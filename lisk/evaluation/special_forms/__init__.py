"""Registry of special forms for the Lisk evaluator.

Maps the special-form node classes built by the reader to handler functions
that implement their non-standard evaluation rules. `lambda` has no entry:
the reader builds Lambda values directly and they are self-evaluating.
"""

from lisk.types.forms import Begin, Define, If, Quote, Set
from lisk.evaluation.special_forms.begin_form import begin_form
from lisk.evaluation.special_forms.define_form import define_form
from lisk.evaluation.special_forms.if_form import if_form
from lisk.evaluation.special_forms.quote_form import quote_form
from lisk.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    Begin: begin_form,
    If: if_form,
    Define: define_form,
    Set: set_form,
    Quote: quote_form,
}
