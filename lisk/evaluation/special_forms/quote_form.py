from lisk import EvaluatorFn
from lisk import SExpression
from lisk.types.environment import Environment
from lisk.types.forms import Quote


def quote_form(form: Quote, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    return form.expr
