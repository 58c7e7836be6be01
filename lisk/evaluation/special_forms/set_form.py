from lisk import EvaluatorFn
from lisk import LispValue
from lisk.types.environment import Environment
from lisk.types.forms import Set


def set_form(form: Set, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    value = evaluate_fn(form.value, env)
    env.set(form.symbol, value)

    return value
