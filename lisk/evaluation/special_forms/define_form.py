from lisk import EvaluatorFn
from lisk import LispValue
from lisk.types.environment import Environment
from lisk.types.forms import Define
from lisk.types.nil import Nil


def define_form(form: Define, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name value)
    Binds in the current scope only; redefining a name there overwrites it.
    """
    value = evaluate_fn(form.value, env)  # normal evaluation
    env.define(form.symbol, value)
    return Nil
