from lisk import EvaluatorFn
from lisk import LispValue
from lisk.types.environment import Environment
from lisk.types.forms import If
from lisk.types.nil import Nil


def if_form(form: If, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    cond = evaluate_fn(form.predicate, env)
    # Lisk truthiness: only #f is false (nil, 0 and () are all true)
    if cond is not False:
        return evaluate_fn(form.consequent, env)
    elif form.alternate is not None:
        return evaluate_fn(form.alternate, env)
    else:
        return Nil
