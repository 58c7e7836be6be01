from lisk import EvaluatorFn
from lisk import LispValue
from lisk.errors import LiskArityError
from lisk.types.environment import Environment
from lisk.types.forms import Begin


def begin_form(form: Begin, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if not form.exprs:
        raise LiskArityError("begin requires at least 1 expression")
    result: LispValue = None  # type: ignore[assignment]
    for e in form.exprs:
        result = evaluate_fn(e, env)
    return result
