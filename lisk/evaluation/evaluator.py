"""Core evaluator for the Lisk interpreter.

Reduces an expression to a value in an environment: atoms evaluate to
themselves, symbols are looked up, special-form nodes dispatch through
SPECIAL_FORMS and tuples are procedure calls.
"""

from __future__ import annotations

from lisk import SExpression, LispValue
from lisk.errors import LiskEmptyCall, LiskTypeError
from lisk.evaluation.apply import apply
from lisk.evaluation.special_forms import SPECIAL_FORMS
from lisk.types.builtin import Builtin
from lisk.types.environment import Environment
from lisk.types.lambda_fn import Lambda
from lisk.types.nil import NilType
from lisk.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`. Recursion depth follows the nesting of the
    program; there is no tail-call elimination.
    """
    handler = SPECIAL_FORMS.get(type(expr))
    if handler is not None:
        return handler(expr, env, evaluate)

    match expr:
        # --- Atoms and procedures return as-is (bool is matched by int()) ---
        case int() | float() | NilType() | Lambda() | Builtin():
            return expr

        case Symbol():
            return env.lookup(expr)

        case ():
            raise LiskEmptyCall("Cannot evaluate an empty list as a call")

        case (head, *tail_args):
            proc = evaluate(head, env)
            # Arguments are evaluated left to right in the caller's environment
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(proc, args, env, evaluate)

    raise LiskTypeError(f"Cannot evaluate {expr!r}")
