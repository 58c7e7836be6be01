"""Application engine for Lisk.

This module centralizes procedure-call semantics for the interpreter:
- Builtin procedures receive the calling environment and the evaluated arguments.
- Lambdas get one new scope, chained off the caller's environment, binding
  each formal parameter to its argument; the body is evaluated there.
"""

import logging

from lisk import LispValue, EvaluatorFn
from lisk.errors import LiskNotCallable
from lisk.printer import to_source
from lisk.types.builtin import Builtin
from lisk.types.environment import Environment
from lisk.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    Raises LiskArityError when the argument count differs from the number of
    formal parameters. Free variables of the body resolve through the caller's
    environment chain.
    """
    new_env = fn.extend_env(args, caller_env)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda.
    - For Builtin, invoke with the runtime env and list of args.
    - Otherwise, raise LiskNotCallable.
    """
    if isinstance(head, Lambda):
        logger.debug("apply %s to %r", head, args)
        return apply_lambda(head, args, env, evaluate_fn)
    elif isinstance(head, Builtin):
        logger.debug("apply %r to %r", head, args)
        return head(env, args)
    else:
        raise LiskNotCallable(f"Cannot apply non-procedure {to_source(head)}")
