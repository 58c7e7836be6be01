from __future__ import annotations

import logging

from lisk import LispValue
from lisk.builtins import register
from lisk.evaluation.evaluator import evaluate
from lisk.printer import to_source
from lisk.reader.parser import parse_program
from lisk.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Lisk programs against one persistent base environment.
    Bindings made by earlier calls stay visible to later ones, including after
    a call that failed.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def eval(self, code: str) -> LispValue:
        """Parse the first expression in `code` and evaluate it."""
        expr = parse_program(code)
        result = evaluate(expr, self.env)
        logger.debug("%s => %r", code.strip(), result)
        return result

    def eval_to_source(self, code: str) -> str:
        return to_source(self.eval(code))
