import pytest

from lisk.builtins import register
from lisk.evaluation.evaluator import evaluate
from lisk.reader.parser import parse_program
from lisk.types.environment import Environment


@pytest.fixture
def env():
    """Fresh base environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Parse and evaluate one program in the shared `env` fixture."""
    def _run(source):
        return evaluate(parse_program(source), env)
    return _run
