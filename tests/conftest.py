import pytest

from pairlisp.builtin.env_builtin import global_environment
from pairlisp.evaluation.evaluator import evaluate
from pairlisp.reader.parser import read


@pytest.fixture
def env():
    """Fresh root environment with the primitive library loaded."""
    return global_environment()


@pytest.fixture
def run(env):
    """Read one line of source and evaluate it in the fixture environment."""
    def _run(source):
        return evaluate(read(source), env)
    return _run
