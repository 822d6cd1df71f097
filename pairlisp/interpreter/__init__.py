from __future__ import annotations

import logging

from pairlisp import SExpression, LispValue
from pairlisp.builtin.env_builtin import global_environment
from pairlisp.evaluation.evaluator import evaluate
from pairlisp.printer import to_string
from pairlisp.reader.parser import read
from pairlisp.types.environment import Environment

log = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates pairlisp code one line at a time.
    Maintains a single root Environment across calls, so definitions made on
    one line are visible on the next.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else global_environment()
        log.debug("interpreter started with %d root bindings", len(self.env.vars))

    def read(self, line: str) -> SExpression:
        log.debug("reading %r", line)
        return read(line)

    def evaluate(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval(self, line: str) -> LispValue:
        """Read one expression from `line` and evaluate it in the root environment."""
        return self.evaluate(self.read(line))

    def eval_to_string(self, line: str) -> str:
        return to_string(self.eval(line))
