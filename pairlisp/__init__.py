# Core type aliases for pairlisp's data model.
# Runtime values are plain Python ints, floats and bools plus the small set of
# classes in pairlisp.types (Symbol, Pair, Nil, Primitive). Code and data share
# one representation: the reader produces the same values the evaluator returns.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to special-form handlers
EvaluatorFn = Callable[..., LispValue]

# Public entry points; imported after the aliases above, which the submodules need.
from pairlisp.reader.parser import read  # noqa: E402
from pairlisp.evaluation.evaluator import evaluate  # noqa: E402
from pairlisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "read",
    "evaluate",
    "Interpreter",
]
