"""Core evaluator for the pairlisp interpreter.

Dispatches on the shape of the expression: numbers evaluate to themselves,
symbols are looked up, and pairs are either special forms (operands passed
unevaluated) or procedure applications (head and operands evaluated left to
right, then applied).
"""

from __future__ import annotations

from pairlisp import SExpression, LispValue
from pairlisp.evaluation.apply import apply
from pairlisp.evaluation.special_forms import SPECIAL_FORMS
from pairlisp.printer import to_string
from pairlisp.types.environment import Environment
from pairlisp.types.errors import LispEvaluationError
from pairlisp.types.pair import Pair, iter_list
from pairlisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value.

    Raises a LispRuntimeError subclass on failure. Definitions made before the
    failure stay in effect.
    """
    match expr:
        case bool():
            # Booleans only exist as values bound to true/false, never as source
            pass
        case int() | float():
            return expr
        case Symbol():
            return env.lookup(expr)
        case Pair(car=head, cdr=tail):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](list(iter_list(tail)), env, evaluate)
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in iter_list(tail)]
            return apply(proc, args)

    raise LispEvaluationError(f"eval: bug in the interpreter, cannot evaluate {to_string(expr)}")
