from pairlisp import SExpression, LispValue, EvaluatorFn
from pairlisp.types.environment import Environment
from pairlisp.types.errors import LispMalformedForm


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise LispMalformedForm(f"quote expects exactly 1 operand, got {len(tail)}")
    return tail[0]
