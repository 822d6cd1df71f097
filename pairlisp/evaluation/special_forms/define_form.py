import logging

from pairlisp import EvaluatorFn
from pairlisp import SExpression, LispValue
from pairlisp.printer import to_string
from pairlisp.types.environment import Environment
from pairlisp.types.errors import LispMalformedForm, LispTypeMismatch
from pairlisp.types.symbol import Symbol

log = logging.getLogger(__name__)

OK = Symbol("ok")


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; enclosing frames are never written.
    """
    if len(tail) != 2:
        raise LispMalformedForm(f"define requires exactly 2 operands, got {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispTypeMismatch(f"define name must be a symbol, got {to_string(name)}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    log.debug("defined %s = %s", name, to_string(value))
    return OK
