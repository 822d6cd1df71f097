"""Built-in procedures for the pairlisp runtime environment.

This module defines the primitive library (arithmetic, comparison, pair and
list operations) and the registration helpers that bind it into a root
Environment.

Numeric primitives never coerce: both operands must be integers or both must
be floats. Booleans are not numbers.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from pairlisp import LispValue
from pairlisp import config
from pairlisp.printer import to_string
from pairlisp.types.environment import Environment
from pairlisp.types.errors import LispDivisionByZero, LispTypeMismatch
from pairlisp.types.nil import Nil, NilType
from pairlisp.types.pair import Pair, append_element, make_list, values_equal
from pairlisp.types.procedure import Primitive
from pairlisp.types.symbol import Symbol

log = logging.getLogger(__name__)


def type_name(value: LispValue) -> str:
    """Name of a value's variant, for error messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, Pair):
        return "pair"
    if isinstance(value, NilType):
        return "empty list"
    if isinstance(value, Primitive):
        return "procedure"
    return type(value).__name__


def _numeric_kind(name: str, a: LispValue, b: LispValue) -> type:
    """Return int or float when both operands share that kind, else raise."""
    if type(a) is int and type(b) is int:
        return int
    if type(a) is float and type(b) is float:
        return float
    raise LispTypeMismatch(f"{name}: mismatched value types {type_name(a)} and {type_name(b)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: LispValue, b: LispValue) -> LispValue:
    _numeric_kind("+", a, b)
    return a + b


def sub(a: LispValue, b: LispValue) -> LispValue:
    _numeric_kind("-", a, b)
    return a - b


def mul(a: LispValue, b: LispValue) -> LispValue:
    _numeric_kind("*", a, b)
    return a * b


def div(a: LispValue, b: LispValue) -> LispValue:
    """Integer quotient truncated toward zero, or IEEE float division.

    An integer zero divisor raises LispDivisionByZero; a float zero divisor
    gives inf, -inf or nan.
    """
    if _numeric_kind("/", a, b) is int:
        if b == 0:
            raise LispDivisionByZero("/: integer division by zero")
        q = abs(a) // abs(b)
        return q if (a >= 0) == (b > 0) else -q
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def absolute(a: LispValue) -> LispValue:
    if type(a) is int or type(a) is float:
        return -a if a < 0 else a
    raise LispTypeMismatch(f"abs: non-numeric value type {type_name(a)}")


# -------------------------------
# Comparison
# -------------------------------
def lt(a: LispValue, b: LispValue) -> bool:
    _numeric_kind("<", a, b)
    return a < b


def gt(a: LispValue, b: LispValue) -> bool:
    _numeric_kind(">", a, b)
    return a > b


def equals(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality; see values_equal."""
    return values_equal(a, b)


# -------------------------------
# Pairs and lists
# -------------------------------
def car(p: LispValue) -> LispValue:
    if not isinstance(p, Pair):
        raise LispTypeMismatch(f"car: expected a pair, got {to_string(p)}")
    return p.car


def cdr(p: LispValue) -> LispValue:
    if not isinstance(p, Pair):
        raise LispTypeMismatch(f"cdr: expected a pair, got {to_string(p)}")
    return p.cdr


def cadr(p: LispValue) -> LispValue:
    return car(cdr(p))


def caddr(p: LispValue) -> LispValue:
    return cadr(cdr(p))


def cadddr(p: LispValue) -> LispValue:
    return caddr(cdr(p))


def cons(a: LispValue, d: LispValue) -> Pair:
    return Pair(a, d)


def list_builtin(*items: LispValue) -> LispValue:
    return make_list(items)


def append(a: LispValue, b: LispValue) -> LispValue:
    """(append (list 1 2) 3) => (1 2 3); `b` is added as one element."""
    return append_element(a, b)


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: list[tuple[str, Callable[..., LispValue], Optional[int]]] = [
    ("+", add, 2),
    ("-", sub, 2),
    ("*", mul, 2),
    ("/", div, 2),
    ("abs", absolute, 1),
    ("<", lt, 2),
    (">", gt, 2),
    ("=", equals, 2),
    ("car", car, 1),
    ("cdr", cdr, 1),
    ("cadr", cadr, 1),
    ("caddr", caddr, 1),
    ("cadddr", cadddr, 1),
    ("cons", cons, 2),
    ("list", list_builtin, None),
    ("append", append, 2),
]


def register(env: Environment, bind_nil: bool = True) -> None:
    """Bind the primitive library and the constants true, false (and nil) into `env`."""
    env.update({Symbol(name): Primitive(name, fn, arity) for name, fn, arity in PRIMITIVES})
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)
    if bind_nil:
        env.define(Symbol("nil"), Nil)
    log.debug("registered %d primitives", len(PRIMITIVES))


def global_environment() -> Environment:
    """Create a fresh root environment populated with the primitive library."""
    env = Environment()
    register(env, bind_nil=config.get_bind_nil())
    return env
