"""Application engine for pairlisp.

Procedures are closed over a single variant, Primitive, so application is a
direct call with the evaluated argument list; the Primitive itself checks arity.
"""

from pairlisp import LispValue
from pairlisp.printer import to_string
from pairlisp.types.errors import LispTypeMismatch
from pairlisp.types.procedure import Primitive


def apply(head: LispValue, args: list[LispValue]) -> LispValue:
    """Apply `head` to already-evaluated `args`.

    Raises LispTypeMismatch when `head` is not a procedure, and
    LispArityMismatch (from the Primitive) on a wrong argument count.
    """
    if isinstance(head, Primitive):
        return head(args)
    raise LispTypeMismatch(f"Cannot apply non-procedure {to_string(head)}")
