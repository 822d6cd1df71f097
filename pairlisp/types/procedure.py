from __future__ import annotations

from typing import Callable, Optional

from pairlisp import LispValue
from pairlisp.types.errors import LispArityMismatch


class Primitive:
    """A built-in procedure: a Python function over already-evaluated arguments.

    `arity` is the exact number of arguments accepted, or None for a variadic
    procedure. The function receives the arguments positionally.
    """

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: Callable[..., LispValue], arity: Optional[int]):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, args: list[LispValue]) -> LispValue:
        if self.arity is not None and len(args) != self.arity:
            plural = "" if self.arity == 1 else "s"
            raise LispArityMismatch(
                f"{self.name} expects {self.arity} argument{plural}, got {len(args)}"
            )
        return self.fn(*args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    def __repr__(self) -> str:
        return f"Primitive({self.name!r}, arity={self.arity!r})"
