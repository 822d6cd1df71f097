"""Immutable pairs and the list helpers built on them.

A proper list is either `Nil` or a `Pair` whose `cdr` is a proper list. The
helpers here walk pair chains iteratively, so long lists never touch the
Python recursion limit.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from pairlisp import LispValue
from pairlisp.types.errors import LispMalformedForm, LispTypeMismatch
from pairlisp.types.nil import Nil
from pairlisp.types.procedure import Primitive


class Pair:
    """An ordered two-slot cell. Neither slot can be reassigned."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError(f"Pair is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Pair is immutable, cannot delete {name}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return values_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __str__(self) -> str:
        from pairlisp.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list of `items` ending in `tail` (a proper list when tail is Nil)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list.

    Raises LispMalformedForm when the chain ends in anything but Nil, including
    when `value` is not a list at all.
    """
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr
    if value is not Nil:
        from pairlisp.printer import to_string
        raise LispMalformedForm(f"Expected a proper list, found tail {to_string(value)}")


def append_element(a: LispValue, b: LispValue) -> LispValue:
    """Return a new list holding the elements of `a` followed by `b`.

    (append (list 1 2) 3) => (1 2 3)
    (append nil 3)        => (3)
    (append (list 1) (list 2 3)) => (1 (2 3))

    Unlike the conventional two-list append, `b` is always added as a single
    element. `a` must be a proper list.
    """
    items = []
    cur = a
    while isinstance(cur, Pair):
        items.append(cur.car)
        cur = cur.cdr
    if cur is not Nil:
        from pairlisp.printer import to_string
        raise LispTypeMismatch(f"append expects a list as its first argument, got {to_string(a)}")
    return make_list(items, Pair(b, Nil))


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality over the value tree.

    Values of different variants are never equal, so 1, 1.0 and true are all
    distinct. Primitives are equal only to themselves, and nan is never equal
    to anything.
    """
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if type(x) is not type(y):
            return False
        if isinstance(x, Pair):
            stack.append((x.cdr, y.cdr))
            stack.append((x.car, y.car))
            continue
        if isinstance(x, Primitive):
            if x is not y:
                return False
            continue
        if x != y:
            return False
    return True
