"""Symbols: identifiers read from source text.

A Symbol wraps the exact token text. Two symbols are the same when their text
is the same; a Symbol never equals a plain Python string, so reader output and
host strings cannot be confused.
"""

from __future__ import annotations
import sys


class Symbol:
    """Interned identifier text, compared by exact text equality."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        # Printed form is the token text, so printing then reading is lossless
        return self.id
