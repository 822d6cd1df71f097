"""Canonical textual rendering of pairlisp values.

The output is re-readable: reading `to_string(v)` gives back a value equal to
`v` for anything the reader can produce.
"""

from __future__ import annotations

from io import StringIO

from pairlisp import LispValue
from pairlisp.types.nil import NilType
from pairlisp.types.pair import Pair
from pairlisp.types.procedure import Primitive
from pairlisp.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    """Render `value` as `(a b c)`, `(a b . c)`, `5`, `1.5`, `true`, `()` and so on."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def _write_atom(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, bool):
        buffer.write("true" if value else "false")
    elif isinstance(value, float):
        buffer.write(repr(value))
    elif isinstance(value, (int, Symbol, NilType, Primitive)):
        buffer.write(str(value))
    else:
        buffer.write(f"#<foreign {value!r}>")


def _write(value: LispValue, buffer: StringIO) -> None:
    if not isinstance(value, Pair):
        _write_atom(value, buffer)
        return
    buffer.write("(")
    _write(value.car, buffer)
    rest = value.cdr
    while isinstance(rest, Pair):
        buffer.write(" ")
        _write(rest.car, buffer)
        rest = rest.cdr
    if not isinstance(rest, NilType):
        buffer.write(" . ")
        _write_atom(rest, buffer)
    buffer.write(")")
