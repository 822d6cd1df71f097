"""Runtime environment for pairlisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Lookups walk outward from the innermost
frame; definitions only ever touch the frame they are made in.
"""

from __future__ import annotations

import threading
from io import StringIO
from typing import Iterator, Optional

from pairlisp import LispValue
from pairlisp.types.errors import LispTypeMismatch, LispUnboundVariable
from pairlisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "_lock")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Serialises writers against readers of this frame's own storage
        self._lock = threading.RLock()

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Raises LispTypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispTypeMismatch(f"Cannot define {name!r}: name must be a symbol")
        with self._lock:
            self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `symbol`."""
        for env in self.frames():
            with env._lock:
                if symbol in env.vars:
                    return env
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispUnboundVariable if no frame binds it.
        """
        for env in self.frames():
            with env._lock:
                if name in env.vars:
                    return env.vars[name]
        raise LispUnboundVariable(f"Unknown variable {name}")

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k in mapping:
            if not isinstance(k, Symbol):
                raise LispTypeMismatch(f"Cannot define {k!r}: name must be a symbol")
        with self._lock:
            self.vars.update(mapping)

    def frames(self) -> Iterator[Environment]:
        """Yield this frame followed by each enclosing frame out to the root."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        from pairlisp.printer import to_string
        buffer.write("{")
        with self._lock:
            buffer.write(", ".join(f"{k}: {to_string(v)}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        for env in self.frames():
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
        return "<Environment chain: " + " -> ".join(chain) + ">"
