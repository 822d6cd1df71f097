from __future__ import annotations


class NilType:
    """The empty list. There is exactly one instance, `Nil`."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __iter__(self):
        return iter(())

    def __reduce__(self):
        return (NilType, ())


Nil = NilType()
