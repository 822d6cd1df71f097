from pairlisp.types.symbol import Symbol
from pairlisp.types.nil import Nil, NilType
from pairlisp.types.pair import Pair, make_list, iter_list, append_element, values_equal
from pairlisp.types.procedure import Primitive
from pairlisp.types.environment import Environment

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Pair",
    "make_list",
    "iter_list",
    "append_element",
    "values_equal",
    "Primitive",
    "Environment",
]
