"""
  Lisp Reader: tokenizer and recursive-descent parser.

- One line of text in, one value out:

    - integers      -> int
    - floats        -> float (decimal literals, inf, nan)
    - ()            -> Nil
    - (a b c)       -> Pair chain ending in Nil
    - anything else -> Symbol, token text verbatim

  There are no strings, comments, dotted-pair syntax or quote shorthand;
  `true`, `false` and `nil` are ordinary symbols resolved by the evaluator.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from pairlisp import SExpression
from pairlisp.types.errors import (
    LispEmptyExpression,
    LispTrailingGarbage,
    LispUnexpectedClose,
    LispUnterminatedList,
)
from pairlisp.types.pair import make_list
from pairlisp.types.symbol import Symbol

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")
IEEE_WORD_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def tokenize(program: str) -> list[str]:
    """Split source text into tokens: parentheses and whitespace-separated words."""
    program = program.replace("(", " ( ").replace(")", " ) ")
    return program.split()


def parse_atom(token: str) -> SExpression:
    """Classify a non-parenthesis token as an int, a float or a Symbol."""
    if INT_RE.fullmatch(token):
        return int(token)
    if IEEE_WORD_RE.fullmatch(token):
        return float(token)
    if FLOAT_RE.fullmatch(token):
        value = float(token)
        # Out-of-range literals such as 1e400 are not numbers
        if not math.isinf(value):
            return value
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise LispEmptyExpression("empty expression")
        if tok == ")":
            raise LispUnexpectedClose("unexpected closing parenthesis")
        if tok == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispUnterminatedList("unexpected end of input: unterminated list")
                if nxt == ")":
                    self.advance()
                    return make_list(items)
                items.append(self.parse_expr())
        return parse_atom(tok)


def read(program: str) -> SExpression:
    """Read exactly one expression from `program`.

    Raises a LispSyntaxError subclass for empty input, a stray ')', an
    unterminated list or tokens left over after the expression.
    """
    stream = TokenStream(tokenize(program))
    expr = stream.parse_expr()
    if not stream.at_end():
        raise LispTrailingGarbage("trailing garbage")
    return expr
