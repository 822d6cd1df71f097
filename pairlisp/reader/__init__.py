from pairlisp.reader.parser import tokenize, parse_atom, TokenStream, read

__all__ = ["tokenize", "parse_atom", "TokenStream", "read"]
