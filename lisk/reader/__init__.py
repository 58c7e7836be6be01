from lisk.reader.parser import tokenize, parse_atom, parse_program, TokenStream

__all__ = ["tokenize", "parse_atom", "parse_program", "TokenStream"]
