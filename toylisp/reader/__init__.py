from toylisp.reader.parser import lex, TokenStream, read, read_one

__all__ = ["lex", "TokenStream", "read", "read_one"]
