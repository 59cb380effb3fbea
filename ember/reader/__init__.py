from ember.reader.parser import lex, read_all, read_forms, TokenStream

__all__ = ["lex", "read_all", "read_forms", "TokenStream"]
