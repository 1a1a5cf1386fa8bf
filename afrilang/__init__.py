"""Afrilang: a lexer, a line-by-line interpreter and a command line for a toy language."""

__version__ = "0.1.0"
__all__ = ["__version__"]