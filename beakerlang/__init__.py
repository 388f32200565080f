"""Lexer, parser, type system and value model for the Beaker language."""

__version__ = "0.1.0"