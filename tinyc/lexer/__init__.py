"""
tinyc Lexer Package

Implements the lexical analyzer for the tinyc subset of C.

Key Features:
- Ordered rule table with maximal munch and priority tie-break
- Lossless output: whitespace and comments are tokens too
- Source location tracking for diagnostics
- Fatal, well-described errors for unrecognized input

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, PUNCTUATION
from .rules import TokenRule, RULES, match_rules, select_rule
from .lexer import (
    Lexer, tokenize, tokenize_string, tokenize_file, reconstruct, significant_tokens
)
from .errors import LexerError, UnrecognizedInput, Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "TokenRule",
    "RULES",
    "KEYWORDS",
    "OPERATORS",
    "PUNCTUATION",
    "match_rules",
    "select_rule",
    "tokenize",
    "tokenize_string",
    "tokenize_file",
    "reconstruct",
    "significant_tokens",
    "LexerError",
    "UnrecognizedInput",
    "Diagnostic",
]
