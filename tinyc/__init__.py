"""
tinyc Compiler Package

Front end of a toy compiler for a small subset of C.

Architecture:
    tinyc/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Token printer

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize, LexerError, UnrecognizedInput

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "LexerError",
    "UnrecognizedInput",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
