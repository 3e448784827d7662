"""
Token definitions for the tinyc lexer.

This module defines the token kinds of the C subset handled by tinyc:
- Keywords (a fixed reserved-word set)
- Identifiers
- Literals (decimal numbers, double-quoted strings)
- Operators and punctuation
- Whitespace and comments (kept as tokens so the stream is lossless)

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token kinds produced by the tinyc lexer.
    """

    KEYWORD = auto()                # int, return, if, while, for, void
    IDENTIFIER = auto()             # main, arr, _private
    NUMBER = auto()                 # 42
    STRING_LITERAL = auto()         # "hello \"world\""
    OPERATOR = auto()               # + - == != > < >= <= && || = * &
    PUNCTUATION = auto()            # ( ) { } ; , [ ]
    WHITESPACE = auto()             # spaces, tabs, newlines
    COMMENT = auto()                # // to end of line

    @property
    def display_name(self) -> str:
        """Name used when printing tokens, e.g. ``StringLiteral``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for the token printer.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents one lexical token.

    The lexeme is the exact text matched in the source, never a normalized
    form. Location is informational and does not take part in equality, so
    ``Token(TokenType.KEYWORD, "int")`` compares equal to any scanned ``int``.
    """
    type: TokenType
    lexeme: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.type.display_name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"

    @property
    def is_keyword(self) -> bool:
        return self.type == TokenType.KEYWORD

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.NUMBER, TokenType.STRING_LITERAL}

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_trivia(self) -> bool:
        """Whitespace and comments carry no meaning for the parser."""
        return self.type in {TokenType.WHITESPACE, TokenType.COMMENT}


# Lookup tables describing the fixed lexical sets of the language.
# The rule table in rules.py builds its patterns from these.

KEYWORDS = frozenset({
    "int",
    "return",
    "if",
    "while",
    "for",
    "void",
})

# Multi-character operators come first, the rule table relies on this order
# so that ">=" is never split into ">" and "=".
COMPARISON_OPERATORS = ("==", "!=", ">=", "<=")
LOGICAL_OPERATORS = ("&&", "||")
ARITHMETIC_OPERATORS = ("+", "-")
RELATIONAL_OPERATORS = (">", "<")
ASSIGNMENT_OPERATORS = ("=",)

# * can be multiplication or pointer dereference, & can be bitwise AND or
# address-of. The parser decides which.
AMBIGUOUS_OPERATORS = ("*", "&")

OPERATORS = frozenset(
    COMPARISON_OPERATORS
    + LOGICAL_OPERATORS
    + ARITHMETIC_OPERATORS
    + RELATIONAL_OPERATORS
    + ASSIGNMENT_OPERATORS
    + AMBIGUOUS_OPERATORS
)

DELIMITERS = ("(", ")", "{", "}", ";", ",")
BRACKETS = ("[", "]")

PUNCTUATION = frozenset(DELIMITERS + BRACKETS)

WHITESPACE_CHARS = " \t\n\r"
