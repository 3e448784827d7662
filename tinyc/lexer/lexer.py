"""
tinyc Lexer - turns C source text into tokens

Each step tries every rule in rules.RULES at the cursor, keeps the longest
anchored match and breaks ties by declaration order. Rules match against the
whole source at a position, never a sliced copy, so a scan stays linear.
Whitespace and comments come out as tokens too, so joining the lexemes gives
back the exact input.

xwest
"""

import logging
from typing import Iterable, Iterator, List

from .tokens import Token, SourceLocation
from .rules import RULES, select_rule
from .errors import (
    create_invalid_character_error, create_unterminated_string_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    tinyc lexical analyzer.

    Converts source code text into a list of tokens using maximal munch
    with a priority tie-break. Any input that no rule recognizes aborts the
    whole tokenization with UnrecognizedInput.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, in source order. Empty input gives an empty list.

        Raises:
            UnrecognizedInput: If no rule matches at some position
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        logger.debug("Tokenizing %s (%d chars)", self.filename, len(self.source))

        while self.pos < len(self.source):
            self.tokens.append(self._next_token())

        logger.debug("Produced %d tokens for %s", len(self.tokens), self.filename)
        return self.tokens

    def _next_token(self) -> Token:
        """Scan one token at the cursor and advance past it."""
        location = self._location()

        best = select_rule(self.source, self.pos, RULES)
        if best is None:
            raise self._unrecognized(self.source[self.pos:], location)

        rule, length = best
        lexeme = self.source[self.pos:self.pos + length]
        self._advance_by(lexeme)

        return Token(rule.token_type, lexeme, location)

    def _unrecognized(self, remaining: str, location: SourceLocation):
        """Build the error for input that matches no rule."""
        logger.debug(
            "No rule matches at %s after %d tokens", location, len(self.tokens)
        )
        if remaining.startswith('"'):
            return create_unterminated_string_error(remaining, location, self.tokens)
        return create_invalid_character_error(remaining, location, self.tokens)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance_by(self, text: str):
        """Advance past text, updating line/column."""
        newlines = text.count('\n')
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind('\n')
        else:
            self.column += len(text)
        self.pos += len(text)


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        UnrecognizedInput: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """Same as tokenize(), kept for callers of the older name."""
    return tokenize(source, filename)


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        UnrecognizedInput: If lexing fails
        OSError: If file cannot be read
    """
    # newline='' keeps \r\n intact so the token stream stays lossless
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize(source, filepath)


def reconstruct(tokens: Iterable[Token]) -> str:
    """Join token lexemes back into source text."""
    return "".join(token.lexeme for token in tokens)


def significant_tokens(tokens: Iterable[Token]) -> Iterator[Token]:
    """Yield the tokens a parser cares about, dropping whitespace and comments."""
    for token in tokens:
        if not token.is_trivia:
            yield token
