"""
Token rule table for the tinyc lexer.

Rules are consulted in declaration order. The scanner keeps the longest
anchored match and falls back to this order only when two rules match the
same length, which is how ``int`` ends up a keyword rather than an identifier.

Author: xwest
"""

import re
from typing import List, NamedTuple, Tuple

from .tokens import (
    TokenType, KEYWORDS, COMPARISON_OPERATORS, LOGICAL_OPERATORS,
    ARITHMETIC_OPERATORS, RELATIONAL_OPERATORS, ASSIGNMENT_OPERATORS,
    DELIMITERS, BRACKETS, WHITESPACE_CHARS,
)


class TokenRule(NamedTuple):
    """A recognition pattern paired with the token kind it produces."""
    name: str
    pattern: re.Pattern
    token_type: TokenType

    def match_length(self, text: str, pos: int = 0) -> int:
        """Length of the match anchored at pos, 0 if none."""
        match = self.pattern.match(text, pos)
        if match is None:
            return 0
        return match.end() - pos


def _alternation(symbols) -> str:
    # Longest first, so the regex engine never settles for a prefix
    ordered = sorted(symbols, key=len, reverse=True)
    return "|".join(re.escape(symbol) for symbol in ordered)


def _char_class(chars) -> str:
    return "[" + "".join(re.escape(c) for c in chars) + "]"


# No leading \b: matching at pos would look back at the previous token
_KEYWORD_PATTERN = r"(?:" + _alternation(sorted(KEYWORDS)) + r")\b"
_IDENTIFIER_PATTERN = r"[a-zA-Z_][a-zA-Z0-9_]*"
_NUMBER_PATTERN = r"[0-9]+"
_STRING_PATTERN = r'"(?:\\.|[^"\\])*"'
_OPERATOR_PATTERN = _alternation(
    COMPARISON_OPERATORS + LOGICAL_OPERATORS + ARITHMETIC_OPERATORS
    + RELATIONAL_OPERATORS + ASSIGNMENT_OPERATORS
)
_WHITESPACE_PATTERN = _char_class(WHITESPACE_CHARS) + "+"
_COMMENT_PATTERN = r"//[^\n]*"


def _rule(name: str, pattern: str, token_type: TokenType, flags: int = 0) -> TokenRule:
    return TokenRule(name, re.compile(pattern, re.ASCII | flags), token_type)


# Order is load-bearing: keyword must precede identifier.
RULES: Tuple[TokenRule, ...] = (
    _rule("keyword", _KEYWORD_PATTERN, TokenType.KEYWORD),
    _rule("identifier", _IDENTIFIER_PATTERN, TokenType.IDENTIFIER),
    _rule("number", _NUMBER_PATTERN, TokenType.NUMBER),
    # A backslash escapes anything, newlines included
    _rule("string", _STRING_PATTERN, TokenType.STRING_LITERAL, re.DOTALL),
    _rule("operator", _OPERATOR_PATTERN, TokenType.OPERATOR),
    # Can be multiplication or pointer dereference
    _rule("star", r"\*", TokenType.OPERATOR),
    # Can be address operator or bitwise AND
    _rule("ampersand", r"&", TokenType.OPERATOR),
    _rule("punctuation", _char_class(DELIMITERS), TokenType.PUNCTUATION),
    # Array brackets
    _rule("bracket", _char_class(BRACKETS), TokenType.PUNCTUATION),
    _rule("whitespace", _WHITESPACE_PATTERN, TokenType.WHITESPACE),
    _rule("comment", _COMMENT_PATTERN, TokenType.COMMENT),
)


def match_rules(text: str, pos: int = 0,
                rules: Tuple[TokenRule, ...] = RULES) -> List[Tuple[TokenRule, int]]:
    """
    Find every rule that matches at pos.

    Args:
        text: Source text, never sliced
        pos: Cursor position matches must start at
        rules: Rule table to consult, in priority order

    Returns:
        (rule, match length) pairs in declaration order. Rules that do not
        match, or match the empty string, are left out.
    """
    candidates = []
    for rule in rules:
        length = rule.match_length(text, pos)
        if length > 0:
            candidates.append((rule, length))
    return candidates


def select_rule(text: str, pos: int = 0, rules: Tuple[TokenRule, ...] = RULES):
    """
    Pick the winning rule at pos.

    The longest match wins. Among equal lengths the earliest declared rule
    wins, because a later candidate only replaces the current best when it is
    strictly longer.

    Returns:
        (rule, length) or None when nothing matches
    """
    best = None
    for rule, length in match_rules(text, pos, rules):
        if best is None or length > best[1]:
            best = (rule, length)
    return best
