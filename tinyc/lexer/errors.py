"""
Error handling for the tinyc lexer.

The scanner has a single failure mode: the remaining input matches no rule.
That aborts the whole tokenization. The exception still carries the location,
the unmatched text and the tokens scanned so far so the caller can report
something useful.

Author: xwest
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .tokens import SourceLocation, Token, OPERATORS


@dataclass
class Diagnostic:
    """
    A message pinned to a source position, printed as

        ERROR: Unexpected sequence: '@'
          --> main.c:3:7
          help: ...

    The scanner only ever produces errors, but the severity is kept so the
    parser stage can report warnings in the same shape.
    """
    message: str
    location: SourceLocation
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def render_lines(self) -> List[str]:
        lines = [f"{self.severity.upper()}: {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return lines

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.render_lines())


class LexerError(Exception):
    """
    Fatal lexer failure. str() gives the rendered diagnostic, args[0] the
    bare message.
    """

    def __init__(self, message: str, location: SourceLocation, code: Optional[str] = None,
                 help_text: Optional[str] = None, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(message, location, "error", code, help_text, suggestions)

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedInput(LexerError):
    """
    Raised when no token rule matches at the cursor.

    Attributes:
        remaining: The unconsumed input starting at the failure point
        tokens: Tokens produced before the failure (diagnostics only, the
            tokenization itself is aborted)
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        remaining: str,
        tokens: Sequence[Token] = (),
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message, location, code, help_text, suggestions)
        self.remaining = remaining
        self.tokens = list(tokens)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
}


def suggest_operator_corrections(char: str) -> List[str]:
    """Suggest operators that start with a character the lexer rejected."""
    return sorted(op for op in OPERATORS if len(op) > 1 and op.startswith(char))


def _excerpt(remaining: str, limit: int = 20) -> str:
    line = remaining.split("\n", 1)[0]
    if len(line) > limit:
        return line[:limit] + "..."
    return line


def create_invalid_character_error(
    remaining: str,
    location: SourceLocation,
    tokens: Sequence[Token] = ()
) -> UnrecognizedInput:
    """Create an error for input that no rule recognizes."""
    char = remaining[0]
    suggestions = suggest_operator_corrections(char)

    if suggestions:
        help_text = f"'{char}' is only valid as part of: {', '.join(suggestions)}"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in tinyc source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnrecognizedInput(
        message=f"Unexpected sequence: {_excerpt(remaining)!r}",
        location=location,
        remaining=remaining,
        tokens=tokens,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_error(
    remaining: str,
    location: SourceLocation,
    tokens: Sequence[Token] = ()
) -> UnrecognizedInput:
    """Create an error for a string literal with no closing quote."""
    return UnrecognizedInput(
        message="Unterminated string literal",
        location=location,
        remaining=remaining,
        tokens=tokens,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote', "Check for a stray backslash before the closing quote"]
    )
