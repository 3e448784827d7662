#!/usr/bin/env python3
"""
tinyc token printer
===================

Lexes a C source file and prints one token per line.

Usage:
    tinyc-lex [options] [file]

Options:
    --json          Output tokens as a JSON array
    --skip-trivia   Leave whitespace and comment tokens out of the output
    -v, --verbose   Enable debug logging

With no file the built-in sample program is lexed. Use '-' to read stdin.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from .lexer import Token, tokenize, significant_tokens, LexerError

logger = logging.getLogger(__name__)

SAMPLE_PROGRAM = r"""int main() {
    // This is a comment
    int arr[10];
    arr[5] = 100;
    int* ptr;
    int x = 10;
    ptr = &x;
    return arr[5] + *ptr;
}"""


def read_source(path: Optional[str]) -> Tuple[str, str]:
    """Return (source, filename) for the requested input."""
    if path is None:
        return SAMPLE_PROGRAM, "<sample>"
    if path == "-":
        # Raw bytes, so \r\n is not translated before lexing
        return sys.stdin.buffer.read().decode("utf-8"), "<stdin>"
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read(), path


def format_token(token: Token) -> str:
    location = token.location
    prefix = f"{location.line}:{location.column}" if location else "?:?"
    return f"{prefix:<8}{token}"


def token_to_dict(token: Token) -> dict:
    location = token.location
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "line": location.line if location else None,
        "column": location.column if location else None,
    }


def write_tokens(tokens: List[Token], out: TextIO, as_json: bool = False):
    if as_json:
        json.dump([token_to_dict(t) for t in tokens], out, indent=2)
        out.write("\n")
        return

    for token in tokens:
        out.write(format_token(token) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the token printer"""

    parser = argparse.ArgumentParser(
        prog="tinyc-lex",
        description="Print the tokens of a tinyc (C subset) source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tinyc-lex                         # Lex the built-in sample program
    tinyc-lex main.c                  # Lex a file
    tinyc-lex --skip-trivia main.c    # Only tokens a parser would see
    cat main.c | tinyc-lex --json -   # JSON from stdin
        """
    )

    parser.add_argument('file', nargs='?', default=None,
                        help="Source file to lex ('-' for stdin)")
    parser.add_argument('--json', action='store_true',
                        help='Output tokens as a JSON array')
    parser.add_argument('--skip-trivia', action='store_true',
                        help='Omit whitespace and comment tokens')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        source, filename = read_source(args.file)
    except OSError as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(source, filename)
    except LexerError as e:
        logger.debug("Lexing %s failed", filename, exc_info=True)
        print(str(e), end="", file=sys.stderr)
        return 1

    if args.skip_trivia:
        tokens = list(significant_tokens(tokens))

    write_tokens(tokens, sys.stdout, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
