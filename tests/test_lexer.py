"""
Tests for the tinyc lexer scan loop.

Covers keyword precedence, maximal munch, trivia preservation, source
locations and the fatal unrecognized-input path.

Author: xwest
"""

import unittest
import sys
import os
import tempfile
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tinyc.lexer import (
    Lexer, Token, TokenType, tokenize, tokenize_string, tokenize_file,
    reconstruct, significant_tokens, UnrecognizedInput, LexerError
)
from tinyc.cli import SAMPLE_PROGRAM
from tinyc.lexer import rules


def kw(text):
    return Token(TokenType.KEYWORD, text)


def ident(text):
    return Token(TokenType.IDENTIFIER, text)


def num(text):
    return Token(TokenType.NUMBER, text)


def op(text):
    return Token(TokenType.OPERATOR, text)


def punct(text):
    return Token(TokenType.PUNCTUATION, text)


def ws(text=" "):
    return Token(TokenType.WHITESPACE, text)


def string(text):
    return Token(TokenType.STRING_LITERAL, text)


def comment(text):
    return Token(TokenType.COMMENT, text)


class TestScenarios(unittest.TestCase):
    """Reference scenarios for the token stream."""

    def test_keywords(self):
        tokens = tokenize("int void return")
        self.assertEqual(tokens, [kw("int"), ws(), kw("void"), ws(), kw("return")])

    def test_identifiers(self):
        tokens = tokenize("variable anotherVar _private")
        self.assertEqual(tokens, [
            ident("variable"), ws(), ident("anotherVar"), ws(), ident("_private")
        ])

    def test_array_declaration(self):
        tokens = tokenize("int arr[10];")
        self.assertEqual(tokens, [
            kw("int"), ws(), ident("arr"), punct("["), num("10"), punct("]"), punct(";")
        ])

    def test_string_literals(self):
        tokens = tokenize('"Hello" "World"')
        self.assertEqual(tokens, [string('"Hello"'), ws(), string('"World"')])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])


class TestDisambiguation(unittest.TestCase):
    """Longest match wins, earlier rule wins ties."""

    def test_keyword_beats_identifier_on_tie(self):
        self.assertEqual(tokenize("int"), [kw("int")])

    def test_all_keywords(self):
        for word in ("int", "return", "if", "while", "for", "void"):
            with self.subTest(word=word):
                self.assertEqual(tokenize(word), [kw(word)])

    def test_longer_identifier_beats_keyword_prefix(self):
        self.assertEqual(tokenize("integer"), [ident("integer")])
        self.assertEqual(tokenize("int_x"), [ident("int_x")])
        self.assertEqual(tokenize("while1"), [ident("while1")])
        self.assertEqual(tokenize("_if"), [ident("_if")])

    def test_keywords_are_case_sensitive(self):
        self.assertEqual(tokenize("Int"), [ident("Int")])

    def test_double_equals_is_one_operator(self):
        self.assertEqual(tokenize("=="), [op("==")])

    def test_multi_char_operators(self):
        for symbol in ("!=", ">=", "<=", "&&", "||"):
            with self.subTest(symbol=symbol):
                self.assertEqual(tokenize(symbol), [op(symbol)])

    def test_operator_runs_split_greedily(self):
        self.assertEqual(tokenize("==="), [op("=="), op("=")])
        self.assertEqual(tokenize("&&&"), [op("&&"), op("&")])
        self.assertEqual(tokenize("**"), [op("*"), op("*")])

    def test_star_and_ampersand_are_plain_operators(self):
        self.assertEqual(tokenize("int* ptr"), [kw("int"), op("*"), ws(), ident("ptr")])
        self.assertEqual(tokenize("ptr = &x;"), [
            ident("ptr"), ws(), op("="), ws(), op("&"), ident("x"), punct(";")
        ])
        self.assertEqual(tokenize("a*b"), [ident("a"), op("*"), ident("b")])

    def test_number_then_identifier(self):
        self.assertEqual(tokenize("123abc"), [num("123"), ident("abc")])

    def test_minus_is_not_part_of_number(self):
        self.assertEqual(tokenize("x-1"), [ident("x"), op("-"), num("1")])

    def test_punctuation(self):
        tokens = tokenize("(){};,[]")
        self.assertEqual([t.type for t in tokens], [TokenType.PUNCTUATION] * 8)
        self.assertEqual(reconstruct(tokens), "(){};,[]")


class TestStringsAndComments(unittest.TestCase):

    def test_escaped_quote_stays_inside_string(self):
        source = r'"say \"hi\""'
        self.assertEqual(tokenize(source), [string(source)])

    def test_escaped_backslash_before_closing_quote(self):
        source = r'"dir\\"'
        self.assertEqual(tokenize(source), [string(source)])

    def test_comment_marker_inside_string(self):
        self.assertEqual(tokenize('"a // b"'), [string('"a // b"')])

    def test_comment_runs_to_end_of_line(self):
        tokens = tokenize("x // note\ny")
        self.assertEqual(tokens, [
            ident("x"), ws(), comment("// note"), ws("\n"), ident("y")
        ])

    def test_comment_swallows_code_on_same_line(self):
        self.assertEqual(tokenize('// int x = "'), [comment('// int x = "')])

    def test_comment_at_end_of_input(self):
        self.assertEqual(tokenize("return;//done"), [
            kw("return"), punct(";"), comment("//done")
        ])


class TestWhitespace(unittest.TestCase):

    def test_whitespace_is_preserved(self):
        self.assertEqual(tokenize("int x"), [kw("int"), ws(), ident("x")])

    def test_whitespace_runs_are_one_token(self):
        self.assertEqual(tokenize("a \t\r\n b"), [ident("a"), ws(" \t\r\n "), ident("b")])

    def test_significant_tokens_drops_trivia(self):
        tokens = tokenize("int x; // counter\n")
        self.assertEqual(list(significant_tokens(tokens)), [
            kw("int"), ident("x"), punct(";")
        ])


class TestLosslessness(unittest.TestCase):

    def test_sample_program_round_trips(self):
        tokens = tokenize(SAMPLE_PROGRAM)
        self.assertEqual(reconstruct(tokens), SAMPLE_PROGRAM)

    def test_sample_program_has_no_empty_tokens(self):
        for token in tokenize(SAMPLE_PROGRAM):
            self.assertTrue(token.lexeme)

    def test_deterministic(self):
        self.assertEqual(tokenize(SAMPLE_PROGRAM), tokenize(SAMPLE_PROGRAM))

    def test_lexer_instance_can_be_reused(self):
        lexer = Lexer("int x;")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)
        self.assertIsNot(first, second)


class TestLocations(unittest.TestCase):

    def test_line_and_column_tracking(self):
        tokens = tokenize("int x;\n  return", filename="demo.c")
        ret = tokens[-1]
        self.assertEqual(ret, kw("return"))
        self.assertEqual(ret.location.filename, "demo.c")
        self.assertEqual(ret.location.line, 2)
        self.assertEqual(ret.location.column, 3)
        self.assertEqual(ret.location.offset, 9)

        newline = tokens[-2]
        self.assertEqual(newline, ws("\n  "))
        self.assertEqual((newline.location.line, newline.location.column), (1, 7))

    def test_offsets_match_lexeme_positions(self):
        source = "while (i < 10) {\n    i = i + 1;\n}"
        for token in tokenize(source):
            start = token.location.offset
            self.assertEqual(source[start:start + len(token.lexeme)], token.lexeme)

    def test_location_does_not_affect_equality(self):
        a = tokenize("x", filename="a.c")[0]
        b = tokenize("x", filename="b.c")[0]
        self.assertEqual(a, b)
        self.assertNotEqual(a.location, b.location)


class TestUnrecognizedInput(unittest.TestCase):

    def test_unknown_character_fails(self):
        with self.assertRaises(UnrecognizedInput):
            tokenize("@")

    def test_is_a_lexer_error(self):
        with self.assertRaises(LexerError):
            tokenize("#include <stdio.h>")

    def test_failure_discards_partial_output(self):
        with self.assertRaises(UnrecognizedInput) as ctx:
            tokenize("int x = @;")
        error = ctx.exception
        self.assertEqual(error.code, "L001")
        self.assertEqual(error.remaining, "@;")
        self.assertEqual(error.location.column, 9)
        self.assertEqual(error.location.offset, 8)
        self.assertEqual(error.tokens, [
            kw("int"), ws(), ident("x"), ws(), op("="), ws()
        ])

    def test_lone_symbols_outside_operator_set(self):
        for source in ("!", "|", "/", "%", "."):
            with self.subTest(source=source):
                with self.assertRaises(UnrecognizedInput):
                    tokenize(source)

    def test_non_ascii_identifier_fails(self):
        with self.assertRaises(UnrecognizedInput):
            tokenize("café")

    def test_unterminated_string_fails_at_opening_quote(self):
        with self.assertRaises(UnrecognizedInput) as ctx:
            tokenize('x = "abc')
        error = ctx.exception
        self.assertEqual(error.code, "L002")
        self.assertEqual(error.location.offset, 4)
        self.assertEqual(error.remaining, '"abc')

    def test_escaped_closing_quote_leaves_string_open(self):
        with self.assertRaises(UnrecognizedInput) as ctx:
            tokenize(r'"abc\"')
        self.assertEqual(ctx.exception.code, "L002")


class TestScanCost(unittest.TestCase):
    """Rules run against the whole source at the cursor, never a copy."""

    def test_rules_see_unsliced_source(self):
        source = "int x = 10;\nreturn x;"
        with mock.patch("tinyc.lexer.lexer.select_rule", wraps=rules.select_rule) as select:
            tokens = tokenize(source)

        self.assertEqual(select.call_count, len(tokens))
        positions = []
        for call in select.call_args_list:
            text, pos = call.args[0], call.args[1]
            self.assertIs(text, source)
            positions.append(pos)
        self.assertEqual(positions, [t.location.offset for t in tokens])

    def test_keyword_right_after_number(self):
        self.assertEqual(tokenize("9int"), [num("9"), kw("int")])

    def test_large_input(self):
        source = "a " * 10000
        tokens = tokenize(source)
        self.assertEqual(len(tokens), 20000)
        self.assertEqual(reconstruct(tokens), source)


class TestLogging(unittest.TestCase):

    def test_debug_messages_for_scan(self):
        with self.assertLogs("tinyc.lexer.lexer", "DEBUG") as logs:
            tokenize("int x;", filename="demo.c")
        self.assertEqual(logs.output, [
            "DEBUG:tinyc.lexer.lexer:Tokenizing demo.c (6 chars)",
            "DEBUG:tinyc.lexer.lexer:Produced 4 tokens for demo.c",
        ])

    def test_debug_message_on_failure(self):
        with self.assertLogs("tinyc.lexer.lexer", "DEBUG") as logs:
            with self.assertRaises(UnrecognizedInput):
                tokenize("x @", filename="demo.c")
        self.assertIn(
            "DEBUG:tinyc.lexer.lexer:No rule matches at demo.c:1:3 after 2 tokens",
            logs.output,
        )


class TestConvenienceFunctions(unittest.TestCase):

    def test_tokenize_string_matches_tokenize(self):
        self.assertEqual(tokenize_string("int x;"), tokenize("int x;"))

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "main.c")
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write("int main() {\r\n    return 0;\r\n}\r\n")

            tokens = tokenize_file(path)

        self.assertEqual(tokens[0].location.filename, path)
        self.assertEqual(reconstruct(tokens), "int main() {\r\n    return 0;\r\n}\r\n")

    def test_tokenize_missing_file(self):
        with self.assertRaises(OSError):
            tokenize_file(os.path.join(project_root, "does-not-exist.c"))


if __name__ == '__main__':
    unittest.main()
