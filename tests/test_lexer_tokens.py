from __future__ import annotations

import unittest

from relaxed_json.errors import ParseError
from relaxed_json.lexer import iter_tokens, tokenize


class LexerTokenTests(unittest.TestCase):
    def _tokens(self, source: str, *, with_spans: bool = False):
        if with_spans:
            return [(tok.kind, tok.text, tok.pos, tok.end) for tok in tokenize(source) if tok.kind != "EOF"]
        return [(tok.kind, tok.text) for tok in tokenize(source) if tok.kind != "EOF"]

    def test_token_golden_delimiters_and_spans(self) -> None:
        self.assertEqual(
            self._tokens("{}[]:,", with_spans=True),
            [
                ("LBRACE", "{", 0, 1),
                ("RBRACE", "}", 1, 2),
                ("LBRACK", "[", 2, 3),
                ("RBRACK", "]", 3, 4),
                ("COLON", ":", 4, 5),
                ("COMMA", ",", 5, 6),
            ],
        )

    def test_token_stream_ends_with_single_eof(self) -> None:
        tokens = tokenize("  [1] ")
        self.assertEqual(tokens[-1].kind, "EOF")
        self.assertEqual((tokens[-1].pos, tokens[-1].end), (6, 6))
        self.assertEqual([tok.kind for tok in tokenize("")], ["EOF"])

    def test_comments_and_whitespace_are_skipped(self) -> None:
        tokens = self._tokens("/* c */ { // x\n a : 'b' }", with_spans=True)
        self.assertEqual(
            tokens,
            [
                ("LBRACE", "{", 8, 9),
                ("IDENT", "a", 16, 17),
                ("COLON", ":", 18, 19),
                ("STRING", "b", 20, 23),
                ("RBRACE", "}", 24, 25),
            ],
        )

    def test_block_comments_do_not_nest(self) -> None:
        self.assertEqual(self._tokens("/* /* inner */ 1"), [("NUMBER", "1")])
        with self.assertRaises(ParseError):
            tokenize("/* /* inner */ */ 1")

    def test_numeric_literal_forms_are_single_number_tokens(self) -> None:
        forms = (
            "0",
            "-0",
            "42",
            "0x0",
            "0xabcdef",
            "-0xABCDEF",
            "+0X1f",
            "4.",
            "+4.",
            "-4.",
            ".5",
            "-.5",
            "12.50",
            "1e5",
            "1E-3",
            "2.5e+10",
            "Infinity",
            "+Infinity",
            "-Infinity",
            "NaN",
            "-NaN",
        )
        for form in forms:
            with self.subTest(form=form):
                self.assertEqual(self._tokens(form), [("NUMBER", form)])

    def test_barewords_and_identifiers(self) -> None:
        self.assertEqual(
            self._tokens("true false null foo $bar _x1 trueish"),
            [
                ("BAREWORD", "true"),
                ("BAREWORD", "false"),
                ("BAREWORD", "null"),
                ("IDENT", "foo"),
                ("IDENT", "$bar"),
                ("IDENT", "_x1"),
                ("IDENT", "trueish"),
            ],
        )

    def test_string_simple_escapes(self) -> None:
        (kind, text), = self._tokens(r'"a\"b\\c\/d\b\f\n\r\t\v\0"')
        self.assertEqual(kind, "STRING")
        self.assertEqual(text, 'a"b\\c/d\b\f\n\r\t\v\0')

    def test_only_matching_quote_terminates_string(self) -> None:
        self.assertEqual(self._tokens("'say \"hi\"'"), [("STRING", 'say "hi"')])
        self.assertEqual(self._tokens("\"it's\""), [("STRING", "it's")])
        self.assertEqual(self._tokens(r"'it\'s'"), [("STRING", "it's")])

    def test_hex_and_unicode_escapes(self) -> None:
        self.assertEqual(self._tokens(r'"\x41' + "\\" + 'u00e9"'), [("STRING", "A\N{LATIN SMALL LETTER E WITH ACUTE}")])
        surrogate_pair = '"' + "\\" + 'ud83d' + "\\" + 'ude00"'
        self.assertEqual(self._tokens(surrogate_pair), [("STRING", "\U0001F600")])
        self.assertEqual(self._tokens(r'"\ud83d"'), [("STRING", "\ud83d")])

    def test_line_continuation_escapes(self) -> None:
        self.assertEqual(self._tokens('"a\\\nb"'), [("STRING", "ab")])
        self.assertEqual(self._tokens('"a\\\r\nb"'), [("STRING", "ab")])
        self.assertEqual(self._tokens('"a\\' + chr(0x2028) + 'b"'), [("STRING", "ab")])

    def test_error_spans(self) -> None:
        cases = {
            '"abc': 0,
            "[1, /* x": 4,
            "@": 0,
            "[1, @]": 4,
            r'"\q"': 1,
            '"a\nb"': 2,
        }
        for source, start in cases.items():
            with self.subTest(source=source):
                with self.assertRaises(ParseError) as ctx:
                    tokenize(source)
                self.assertEqual(ctx.exception.start, start)

    def test_malformed_numbers_are_rejected(self) -> None:
        for source in ("01", "-", "+", ".", "1.2.3", "0x", "0xg", "12abc", "1e", "1e+", "-.", "+Inf", "-Infinityx", "-x"):
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    tokenize(source)

    def test_malformed_escapes_are_rejected(self) -> None:
        for source in (r'"\x4"', r'"\u12"', r'"\uzzzz"', r'"\01"', '"\\'):
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    tokenize(source)

    def test_parse_error_is_a_syntax_error(self) -> None:
        with self.assertRaises(SyntaxError):
            tokenize("#")

    def test_iter_tokens_is_lazy(self) -> None:
        stream = iter_tokens("[1, @")
        self.assertEqual(next(stream).kind, "LBRACK")
        self.assertEqual(next(stream).kind, "NUMBER")
        self.assertEqual(next(stream).kind, "COMMA")
        with self.assertRaises(ParseError):
            next(stream)


if __name__ == "__main__":
    unittest.main()
