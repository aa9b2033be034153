from rfc2047.charsets import CharsetHandle
from rfc2047.model import (
    CharsetPolicy,
    ClearText,
    EmptyEncoding,
    EncodedWord,
    Encoding,
    EncodingTooBig,
    ParsedClearText,
    ParsedEncodedWord,
    ParseError,
    Stage,
    UnknownCharset,
    UnknownEncoding,
)
from rfc2047.parser import parse, parse_encoding, resolve

from . import TestBase


class TestParser(TestBase):

    def test_parse_encoding(self):
        self.assertIs(parse_encoding(B'q'), Encoding.Q)
        self.assertIs(parse_encoding(B'Q'), Encoding.Q)
        self.assertIs(parse_encoding(B'b'), Encoding.B)
        self.assertIs(parse_encoding(B'B'), Encoding.B)

    def test_encoding_too_big(self):
        with self.assertRaises(EncodingTooBig) as context:
            parse_encoding(B'base64')
        self.assertEqual(context.exception.encoding, B'base64')
        self.assertIs(context.exception.stage, Stage.Parse)

    def test_empty_encoding(self):
        with self.assertRaises(EmptyEncoding):
            parse_encoding(B'')

    def test_unknown_encoding(self):
        with self.assertRaises(UnknownEncoding) as context:
            parse_encoding(B'x')
        self.assertIsInstance(context.exception, ParseError)

    def test_clear_text_passes_through(self):
        self.assertEqual(resolve(ClearText(B'foo')), ParsedClearText(B'foo'))

    def test_resolve_encoded_word(self):
        unit = resolve(EncodedWord(B'utf8', B'q', B'str'))
        self.assertEqual(unit, ParsedEncodedWord(CharsetHandle('utf-8'), Encoding.Q, B'str', B'utf8'))

    def test_unknown_charset_is_lenient_by_default(self):
        unit = resolve(EncodedWord(B'x-no-such-charset', B'B', B'c3Ry'))
        self.assertIsNone(unit.charset)
        self.assertIs(unit.encoding, Encoding.B)
        self.assertEqual(unit.label, B'x-no-such-charset')

    def test_unknown_charset_strict(self):
        token = EncodedWord(B'x-no-such-charset', B'B', B'c3Ry')
        with self.assertRaises(UnknownCharset) as context:
            resolve(token, CharsetPolicy.Strict)
        self.assertEqual(context.exception.charset, B'x-no-such-charset')
        with self.assertRaises(UnknownCharset):
            parse([token], 'strict')

    def test_unknown_charset_detect_defers_to_evaluator(self):
        unit = resolve(EncodedWord(B'x-no-such-charset', B'B', B'c3Ry'), CharsetPolicy.Detect)
        self.assertIsNone(unit.charset)

    def test_encoding_is_checked_before_charset(self):
        with self.assertRaises(UnknownEncoding):
            resolve(EncodedWord(B'x-no-such-charset', B'X', B''), CharsetPolicy.Strict)

    def test_parse_keeps_order(self):
        units = parse([
            ClearText(B'Re: '),
            EncodedWord(B'ISO-8859-1', B'Q', B'a'),
            EncodedWord(B'UTF-8', B'B', B'c3Ry'),
        ])
        self.assertEqual(len(units), 3)
        self.assertEqual(units[0], ParsedClearText(B'Re: '))
        self.assertEqual(units[1].charset, CharsetHandle('iso8859-1'))
        self.assertIs(units[1].encoding, Encoding.Q)
        self.assertIs(units[2].encoding, Encoding.B)

    def test_unexpected_token_type(self):
        with self.assertRaises(TypeError):
            resolve(B'not a token')
