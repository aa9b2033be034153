"""
The data model shared by the tokenizer, the resolver and the evaluator: tokens, parsed units, the
configuration enumerations and the error hierarchy.
"""
from __future__ import annotations

import enum

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

from rfc2047.lib.tools import printable

if TYPE_CHECKING:
    from rfc2047.charsets import CharsetHandle

PREFIX = B'=?'
SUFFIX = B'?='
QUESTION_MARK = B'?'

MAX_LENGTH = 75
"""
The maximum length of an encoded word including its delimiters, see RFC 2047 section 2.
"""


class _NamedEnum(str, enum.Enum):

    @classmethod
    def FromName(cls, name):
        """
        Convert a member, a member name or a member value into a member. Names are matched without
        regard to case.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        choices = ', '.join(member.value for member in cls)
        raise ValueError(F'invalid {cls.__name__} "{name}"; pick from: {choices}')

    def __str__(self):
        return self.value


class RecoverStrategy(_NamedEnum):
    """
    Determines how the tokenizer treats an encoded word that is longer than `MAX_LENGTH`.
    """
    Decode = 'decode'
    """
    Decode the encoded word regardless of its length.
    """
    Skip = 'skip'
    """
    Keep the encoded word as clear text; it appears verbatim in the output.
    """
    Abort = 'abort'
    """
    Fail with `rfc2047.model.TooLongEncodedWords` listing all offending words.
    """


class CharsetPolicy(_NamedEnum):
    """
    Determines how a charset label is handled that does not correspond to any known codec.
    """
    Ascii = 'ascii'
    """
    Interpret the decoded bytes as ASCII; non-ASCII bytes become replacement characters.
    """
    Strict = 'strict'
    """
    Fail with `rfc2047.model.UnknownCharset`.
    """
    Detect = 'detect'
    """
    Guess the charset of the decoded bytes and fall back to ASCII when no guess is possible.
    """


class Encoding(_NamedEnum):
    B = 'b'
    Q = 'q'


class Stage(_NamedEnum):
    Lex = 'lex'
    Parse = 'parse'
    Eval = 'eval'


@dataclass(frozen=True)
class ClearText:
    data: bytes

    def __len__(self):
        return len(self.data)


@dataclass(frozen=True)
class EncodedWord:
    charset: bytes
    encoding: bytes
    encoded_text: bytes

    def __len__(self):
        return len(self.charset) + len(self.encoding) + len(self.encoded_text) + 6

    def to_bytes(self) -> bytes:
        return B''.join((
            PREFIX,
            self.charset,
            QUESTION_MARK,
            self.encoding,
            QUESTION_MARK,
            self.encoded_text,
            SUFFIX,
        ))

    @property
    def too_long(self) -> bool:
        return len(self) > MAX_LENGTH

    def __str__(self):
        return printable(self.to_bytes())


Token = Union[ClearText, EncodedWord]


@dataclass(frozen=True)
class ParsedClearText:
    data: bytes


@dataclass(frozen=True)
class ParsedEncodedWord:
    charset: CharsetHandle | None
    encoding: Encoding
    encoded_text: bytes
    label: bytes = B''


ParsedUnit = Union[ParsedClearText, ParsedEncodedWord]


class Error(ValueError):
    """
    The base class of all errors raised while decoding. The `stage` attribute indicates whether
    the tokenizer, the resolver, or the evaluator failed.
    """
    stage: ClassVar[Stage]


class LexError(Error):
    """
    The input could not be split into tokens.
    """
    stage = Stage.Lex


class TooLongEncodedWords(LexError):
    """
    Raised for the `rfc2047.model.RecoverStrategy.Abort` strategy when at least one encoded word
    exceeds `rfc2047.model.MAX_LENGTH`. The `words` attribute lists the original text of all of
    them in order of occurrence.
    """
    def __init__(self, words: list[str]):
        self.words = list(words)
        super().__init__(
            F'Cannot parse the following encoded words, because they are too long: {", ".join(self.words)}')


class ParseError(Error):
    stage = Stage.Parse


class EncodingTooBig(ParseError):
    def __init__(self, encoding: bytes):
        self.encoding = encoding
        super().__init__(F'the encoding must be a single character, got: {printable(encoding)}')


class EmptyEncoding(ParseError):
    def __init__(self):
        super().__init__('the encoding of an encoded word is empty')


class UnknownEncoding(ParseError):
    def __init__(self, encoding: bytes):
        self.encoding = encoding
        super().__init__(F'unknown encoding, expected B or Q: {printable(encoding)}')


class UnknownCharset(ParseError):
    def __init__(self, charset: bytes):
        self.charset = charset
        super().__init__(F'unknown charset: {printable(charset)}')


class EvalError(Error):
    stage = Stage.Eval


class Base64Error(EvalError):
    pass


class QuotedPrintableError(EvalError):
    pass


class ClearTextError(EvalError):
    pass
