"""
The resolver converts the raw fields of encoded word tokens into typed units: the charset label is
looked up in the charset registry and the encoding tag is checked to be either B or Q.
"""
from __future__ import annotations

from typing import Iterable

from rfc2047 import charsets
from rfc2047.lib.environment import logger
from rfc2047.lib.tools import printable
from rfc2047.model import (
    CharsetPolicy,
    ClearText,
    EmptyEncoding,
    EncodedWord,
    Encoding,
    EncodingTooBig,
    ParsedClearText,
    ParsedEncodedWord,
    ParsedUnit,
    Token,
    UnknownCharset,
    UnknownEncoding,
)

log = logger(__name__)

_ENCODINGS = {
    B'b': Encoding.B,
    B'q': Encoding.Q,
}


def parse_encoding(tag: bytes) -> Encoding:
    if not tag:
        raise EmptyEncoding
    if len(tag) > 1:
        raise EncodingTooBig(tag)
    try:
        return _ENCODINGS[tag.lower()]
    except KeyError:
        raise UnknownEncoding(tag) from None


def resolve(token: Token, policy: CharsetPolicy | str = CharsetPolicy.Ascii) -> ParsedUnit:
    if isinstance(token, ClearText):
        return ParsedClearText(token.data)
    if not isinstance(token, EncodedWord):
        raise TypeError(F'unexpected token type {type(token).__name__}')
    encoding = parse_encoding(token.encoding)
    charset = charsets.for_label(token.charset)
    if charset is None:
        policy = CharsetPolicy.FromName(policy)
        if policy is CharsetPolicy.Strict:
            raise UnknownCharset(token.charset)
        log.info(F'unknown charset {printable(token.charset)}, the {policy} fallback is used')
    return ParsedEncodedWord(charset, encoding, token.encoded_text, token.charset)


def parse(tokens: Iterable[Token], policy: CharsetPolicy | str = CharsetPolicy.Ascii) -> list[ParsedUnit]:
    """
    Resolve all tokens in order. The first error is raised and aborts the resolution.
    """
    policy = CharsetPolicy.FromName(policy)
    return [resolve(token, policy) for token in tokens]
