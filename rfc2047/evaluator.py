"""
The evaluator turns parsed units into text. The payload of an encoded word is first decoded from
Base64 or Quoted-Printable into bytes, and these bytes are then decoded using the charset of the
encoded word. Clear text is expected to be UTF-8.
"""
from __future__ import annotations

import base64
import binascii

from typing import Iterable

from rfc2047 import charsets
from rfc2047.charsets import CharsetHandle
from rfc2047.lib.environment import logger
from rfc2047.lib.tools import printable
from rfc2047.lib.types import buf
from rfc2047.model import (
    Base64Error,
    CharsetPolicy,
    ClearTextError,
    Encoding,
    ParsedClearText,
    ParsedEncodedWord,
    ParsedUnit,
    QuotedPrintableError,
)

log = logger(__name__)


def decode_base64(data: buf) -> bytes:
    """
    Decode standard Base64. Non-zero trailing bits in the last character are accepted, since many
    mail clients produce them.
    """
    try:
        return base64.b64decode(bytes(data), validate=True)
    except binascii.Error as error:
        raise Base64Error(F'invalid Base64 payload: {error!s}') from error


def decode_quoted_printable(data: buf) -> bytes:
    """
    Decode the Q encoding: underscores represent spaces and the remaining text is decoded as
    Quoted-Printable. Invalid escape sequences are kept as they are.
    """
    data = bytes(data).replace(B'_', B' ')
    try:
        return binascii.a2b_qp(data)
    except (binascii.Error, ValueError) as error:
        raise QuotedPrintableError(F'invalid Quoted-Printable payload: {error!s}') from error


def decode_with_encoding(encoding: Encoding, data: buf) -> bytes:
    if encoding is Encoding.B:
        return decode_base64(data)
    if encoding is Encoding.Q:
        return decode_quoted_printable(data)
    raise TypeError(F'unexpected encoding {encoding!r}')


def decode_with_charset(
    charset: CharsetHandle | None,
    data: buf,
    policy: CharsetPolicy = CharsetPolicy.Ascii,
) -> str:
    if charset is None and policy is CharsetPolicy.Detect:
        charset = charsets.detect(data)
    if charset is None:
        return charsets.decode_ascii(data)
    return charset.decode(data)


def decode_clear_text(data: buf) -> str:
    try:
        return bytes(data).decode('utf8')
    except UnicodeDecodeError as error:
        raise ClearTextError(F'clear text is not valid UTF-8: {error!s}') from error


def evaluate_unit(unit: ParsedUnit, policy: CharsetPolicy = CharsetPolicy.Ascii) -> str:
    if isinstance(unit, ParsedClearText):
        return decode_clear_text(unit.data)
    if isinstance(unit, ParsedEncodedWord):
        data = decode_with_encoding(unit.encoding, unit.encoded_text)
        if unit.charset is None:
            log.debug(F'decoding {len(data)} bytes with unknown charset {printable(unit.label)}, policy is {policy}')
        return decode_with_charset(unit.charset, data, policy)
    raise TypeError(F'unexpected unit type {type(unit).__name__}')


def evaluate(units: Iterable[ParsedUnit], policy: CharsetPolicy | str = CharsetPolicy.Ascii) -> str:
    """
    Evaluate all units and concatenate the results. The first error aborts the evaluation.
    """
    policy = CharsetPolicy.FromName(policy)
    fragments = [evaluate_unit(unit, policy) for unit in units]
    log.debug(F'evaluated {len(fragments)} units')
    return ''.join(fragments)
