"""
The tokenizer splits a header value into clear text and encoded words. An encoded word has the form

    =?charset?encoding?encoded-text?=

where charset and encoding consist of at least one character that is neither a space, an ASCII
control character, nor one of the especials `()<>@,;:/[]?.=`. The encoded text may be empty and
can contain anything except spaces and question marks. Linear whitespace that separates two
encoded words is not part of the decoded text and does not produce a token.
"""
from __future__ import annotations

import re

from typing import Iterator

from rfc2047.lib.environment import logger
from rfc2047.lib.tools import asbuffer
from rfc2047.lib.types import inp
from rfc2047.model import (
    MAX_LENGTH,
    ClearText,
    EncodedWord,
    LexError,
    RecoverStrategy,
    Token,
    TooLongEncodedWords,
)

log = logger(__name__)

ESPECIALS = B'()<>@,;:/[]?.='
WHITESPACE = B' \t\r\n'

_TOKEN = (
    B'[^\\x00-\\x20\\x7F'
    + re.escape(ESPECIALS)
    + B']+'
)

ENCODED_WORD = re.compile(
    B'=\\?(' + _TOKEN + B')\\?(' + _TOKEN + B')\\?([^?\\x20]*)\\?='
)

FOLDING_WHITESPACE = re.compile(B'[' + re.escape(WHITESPACE) + B']*')


def _bytes(data: inp) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode('utf8')
        except UnicodeEncodeError as error:
            raise LexError(F'the input string can not be encoded as UTF-8: {error!s}') from error
    if (view := asbuffer(data)) is None:
        raise LexError(F'can not tokenize an object of type {type(data).__name__}')
    return bytes(view)


def _classify(word: EncodedWord, strategy: RecoverStrategy) -> Token:
    if not word.too_long:
        return word
    log.debug(F'encoded word of length {len(word)} exceeds the maximum of {MAX_LENGTH}, strategy is {strategy}: {word!s}')
    if strategy is RecoverStrategy.Skip:
        return ClearText(word.to_bytes())
    return word


def iter_tokens(data: inp, strategy: RecoverStrategy | str = RecoverStrategy.Abort) -> Iterator[Token]:
    """
    Generate the tokens of the given input. With the `rfc2047.model.RecoverStrategy.Skip` strategy,
    encoded words that are too long are emitted as clear text. Otherwise, they are emitted as
    encoded words; this generator does not raise `rfc2047.model.TooLongEncodedWords`.
    """
    strategy = RecoverStrategy.FromName(strategy)
    data = _bytes(data)
    cursor = 0
    end = len(data)
    while cursor < end:
        match = ENCODED_WORD.search(data, cursor)
        if match is None:
            yield ClearText(data[cursor:])
            break
        if (start := match.start()) > cursor:
            yield ClearText(data[cursor:start])
        word = EncodedWord(*match.groups())
        cursor = match.end()
        gap = FOLDING_WHITESPACE.match(data, cursor)
        if gap and ENCODED_WORD.match(data, gap.end()):
            cursor = gap.end()
        yield _classify(word, strategy)


def tokenize(data: inp, strategy: RecoverStrategy | str = RecoverStrategy.Abort) -> list[Token]:
    """
    Split the input into a list of tokens. With the `rfc2047.model.RecoverStrategy.Abort` strategy,
    this function raises `rfc2047.model.TooLongEncodedWords` if any encoded word in the input is
    longer than `rfc2047.model.MAX_LENGTH`.
    """
    strategy = RecoverStrategy.FromName(strategy)
    tokens = list(iter_tokens(data, strategy))
    if strategy is RecoverStrategy.Abort:
        too_long = [str(t) for t in tokens if isinstance(t, EncodedWord) and t.too_long]
        if too_long:
            raise TooLongEncodedWords(too_long)
    return tokens
