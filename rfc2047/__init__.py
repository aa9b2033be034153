R"""
A decoder for MIME encoded words as specified in RFC 2047. Header values like

    =?UTF-8?Q?encoded_str_with_symbol_=E2=82=AC?=

are decoded into Unicode text by a pipeline of three stages:

1. `rfc2047.lexer`: splits the input into clear text and encoded words.
2. `rfc2047.parser`: resolves the charset and the encoding of each encoded word.
3. `rfc2047.evaluator`: decodes each payload and concatenates the results.

The `rfc2047.Decoder` class holds the configuration of this pipeline and `rfc2047.decode` is a
shortcut for decoding with the default configuration:

    >>> import rfc2047
    >>> rfc2047.decode('=?ISO-8859-1?Q?a?= =?ISO-8859-1?Q?b?=')
    'ab'

All errors derive from `rfc2047.Error`; the `stage` attribute of the error tells which stage of
the pipeline failed.
"""
from __future__ import annotations

__version__ = '0.2.0'
__distribution__ = 'rfc2047-decoder'

import dataclasses

from typing import Optional

from rfc2047 import evaluator, lexer, parser
from rfc2047.lib.types import inp
from rfc2047.model import (
    MAX_LENGTH,
    Base64Error,
    CharsetPolicy,
    ClearTextError,
    EmptyEncoding,
    EncodingTooBig,
    Error,
    EvalError,
    LexError,
    ParseError,
    QuotedPrintableError,
    RecoverStrategy,
    Stage,
    TooLongEncodedWords,
    UnknownCharset,
    UnknownEncoding,
)

__all__ = [
    'decode',
    'Decoder',
    'RecoverStrategy',
    'CharsetPolicy',
    'Stage',
    'MAX_LENGTH',
    'Error',
    'LexError',
    'TooLongEncodedWords',
    'ParseError',
    'EncodingTooBig',
    'EmptyEncoding',
    'UnknownEncoding',
    'UnknownCharset',
    'EvalError',
    'Base64Error',
    'QuotedPrintableError',
    'ClearTextError',
]


@dataclasses.dataclass(frozen=True)
class Decoder:
    """
    The decoder configuration. Options can be given as members or names of the respective
    enumeration. Options that are not specified take their defaults: too long encoded words abort
    the decoding and unknown charsets are decoded as ASCII.
    """
    too_long_encoded_word: Optional[RecoverStrategy] = None
    unknown_charset: Optional[CharsetPolicy] = None

    def __post_init__(self):
        strategy = self.too_long_encoded_word
        policy = self.unknown_charset
        object.__setattr__(self, 'too_long_encoded_word',
            RecoverStrategy.Abort if strategy is None else RecoverStrategy.FromName(strategy))
        object.__setattr__(self, 'unknown_charset',
            CharsetPolicy.Ascii if policy is None else CharsetPolicy.FromName(policy))

    def with_strategy(self, strategy: RecoverStrategy | str) -> Decoder:
        return dataclasses.replace(self, too_long_encoded_word=strategy)

    def with_charset_policy(self, policy: CharsetPolicy | str) -> Decoder:
        return dataclasses.replace(self, unknown_charset=policy)

    def decode(self, data: inp) -> str:
        """
        Decode the given header value. Strings are encoded as UTF-8 before they are tokenized.
        """
        tokens = lexer.tokenize(data, self.too_long_encoded_word)
        units = parser.parse(tokens, self.unknown_charset)
        return evaluator.evaluate(units, self.unknown_charset)


def decode(
    data: inp,
    strategy: RecoverStrategy | str | None = None,
    policy: CharsetPolicy | str | None = None,
) -> str:
    """
    Decode an RFC 2047 header value. The optional `strategy` controls the treatment of encoded words
    that are too long, the optional `policy` controls the treatment of unknown charsets.
    """
    return Decoder(strategy, policy).decode(data)
