"""
The charset registry: maps the charset label of an encoded word to a decoder. Labels are resolved
through the codec registry of the `codecs` module; the optional RFC 2231 language suffix of a label,
as in `US-ASCII*EN`, is ignored.
"""
from __future__ import annotations

import codecs
import functools

from dataclasses import dataclass

from rfc2047.lib.dependencies import dependency
from rfc2047.lib.environment import logger
from rfc2047.lib.types import buf

log = logger(__name__)

LANGUAGE_SEPARATOR = '*'


@dependency('chardet', info='required to guess the charset of encoded words with an unknown label')
def _chardet():
    import chardet
    return chardet


@dataclass(frozen=True)
class CharsetHandle:
    """
    A resolved charset. The `name` is the canonical name of the codec.
    """
    name: str

    def decode(self, data: buf) -> str:
        """
        Decode the given bytes; undecodable sequences become replacement characters. If the codec
        fails regardless, the bytes are decoded as ASCII instead.
        """
        try:
            return codecs.decode(bytes(data), self.name, errors='replace')
        except UnicodeError as error:
            log.info(F'charset {self.name} failed, decoding as ASCII: {error!s}')
            return decode_ascii(data)

    def __str__(self):
        return self.name


@functools.lru_cache(maxsize=256)
def _lookup(label: str) -> CharsetHandle | None:
    try:
        info = codecs.lookup(label)
    except LookupError:
        return None
    if not getattr(info, '_is_text_encoding', True):
        # bytes-to-bytes codecs like base64 or zlib are not charsets
        return None
    try:
        codecs.decode(B'a', info.name, errors='replace')
    except ValueError:
        # codecs like idna or undefined refuse to decode with replacement characters
        log.debug(F'ignoring charset {info.name}, it can not decode with replacement characters')
        return None
    return CharsetHandle(info.name)


def for_label(label: buf | str) -> CharsetHandle | None:
    """
    Look up the charset for the given label. The return value is `None` if no charset with this
    label is known.
    """
    if not isinstance(label, str):
        try:
            label = bytes(label).decode('ascii')
        except UnicodeDecodeError:
            return None
    label, _, _ = label.partition(LANGUAGE_SEPARATOR)
    label = label.strip()
    if not label:
        return None
    return _lookup(label.lower())


def decode_ascii(data: buf) -> str:
    """
    The fallback for encoded words without a known charset: bytes outside the ASCII range become
    replacement characters.
    """
    return bytes(data).decode('ascii', errors='replace')


def detect(data: buf) -> CharsetHandle | None:
    """
    Guess the charset of the given bytes. The return value is `None` when no guess is possible.
    """
    if not data:
        return None
    detection = _chardet().detect(bytes(data))
    if not (name := detection.get('encoding')):
        return None
    charset = for_label(name)
    if charset is not None:
        log.info(F'using charset {charset}, detected with {int(detection["confidence"] * 100)}% confidence')
    return charset
