"""
Miscellaneous helper functions.
"""
from __future__ import annotations

from rfc2047.lib.types import buf


def asbuffer(obj) -> memoryview | None:
    """
    Attempts to acquire a memoryview of the given object. This works for bytes and bytearrays, or
    memoryview objects themselves. The return value is `None` for objects that do not support the
    buffer protocol.
    """
    try:
        return memoryview(obj)
    except TypeError:
        return None


def printable(data: buf) -> str:
    """
    Convert a byte string into text for display; bytes that are not valid UTF-8 are kept as
    surrogate escapes.
    """
    return bytes(data).decode('utf8', errors='surrogateescape')


def exception_to_string(exception: BaseException, default=None) -> str:
    """
    Attempts to convert a given exception to a good description that can be exposed to the user.
    """
    if not exception.args:
        return exception.__class__.__name__
    it = (a for a in exception.args if isinstance(a, str))
    if default is None:
        default = str(exception)
    return max(it, key=len, default=default).strip()
