"""
This module is used as a unified resource for various types that are primarily used for type hints.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import Union

    buf = Union[bytes, bytearray, memoryview]
    """
    Any object that supports the buffer protocol and can be tokenized.
    """
    inp = Union[str, bytes, bytearray, memoryview]
    """
    Anything that is accepted as the input of a decoder.
    """
else:
    buf = Any
    inp = Any
