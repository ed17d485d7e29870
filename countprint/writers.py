"""Primitive writers that emit one value to a text stream and report its length.

Every writer returns the number of characters it wrote. Integer arguments
are reduced to the width the matching conversion works with: 32 bits for
numbers and 64 bits for addresses, as a C ``int``, ``unsigned int`` or
pointer would be.
"""

from __future__ import annotations

import sys
from typing import TextIO

NULL_STRING = "(null)"
NULL_ADDRESS = "(nil)"
ADDRESS_PREFIX = "0x"

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: TextIO | None) -> int:
    _stream(stream).write(text)
    return len(text)


def _to_int32(n: int) -> int:
    n &= _UINT32_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write a single character; an integer is taken as a byte value."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _emit(c, stream)


def put_str(s: str | None, stream: TextIO | None = None) -> int:
    """Write a string up to its first NUL character; ``None`` prints ``(null)``."""
    if s is None:
        s = NULL_STRING
    return _emit(s.split("\0", 1)[0], stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write a signed 32-bit decimal integer."""
    return _emit(str(_to_int32(n)), stream)


def put_uint(n: int, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit decimal integer."""
    return _emit(str(n & _UINT32_MASK), stream)


def put_lower_hex(n: int, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in lower-case hexadecimal."""
    return _emit(format(n & _UINT32_MASK, "x"), stream)


def put_upper_hex(n: int, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in upper-case hexadecimal."""
    return _emit(format(n & _UINT32_MASK, "X"), stream)


def put_address_hex(n: int, stream: TextIO | None = None) -> int:
    """Write an unsigned 64-bit integer in lower-case hexadecimal."""
    return _emit(format(n & _UINT64_MASK, "x"), stream)


def put_address(address: int | None, stream: TextIO | None = None) -> int:
    """Write an address as ``0x``-prefixed hex; a null address prints ``(nil)``."""
    if not address:
        return put_str(NULL_ADDRESS, stream)
    return _emit(ADDRESS_PREFIX, stream) + put_address_hex(address, stream)