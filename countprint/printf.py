"""A small printf that writes straight to a stream and counts what it wrote.

Supported conversions: ``%c %s %d %i %u %x %X %p %%``. No flags, widths
or precisions are understood.
"""

from __future__ import annotations

import io
import sys
from typing import Any, Callable, TextIO

from countprint.writers import (
    put_address,
    put_char,
    put_lower_hex,
    put_nbr,
    put_str,
    put_uint,
    put_upper_hex,
)

_CONVERSIONS: dict[str, Callable[[Any, TextIO], int]] = {
    "s": put_str,
    "c": put_char,
    "d": put_nbr,
    "i": put_nbr,
    "u": put_uint,
    "x": put_lower_hex,
    "X": put_upper_hex,
    "p": put_address,
}


class FormatError(ValueError):
    """Raised for a missing format, a bad conversion or too few arguments."""


def printf(format: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write ``format`` with its conversions filled from ``args``.

    Returns the number of characters written. Output is written as the
    format is read, so text before a bad conversion has already been
    written when :class:`FormatError` is raised. The format ends at its
    first NUL character.
    """
    if format is None:
        raise FormatError("format must not be None")
    out = sys.stdout if stream is None else stream
    values = iter(args)
    chars = iter(format.split("\0", 1)[0])
    count = 0
    for ch in chars:
        if ch != "%":
            out.write(ch)
            count += 1
            continue
        spec = next(chars, None)
        if spec == "%":
            count += put_char("%", out)
            continue
        writer = _CONVERSIONS.get(spec) if spec is not None else None
        if writer is None:
            raise FormatError(f"invalid conversion specifier: %{spec or ''}")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        count += writer(value, out)
    return count


def format_string(format: str | None, *args: Any) -> str:
    """Return what :func:`printf` would write for the same arguments."""
    buffer = io.StringIO()
    printf(format, *args, stream=buffer)
    return buffer.getvalue()