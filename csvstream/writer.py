"""Writing fields as quoted CSV data."""

from __future__ import annotations

from typing import BinaryIO, Union

from .options import QUOTE

__all__ = ["quote_field", "quoted_length", "write_field"]

BytesLike = Union[bytes, bytearray, memoryview]
QuoteLike = Union[int, bytes, bytearray]


def _quote_byte(quote: QuoteLike) -> bytes:
    if isinstance(quote, (bytes, bytearray)):
        if len(quote) != 1:
            raise ValueError(f"quote must be a single byte, got {quote!r}")
        return bytes(quote)
    if isinstance(quote, bool) or not isinstance(quote, int):
        raise TypeError(f"quote must be an int or a single byte, got {quote!r}")
    if not 0 <= quote <= 0xFF:
        raise ValueError(f"quote out of byte range: {quote!r}")
    return bytes((quote,))


def quote_field(src: BytesLike | None, quote: QuoteLike = QUOTE) -> bytes:
    """Return ``src`` wrapped in quotes with embedded quotes doubled.

    A missing field (None) yields empty output.
    """
    q = _quote_byte(quote)
    if src is None:
        return b""
    return q + bytes(src).replace(q, q + q) + q


def quoted_length(src: BytesLike | None, quote: QuoteLike = QUOTE) -> int:
    """Return the number of bytes :func:`quote_field` would produce."""
    q = _quote_byte(quote)
    if src is None:
        return 0
    data = bytes(src)
    return len(data) + data.count(q) + 2


def write_field(stream: BinaryIO, src: BytesLike | None, quote: QuoteLike = QUOTE) -> int:
    """Write ``src`` as a quoted field to a binary stream.

    Returns the number of bytes written; nothing is written for None.
    """
    encoded = quote_field(src, quote)
    if encoded:
        stream.write(encoded)
    return len(encoded)