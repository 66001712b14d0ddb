"""Parser option flags and common character values."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterable, Union

__all__ = [
    "Option",
    "combine_options",
    "TAB",
    "SPACE",
    "CR",
    "LF",
    "COMMA",
    "QUOTE",
]

TAB = 0x09
SPACE = 0x20
CR = 0x0D
LF = 0x0A
COMMA = 0x2C
QUOTE = 0x22


class Option(IntFlag):
    """Flags that change how a parser treats its input."""

    STRICT = 1
    """Report malformed data as an error."""
    REPALL_NL = 2
    """Report every unquoted carriage return and line feed as a row end."""
    STRICT_FINI = 4
    """With STRICT, fail at finish if a quoted field was never closed."""
    APPEND_NULL = 8
    """Reserve room for a terminating NUL after every field."""
    EMPTY_IS_NULL = 16
    """Pass None for empty, unquoted fields."""


_ALL_FLAGS = 0
for _flag in Option:
    _ALL_FLAGS |= _flag.value


OptionsLike = Union[Option, int, Iterable[Union[Option, int]], None]


def _as_option(value: object) -> Option:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"not a parser option: {value!r}")
    if value < 0 or value & ~_ALL_FLAGS:
        raise ValueError(f"unknown parser option bits: {value!r}")
    return Option(value)


def combine_options(options: OptionsLike) -> Option:
    """Merge options into a single flag value.

    Accepts None, a single option (or its integer value), or any iterable
    of options. Unknown bits raise ValueError.
    """
    if options is None:
        return Option(0)
    if isinstance(options, int):
        return _as_option(options)
    combined = Option(0)
    for item in options:
        combined |= _as_option(item)
    return combined