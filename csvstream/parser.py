"""Incremental, callback-driven CSV parser."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, List, Optional, Union

from .errors import CsvError, ErrorType, strerror
from .options import (
    COMMA,
    CR,
    LF,
    QUOTE,
    SPACE,
    TAB,
    Option,
    OptionsLike,
    combine_options,
)

__all__ = ["CsvParser", "parse_rows", "DEFAULT_BLOCK_SIZE"]

DEFAULT_BLOCK_SIZE = 128

FieldCallback = Optional[Callable[[Optional[bytes]], object]]
RowCallback = Optional[Callable[[int], object]]
CharPredicate = Optional[Callable[[int], object]]
ByteLike = Union[int, bytes, bytearray]


class _State(IntEnum):
    ROW_NOT_BEGUN = 0
    FIELD_NOT_BEGUN = 1
    FIELD_BEGUN = 2
    FIELD_MIGHT_HAVE_ENDED = 3


def _byte_value(value: ByteLike, name: str) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"{name} must be a single byte, got {value!r}")
        return value[0]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int or a single byte, got {value!r}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of byte range: {value!r}")
    return value


def _default_is_space(c: int) -> bool:
    return c == SPACE or c == TAB


def _default_is_term(c: int) -> bool:
    return c == CR or c == LF


class CsvParser:
    """Streaming CSV parser.

    Data is fed in chunks with :meth:`parse`; each complete field is passed
    to ``on_field`` as bytes (or None for empty unquoted fields with
    ``EMPTY_IS_NULL``) and each row end to ``on_row`` with the terminating
    byte, or -1 when the row is closed by :meth:`finish`.

    ``space_func`` and ``term_func`` may be set to predicates on a byte
    value to replace the default space/tab and CR/LF classification.
    """

    def __init__(
        self,
        delimiter: ByteLike = COMMA,
        quote: ByteLike = QUOTE,
        options: OptionsLike = None,
    ) -> None:
        self.delimiter = delimiter
        self.quote = quote
        self._options = combine_options(options)
        self.space_func: CharPredicate = None
        self.term_func: CharPredicate = None
        self.block_size = DEFAULT_BLOCK_SIZE
        self._state = _State.ROW_NOT_BEGUN
        self._quoted = False
        self._spaces = 0
        self._entry = bytearray()
        self._entry_size = 0
        self._status = 0

    @property
    def delimiter(self) -> int:
        """The field delimiter byte."""
        return self._delimiter

    @delimiter.setter
    def delimiter(self, value: ByteLike) -> None:
        self._delimiter = _byte_value(value, "delimiter")

    @property
    def quote(self) -> int:
        """The quote byte."""
        return self._quote

    @quote.setter
    def quote(self, value: ByteLike) -> None:
        self._quote = _byte_value(value, "quote")

    @property
    def options(self) -> Option:
        """The options currently in effect."""
        return self._options

    def set_options(self, options: OptionsLike) -> None:
        """Replace all enabled options."""
        self._options = combine_options(options)

    def buffer_size(self) -> int:
        """Return the current capacity of the field buffer."""
        return self._entry_size

    def _grow(self) -> bool:
        if self.block_size <= 0:
            self._status = ErrorType.TOO_BIG
            return False
        self._entry_size += self.block_size
        return True

    def _raise_status(self, consumed: int) -> None:
        raise CsvError(
            "CSV Parsing Error: " + strerror(self._status),
            ErrorType(self._status),
            consumed,
        )

    def _submit_field(self, on_field: FieldCallback) -> None:
        entry = self._entry
        if not self._quoted and self._spaces:
            del entry[len(entry) - self._spaces:]
        if on_field is not None:
            if self._options & Option.EMPTY_IS_NULL and not self._quoted and not entry:
                on_field(None)
            else:
                on_field(bytes(entry))
        self._state = _State.FIELD_NOT_BEGUN
        entry.clear()
        self._quoted = False
        self._spaces = 0

    def _submit_row(self, c: int, on_row: RowCallback) -> None:
        if on_row is not None:
            on_row(c)
        self._state = _State.ROW_NOT_BEGUN
        self._entry.clear()
        self._quoted = False
        self._spaces = 0

    def _drop_closing_quote(self) -> None:
        del self._entry[len(self._entry) - (self._spaces + 1):]

    def parse(
        self,
        data: Union[bytes, bytearray, memoryview, None],
        on_field: FieldCallback = None,
        on_row: RowCallback = None,
    ) -> int:
        """Parse a chunk of data and return the number of bytes consumed.

        Raises CsvError when strict checking finds malformed data or the
        field buffer cannot grow; ``bytes_parsed`` then tells how much of
        the chunk was consumed.
        """
        if data is None:
            return 0
        if isinstance(data, str):
            raise TypeError("parse() needs bytes, not str")
        chunk = bytes(data)

        delim = self._delimiter
        quote = self._quote
        is_space = self.space_func or _default_is_space
        is_term = self.term_func or _default_is_term
        strict = bool(self._options & Option.STRICT)
        entry = self._entry

        if self._entry_size == 0 and chunk:
            if not self._grow():
                self._raise_status(0)

        for pos, c in enumerate(chunk):
            limit = self._entry_size - 1 if self._options & Option.APPEND_NULL else self._entry_size
            if len(entry) == limit and not self._grow():
                self._raise_status(pos)

            state = self._state
            if state in (_State.ROW_NOT_BEGUN, _State.FIELD_NOT_BEGUN):
                if is_space(c) and c != delim:
                    continue
                if is_term(c):
                    if state == _State.FIELD_NOT_BEGUN:
                        self._submit_field(on_field)
                        self._submit_row(c, on_row)
                    elif self._options & Option.REPALL_NL:
                        self._submit_row(c, on_row)
                    continue
                if c == delim:
                    self._submit_field(on_field)
                elif c == quote:
                    self._state = _State.FIELD_BEGUN
                    self._quoted = True
                else:
                    self._state = _State.FIELD_BEGUN
                    self._quoted = False
                    entry.append(c)
            elif state == _State.FIELD_BEGUN:
                if c == quote:
                    if self._quoted:
                        entry.append(c)
                        self._state = _State.FIELD_MIGHT_HAVE_ENDED
                    else:
                        if strict:
                            self._status = ErrorType.PARSE
                            self._raise_status(pos)
                        entry.append(c)
                        self._spaces = 0
                elif c == delim:
                    if self._quoted:
                        entry.append(c)
                    else:
                        self._submit_field(on_field)
                elif is_term(c):
                    if self._quoted:
                        entry.append(c)
                    else:
                        self._submit_field(on_field)
                        self._submit_row(c, on_row)
                elif not self._quoted and is_space(c):
                    entry.append(c)
                    self._spaces += 1
                else:
                    entry.append(c)
                    self._spaces = 0
            else:  # FIELD_MIGHT_HAVE_ENDED
                if c == delim:
                    self._drop_closing_quote()
                    self._submit_field(on_field)
                elif is_term(c):
                    self._drop_closing_quote()
                    self._submit_field(on_field)
                    self._submit_row(c, on_row)
                elif is_space(c):
                    entry.append(c)
                    self._spaces += 1
                elif c == quote:
                    if self._spaces:
                        if strict:
                            self._status = ErrorType.PARSE
                            self._raise_status(pos)
                        self._spaces = 0
                        entry.append(c)
                    else:
                        self._state = _State.FIELD_BEGUN
                else:
                    if strict:
                        self._status = ErrorType.PARSE
                        self._raise_status(pos)
                    self._state = _State.FIELD_BEGUN
                    self._spaces = 0
                    entry.append(c)

        if self._status:
            self._raise_status(len(chunk))
        return len(chunk)

    def finish(self, on_field: FieldCallback = None, on_row: RowCallback = None) -> None:
        """Flush a pending field and row and reset the parser for reuse.

        With STRICT and STRICT_FINI, an unterminated quoted field raises
        CsvError and the parser state is left as it was.
        """
        opts = self._options
        if (
            self._state == _State.FIELD_BEGUN
            and self._quoted
            and opts & Option.STRICT
            and opts & Option.STRICT_FINI
        ):
            self._status = ErrorType.PARSE
            raise CsvError(strerror(self._status), ErrorType.PARSE, 0)

        if self._state == _State.FIELD_MIGHT_HAVE_ENDED:
            self._drop_closing_quote()
        if self._state != _State.ROW_NOT_BEGUN:
            self._submit_field(on_field)
            self._submit_row(-1, on_row)

        self._spaces = 0
        self._quoted = False
        self._entry.clear()
        self._status = 0
        self._state = _State.ROW_NOT_BEGUN


def parse_rows(
    data: Union[bytes, bytearray, memoryview],
    delimiter: ByteLike = COMMA,
    quote: ByteLike = QUOTE,
    options: OptionsLike = None,
) -> List[List[Optional[bytes]]]:
    """Parse a complete document and return its rows as lists of fields."""
    parser = CsvParser(delimiter, quote, options)
    rows: List[List[Optional[bytes]]] = []
    current: List[Optional[bytes]] = []

    def on_row(_terminator: int) -> None:
        nonlocal current
        rows.append(current)
        current = []

    parser.parse(data, current_append(lambda: current), on_row)
    parser.finish(current_append(lambda: current), on_row)
    return rows


def current_append(getter: Callable[[], List[Optional[bytes]]]) -> Callable[[Optional[bytes]], None]:
    """Return a field callback appending to the list ``getter`` yields."""

    def on_field(field: Optional[bytes]) -> None:
        getter().append(field)

    return on_field