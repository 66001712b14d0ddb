"""Error types raised while parsing CSV data."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ErrorType", "CsvError", "strerror"]


class ErrorType(IntEnum):
    """Kinds of failure a parser can report."""

    PARSE = 1
    """Malformed data met while strict checking is enabled."""
    NO_MEMORY = 2
    """The field buffer could not be grown."""
    TOO_BIG = 3
    """The field buffer would exceed the largest allowed size."""
    INVALID = 4
    """An invalid status code."""


_MESSAGES = (
    "success",
    "error parsing data while strict checking enabled",
    "memory exhausted while increasing buffer size",
    "data size too large",
    "invalid status code",
)


def strerror(status: int) -> str:
    """Return a textual description of a status code.

    Zero means success; codes outside the known range describe themselves
    as invalid.
    """
    code = int(status)
    if code < 0 or code >= ErrorType.INVALID:
        return _MESSAGES[ErrorType.INVALID]
    return _MESSAGES[code]


class CsvError(RuntimeError):
    """Raised when CSV data cannot be parsed or finalised.

    ``bytes_parsed`` is the number of bytes of the offending chunk that were
    consumed before the error was detected.
    """

    def __init__(self, message: str, error_type: ErrorType | int, bytes_parsed: int = 0) -> None:
        super().__init__(message)
        self.error_type = ErrorType(error_type)
        self.bytes_parsed = bytes_parsed

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({str(self)!r}, {self.error_type!r}, "
            f"bytes_parsed={self.bytes_parsed})"
        )