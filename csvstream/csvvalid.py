"""Check whether files hold well-formed CSV data."""

from __future__ import annotations

import sys
from functools import partial
from typing import BinaryIO, Optional, Sequence

from .errors import CsvError, ErrorType
from .options import Option
from .parser import CsvParser

__all__ = ["first_malformed_byte", "main", "CHUNK_SIZE"]

CHUNK_SIZE = 1024


def first_malformed_byte(stream: BinaryIO, parser: Optional[CsvParser] = None) -> Optional[int]:
    """Return the 1-based position of the first offending byte, or None.

    A strict parser is used when none is given. Errors other than parse
    errors propagate as CsvError. The parser is finished either way.
    """
    if parser is None:
        parser = CsvParser(options=Option.STRICT)
    pos = 0
    try:
        for chunk in iter(partial(stream.read, CHUNK_SIZE), b""):
            try:
                parser.parse(chunk)
            except CsvError as exc:
                if exc.error_type == ErrorType.PARSE:
                    return pos + exc.bytes_parsed + 1
                raise
            pos += len(chunk)
        return None
    finally:
        parser.finish()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command: ``csvvalid files``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: csvvalid files", file=sys.stderr)
        return 1

    parser = CsvParser(options=Option.STRICT)
    for path in args:
        try:
            stream = open(path, "rb")
        except OSError as exc:
            print(f"Failed to open {path}: {exc.strerror or exc}, skipping", file=sys.stderr)
            continue
        with stream:
            try:
                offset = first_malformed_byte(stream, parser)
            except (CsvError, OSError) as exc:
                print(f"Error while processing {path}: {exc}")
                continue
        if offset is None:
            print(f"{path} well-formed")
        else:
            print(f"{path}: malformed at byte {offset}")
    return 0


if __name__ == "__main__":
    sys.exit(main())