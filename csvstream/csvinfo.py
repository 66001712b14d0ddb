"""Report the number of fields and rows in CSV files."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import partial
from typing import BinaryIO, Optional, Sequence

from .errors import CsvError
from .options import CR, LF, SPACE, TAB, Option
from .parser import CsvParser

__all__ = ["Counts", "count_stream", "main", "CHUNK_SIZE"]

CHUNK_SIZE = 1024


@dataclass
class Counts:
    """Totals gathered from one document."""

    fields: int = 0
    rows: int = 0


def _is_space(c: int) -> bool:
    return c in (SPACE, TAB)


def _is_term(c: int) -> bool:
    return c in (CR, LF)


def count_stream(stream: BinaryIO, parser: Optional[CsvParser] = None) -> Counts:
    """Count the fields and rows of the CSV data in ``stream``.

    The parser is finished afterwards so it can be reused. Parse errors
    propagate as CsvError.
    """
    if parser is None:
        parser = CsvParser()
    counts = Counts()

    def on_field(_field: Optional[bytes]) -> None:
        counts.fields += 1

    def on_row(_terminator: int) -> None:
        counts.rows += 1

    for chunk in iter(partial(stream.read, CHUNK_SIZE), b""):
        parser.parse(chunk, on_field, on_row)
    parser.finish(on_field, on_row)
    return counts


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command: ``csvinfo [-s] files``.

    ``-s`` enables strict parsing for the files that follow it.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: csvinfo [-s] files", file=sys.stderr)
        return 1

    parser = CsvParser()
    parser.space_func = _is_space
    parser.term_func = _is_term

    for arg in args:
        if arg == "-s":
            parser.set_options(Option.STRICT)
            continue
        try:
            stream = open(arg, "rb")
        except OSError as exc:
            print(f"Failed to open {arg}: {exc.strerror or exc}", file=sys.stderr)
            continue
        with stream:
            try:
                counts = count_stream(stream, parser)
            except CsvError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            except OSError:
                print(f"Error while reading file {arg}", file=sys.stderr)
                continue
        print(f"{arg}: {counts.fields} fields, {counts.rows} rows")
    return 0


if __name__ == "__main__":
    sys.exit(main())