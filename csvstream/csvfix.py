"""Rewrite possibly malformed CSV data as properly formed CSV."""

from __future__ import annotations

import contextlib
import os
import sys
from functools import partial
from typing import BinaryIO, List, Optional, Sequence

from .errors import CsvError
from .parser import CsvParser
from .writer import quote_field

__all__ = ["fix_stream", "main", "CHUNK_SIZE"]

CHUNK_SIZE = 1024


def fix_stream(infile: BinaryIO, outfile: BinaryIO) -> int:
    """Copy CSV from ``infile`` to ``outfile`` with every field quoted.

    Fields are separated by commas and rows end with a line feed.
    Returns the number of rows written.
    """
    parser = CsvParser()
    row: List[bytes] = []
    rows_written = 0

    def on_field(field: Optional[bytes]) -> None:
        row.append(quote_field(field))

    def on_row(_terminator: int) -> None:
        nonlocal rows_written
        outfile.write(b",".join(row) + b"\n")
        row.clear()
        rows_written += 1

    for chunk in iter(partial(infile.read, CHUNK_SIZE), b""):
        parser.parse(chunk, on_field, on_row)
    parser.finish(on_field, on_row)
    return rows_written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command: ``csvfix infile outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: csv_fix infile outfile", file=sys.stderr)
        return 1

    in_path, out_path = args
    if in_path == out_path:
        print("Input file and output file must not be the same!", file=sys.stderr)
        return 1

    try:
        infile = open(in_path, "rb")
    except OSError as exc:
        print(f"Failed to open file {in_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    with infile:
        try:
            outfile = open(out_path, "wb")
        except OSError as exc:
            print(f"Failed to open file {out_path}: {exc.strerror or exc}", file=sys.stderr)
            return 1
        try:
            with outfile:
                fix_stream(infile, outfile)
        except (CsvError, OSError) as exc:
            print(f"Error reading from input file: {exc}", file=sys.stderr)
            with contextlib.suppress(OSError):
                os.remove(out_path)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())