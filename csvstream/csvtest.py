"""Read CSV from standard input and write a properly formed equivalent."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from typing import BinaryIO, Optional, Sequence

from .errors import CsvError
from .parser import CsvParser
from .writer import write_field

__all__ = ["normalize_stream", "main", "CHUNK_SIZE"]

CHUNK_SIZE = 1024


def normalize_stream(infile: BinaryIO, outfile: BinaryIO) -> None:
    """Write every field of ``infile`` quoted to ``outfile``.

    Fields are separated by commas and each row ends with a line feed.
    """
    parser = CsvParser()
    put_comma = False

    def on_field(field: Optional[bytes]) -> None:
        nonlocal put_comma
        if put_comma:
            outfile.write(b",")
        write_field(outfile, field)
        put_comma = True

    def on_row(_terminator: int) -> None:
        nonlocal put_comma
        put_comma = False
        outfile.write(b"\n")

    for chunk in iter(partial(infile.read, CHUNK_SIZE), b""):
        parser.parse(chunk, on_field, on_row)
    parser.finish(on_field, on_row)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command: normalise standard input onto standard output."""
    argparse.ArgumentParser(
        prog="csvtest",
        description="Read CSV data from standard input and write it properly formed.",
    ).parse_args(argv)
    out = sys.stdout.buffer
    try:
        normalize_stream(sys.stdin.buffer, out)
    except CsvError as exc:
        out.flush()
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())