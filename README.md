# csvstream

A streaming CSV parser and field writer that works on bytes. Input can be fed
in chunks of any size, down to one byte at a time. The parser reports each
field and each end of row through callbacks as soon as it has seen them, so
files of any size can be processed without loading them whole into memory.

## Modules

- `csvstream.parser`: `CsvParser`, the incremental parser, and `parse_rows`
  for parsing a complete document at once.
- `csvstream.options`: the `Option` flags, `combine_options`, and the byte
  values `TAB`, `SPACE`, `CR`, `LF`, `COMMA` and `QUOTE`.
- `csvstream.errors`: `CsvError`, `ErrorType` and `strerror`.
- `csvstream.writer`: `quote_field`, `quoted_length` and `write_field`.
- `csvstream.csvfix`, `csvstream.csvinfo`, `csvstream.csvtest` and
  `csvstream.csvvalid`: the command-line tools described below.

## Parsing

```python
from csvstream.parser import CsvParser
from csvstream.options import Option

fields = []

def on_field(field):
    fields.append(field)

def on_row(terminator):
    print("row:", fields)
    fields.clear()

parser = CsvParser(options=[Option.STRICT])
with open("data.csv", "rb") as f:
    for chunk in iter(lambda: f.read(1024), b""):
        parser.parse(chunk, on_field, on_row)
parser.finish(on_field, on_row)
```

`CsvParser(delimiter=COMMA, quote=QUOTE, options=None)` accepts the delimiter
and quote either as a byte value or as a one-byte `bytes` object. Both can be
changed later through the `delimiter` and `quote` attributes.

`parse(data, on_field=None, on_row=None)` returns the number of bytes it
consumed. Each field reaches `on_field` as `bytes`. Each row end reaches
`on_row` with the byte that ended the row. Either callback may be `None`.

Unquoted fields lose their leading and trailing spaces and tabs. Inside a
quoted field, delimiters and newlines are kept, and a doubled quote stands for
one quote.

`finish(on_field=None, on_row=None)` must be called after the last chunk. It
flushes a final field and row that have no trailing newline, passing `-1` as
the terminator, and then resets the parser so it can read another document.

By default spaces and tabs count as blanks, and carriage returns and line
feeds end rows. Assign a predicate on a byte value to `parser.space_func` or
`parser.term_func` to change either rule.

`parse_rows(data, delimiter, quote, options)` parses a whole document and
returns its rows as lists of fields:

```python
from csvstream.parser import parse_rows

parse_rows(b'a,"b,c"\n1,2\n')   # [[b'a', b'b,c'], [b'1', b'2']]
```

### Options

Pass options as one `Option`, an integer, or an iterable of them.
`combine_options` merges them and raises `ValueError` for unknown bits.
`parser.set_options(...)` replaces every option in effect, and `parser.options`
reads them back.

- `Option.STRICT`: a stray quote raises `CsvError`. This covers a quote inside
  an unquoted field, and text after the closing quote of a quoted field.
- `Option.REPALL_NL`: every line break is reported as a row end, blank lines
  included. Without it, blank lines are skipped.
- `Option.STRICT_FINI`: together with `STRICT`, `finish` raises `CsvError` if
  a quoted field was never closed.
- `Option.EMPTY_IS_NULL`: an empty, unquoted field is passed as `None`. An
  empty quoted field (`""`) is still passed as `b""`.
- `Option.APPEND_NULL`: keeps one byte of the field buffer's capacity in
  reserve. It has no effect on the fields that are passed to callbacks.

`parser.block_size` (default 128) is the step by which the capacity that
`parser.buffer_size()` reports grows. A block size of zero or less makes
`parse` raise `CsvError` with `ErrorType.TOO_BIG`.

### Errors

`CsvError` is a `RuntimeError` with two extra attributes:

- `error_type`: an `ErrorType`, one of `PARSE`, `NO_MEMORY`, `TOO_BIG` or
  `INVALID`;
- `bytes_parsed`: how many bytes of the current chunk were consumed before the
  error.

`strerror(status)` returns the text that describes a status code.

## Writing fields

```python
from csvstream.writer import quote_field, quoted_length, write_field

quote_field(b'say "hi"')        # b'"say ""hi"""'
quote_field(b"abc", ord("'"))   # b"'abc'"
quoted_length(b'say "hi"')      # 12
```

`write_field(stream, src, quote)` writes the quoted field to a binary stream
and returns the number of bytes written. For `None`, all three functions
produce nothing: `b""`, `0`, and no write.

These functions handle single fields only. Joining fields with delimiters and
ending rows is left to the caller.

## Command-line tools

- `csvfix INFILE OUTFILE`: reads CSV that may be malformed and writes it back
  with every field quoted, fields separated by commas and rows ended by a line
  feed. The two paths must differ. If an error occurs, the output file is
  removed.
- `csvinfo [-s] FILE...`: prints `FILE: N fields, M rows` for each file.
  `-s` turns on strict parsing for the files that follow it. A parse error
  stops the run with status 1.
- `csvtest`: reads CSV from standard input and writes it to standard output,
  formatted the same way as `csvfix` output.
- `csvvalid FILE...`: parses each file strictly. It prints
  `FILE well-formed`, or `FILE: malformed at byte N` where N is the 1-based
  position of the first offending byte.

The same logic is available as functions: `csvfix.fix_stream`,
`csvinfo.count_stream` (which returns a `Counts` with `fields` and `rows`),
`csvtest.normalize_stream` and `csvvalid.first_malformed_byte`.

## What it does not do

The parser works on bytes and does not decode text. It offers no
dictionary-style reader, and it does not type-convert fields.

## Running the tests

```
pip install csvstream[test]
pytest
```