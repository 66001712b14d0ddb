import io

import pytest

from csvstream.csvvalid import first_malformed_byte, main
from csvstream.errors import CsvError, ErrorType
from csvstream.options import Option
from csvstream.parser import CsvParser

WELL_FORMED = [
    b" 1,2 ,  3         ,4,5\r\n",
    b'"""a,b""",," """" ",""""" "," """"",""""""',
    b'"I call our world Flatland,\nnot because we call it so"',
    b"",
]


@pytest.mark.parametrize("data", WELL_FORMED)
def test_well_formed_data(data):
    assert first_malformed_byte(io.BytesIO(data)) is None


def test_quote_in_unquoted_field():
    assert first_malformed_byte(io.BytesIO(b'a"b')) == 2


@pytest.mark.parametrize(
    "data",
    [b'" "" " " "" "', b'"abc"x', b'"ab" "', b"x" * 2000 + b'"'],
)
def test_position_points_at_offending_quote_or_byte(data):
    pos = first_malformed_byte(io.BytesIO(data))
    assert pos is not None
    assert 1 <= pos <= len(data)
    assert first_malformed_byte(io.BytesIO(data[: pos - 1])) is None


def test_offset_across_chunk_boundary():
    data = b"x" * 2000 + b'"'
    assert first_malformed_byte(io.BytesIO(data)) == len(data)


def test_parser_reusable_after_error():
    parser = CsvParser(options=Option.STRICT)
    assert first_malformed_byte(io.BytesIO(b'a"b'), parser) is not None
    assert first_malformed_byte(io.BytesIO(WELL_FORMED[0]), parser) is None


def test_non_parse_error_propagates():
    parser = CsvParser(options=Option.STRICT)
    parser.block_size = 0
    with pytest.raises(CsvError) as info:
        first_malformed_byte(io.BytesIO(b"abc"), parser)
    assert info.value.error_type == ErrorType.TOO_BIG


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_reports_each_file(tmp_path, capsys):
    good = tmp_path / "good.csv"
    bad = tmp_path / "bad.csv"
    good.write_bytes(WELL_FORMED[1])
    bad.write_bytes(b'a"b\n')
    expected = first_malformed_byte(io.BytesIO(b'a"b\n'))
    assert main([str(good), str(bad)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"{good} well-formed", f"{bad}: malformed at byte {expected}"]


def test_main_skips_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.csv"
    good = tmp_path / "good.csv"
    good.write_bytes(WELL_FORMED[0])
    assert main([str(missing), str(good)]) == 0
    captured = capsys.readouterr()
    assert "skipping" in captured.err
    assert captured.out == f"{good} well-formed\n"