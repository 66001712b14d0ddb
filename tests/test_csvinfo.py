import io

import pytest

from csvstream.csvinfo import Counts, count_stream, main
from csvstream.errors import CsvError, ErrorType
from csvstream.options import Option
from csvstream.parser import CsvParser, parse_rows

SAMPLES = [
    b" 1,2 ,  3         ,4,5\r\n",
    b",,,,,\n",
    b'1, 2, 3,\n\r\n  "4", \r,',
    b"y" * 2500 + b"\n" + b"a,b,c\n" * 400,
]


def _expected(data: bytes) -> Counts:
    rows = parse_rows(data)
    return Counts(fields=sum(len(r) for r in rows), rows=len(rows))


@pytest.mark.parametrize("data", SAMPLES)
def test_counts_match_parsed_rows(data):
    assert count_stream(io.BytesIO(data)) == _expected(data)


def test_empty_stream():
    assert count_stream(io.BytesIO(b"")) == Counts(0, 0)


def test_parser_is_reusable_between_streams():
    parser = CsvParser()
    first = count_stream(io.BytesIO(SAMPLES[0]), parser)
    second = count_stream(io.BytesIO(SAMPLES[2]), parser)
    assert first == _expected(SAMPLES[0])
    assert second == _expected(SAMPLES[2])


def test_strict_parser_raises_on_malformed_data():
    parser = CsvParser(options=Option.STRICT)
    with pytest.raises(CsvError) as info:
        count_stream(io.BytesIO(b'a"b\n'), parser)
    assert info.value.error_type == ErrorType.PARSE


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_reports_counts(tmp_path, capsys):
    path = tmp_path / "data.csv"
    path.write_bytes(SAMPLES[2])
    expected = _expected(SAMPLES[2])
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == f"{path}: {expected.fields} fields, {expected.rows} rows\n"


def test_main_skips_missing_file(tmp_path, capsys):
    good = tmp_path / "good.csv"
    good.write_bytes(SAMPLES[1])
    missing = tmp_path / "missing.csv"
    assert main([str(missing), str(good)]) == 0
    captured = capsys.readouterr()
    assert "Failed to open" in captured.err
    assert captured.out.startswith(f"{good}: ")


def test_main_strict_flag_fails_on_malformed(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_bytes(b'a"b\n')
    assert main(["-s", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_lenient_accepts_malformed(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_bytes(b'a"b\n')
    expected = _expected(b'a"b\n')
    assert main([str(path)]) == 0
    assert f"{expected.fields} fields, {expected.rows} rows" in capsys.readouterr().out