import pytest

from csvstream.options import Option, combine_options


@pytest.mark.parametrize(
    "bit, option",
    [
        (1, Option.STRICT),
        (2, Option.REPALL_NL),
        (4, Option.STRICT_FINI),
        (8, Option.APPEND_NULL),
        (16, Option.EMPTY_IS_NULL),
    ],
)
def test_flag_values_match_documented_bits(bit, option):
    combined = combine_options(bit)
    assert combined == option
    assert int(combined) == bit


def test_combine_none_is_empty():
    assert combine_options(None) == Option(0)


def test_combine_empty_list_is_empty():
    assert combine_options([]) == Option(0)


def test_combine_single_option():
    assert combine_options(Option.STRICT) is Option.STRICT


def test_combine_several_options():
    combined = combine_options([Option.STRICT, Option.STRICT_FINI])
    assert combined == Option.STRICT | Option.STRICT_FINI
    assert Option.STRICT in combined
    assert Option.STRICT_FINI in combined
    assert Option.REPALL_NL not in combined


def test_combine_is_idempotent():
    once = combine_options([Option.EMPTY_IS_NULL])
    twice = combine_options([Option.EMPTY_IS_NULL, Option.EMPTY_IS_NULL])
    assert once == twice


def test_combine_accepts_integers_and_generators():
    combined = combine_options(o for o in (int(Option.REPALL_NL), Option.APPEND_NULL))
    assert combined == Option.REPALL_NL | Option.APPEND_NULL


def test_combine_all_flags_round_trip():
    everything = combine_options(list(Option))
    assert combine_options(int(everything)) == everything


@pytest.mark.parametrize("bad", [32, -1, [Option.STRICT, 64]])
def test_unknown_bits_rejected(bad):
    with pytest.raises(ValueError):
        combine_options(bad)


@pytest.mark.parametrize("bad", [["strict"], [1.5], [True]])
def test_non_integer_rejected(bad):
    with pytest.raises(TypeError):
        combine_options(bad)