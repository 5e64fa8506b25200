import io

import pytest

from ilmachine.textio import INT64_MAX, INT64_MIN, TokenReader


def reader(text):
    return TokenReader(io.StringIO(text))


def test_reads_integers_across_lines():
    r = reader("1 -2\n  +3\t4\n")
    assert [r.read_int() for _ in range(4)] == [1, -2, 3, 4]
    assert r.read_int() is None


def test_empty_input_gives_none():
    assert reader("").read_int() is None


def test_non_number_is_not_consumed():
    r = reader("abc 5")
    assert r.read_int() is None
    assert r.read_int() is None


def test_number_prefix_leaves_rest():
    r = reader("12abc")
    assert r.read_int() == 12
    assert r.read_int() is None


def test_int64_limits_are_clamped():
    r = reader(f"{INT64_MIN} {INT64_MAX} 99999999999999999999")
    assert r.read_int() == INT64_MIN
    assert r.read_int() == INT64_MAX
    assert r.read_int() == INT64_MAX


def test_read_size_and_uint():
    r = reader("3 7")
    assert r.read_size() == 3
    assert r.read_uint() == 7


def test_read_size_at_end_raises_eof():
    with pytest.raises(EOFError):
        reader("   \n").read_size()


def test_read_size_rejects_negative():
    with pytest.raises(ValueError):
        reader("-4").read_size()


def test_read_uint_rejects_word():
    with pytest.raises(ValueError):
        reader("word").read_uint()