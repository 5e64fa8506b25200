import pytest

from ilmachine.text_functions import compare, count_words, describe, find_char, main


def test_count_words_source_example():
    assert count_words("  abc  absc\tcasd\ndasd\n") == 4


@pytest.mark.parametrize("text", ["", "   ", "\t\n \n"])
def test_count_words_blank(text):
    assert count_words(text) == 0


def test_count_words_only_three_separators():
    assert count_words("a\rb") == 1


def test_count_words_matches_joined_words():
    words = ["one", "two", "three", "four", "five"]
    assert count_words(" \t".join(words)) == len(words)


def test_find_char():
    assert find_char("asfbdksyb", "s") == 1
    assert find_char("asfbdksyb", "a") == 0


def test_find_char_missing():
    assert find_char("asfbdksyb", "z") == -1
    assert find_char("", "a") == -1


def test_find_char_rejects_long_needle():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_compare_prefix_is_smaller():
    assert compare("asdf", "asdf0") == -1
    assert compare("asdf0", "asdf") == 1


@pytest.mark.parametrize("pair", [("abc", "abd"), ("", "x"), ("zz", "z"), ("same", "same")])
def test_compare_is_antisymmetric(pair):
    first, second = pair
    assert compare(first, second) == -compare(second, first)


def test_compare_equal():
    assert compare("asdf", "asdf") == 0


def test_describe():
    assert describe(213123) == "int"
    assert describe("adsfa") == "adsfa"


@pytest.mark.parametrize("value", [1.5, None, True])
def test_describe_rejects_other_types(value):
    with pytest.raises(TypeError):
        describe(value)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Position of char 's' = 1\n" in out
    assert "Concatenated strings = abcde\n" in out
    assert "Copied string2 to string1 = dasd\n" in out
    assert "Compared strings = -1\n" in out
    assert out.endswith("adsfa\nint\n")