import string

import pytest

from ftlib import ctype

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_classes_match_ascii_sets(ch):
    assert ctype.isalpha(ch) == (ch in string.ascii_letters)
    assert ctype.isdigit(ch) == (ch in string.digits)
    assert ctype.isalnum(ch) == (ch in string.ascii_letters + string.digits)
    assert ctype.isxdigit(ch) == (ch in string.hexdigits)
    assert ctype.isupper(ch) == (ch in string.ascii_uppercase)
    assert ctype.islower(ch) == (ch in string.ascii_lowercase)
    assert ctype.isspace(ch) == (ch in string.whitespace)
    assert ctype.isprint(ch) == ch.isprintable()
    assert ctype.isgraph(ch) == (ch.isprintable() and ch != " ")


def test_int_and_str_agree():
    for code in range(128):
        assert ctype.isalpha(code) == ctype.isalpha(chr(code))
        assert ctype.isgraph(code) == ctype.isgraph(chr(code))


def test_isascii_bounds():
    assert ctype.isascii(0)
    assert ctype.isascii(127)
    assert not ctype.isascii(128)
    assert not ctype.isascii(-1)
    assert not ctype.isascii("é")


def test_non_ascii_letters_are_not_alpha():
    assert not ctype.isalpha("é")
    assert not ctype.isdigit("٣")


@pytest.mark.parametrize("ch", ASCII)
def test_case_conversion_matches_str(ch):
    assert ctype.toupper(ch) == ch.upper()
    assert ctype.tolower(ch) == ch.lower()


def test_case_conversion_keeps_int_type():
    assert ctype.toupper(ord("q")) == ord("Q")
    assert ctype.tolower(ord("Q")) == ord("q")
    assert ctype.toupper(ord("5")) == ord("5")


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        assert ctype.tolower(ctype.toupper(ch)) == ch


def test_non_ascii_unchanged():
    assert ctype.toupper("é") == "é"
    assert ctype.tolower(300) == 300


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        ctype.isalpha("ab")
    with pytest.raises(ValueError):
        ctype.toupper("")