import string

import pytest

from fractol.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ASCII)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ASCII)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")


def test_int_codes_accepted():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_alpha(ord("7"))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert not is_print(31)
    assert is_print(32)
    assert is_print(126)
    assert not is_print(127)


@pytest.mark.parametrize("c", ASCII)
def test_is_print_matches_printable_without_whitespace_controls(c):
    expected = c in string.printable and c not in "\t\n\r\x0b\x0c"
    assert is_print(c) == expected


@pytest.mark.parametrize("c", string.ascii_lowercase)
def test_to_upper_letters(c):
    assert to_upper(c) == c.upper()
    assert to_lower(to_upper(c)) == c


@pytest.mark.parametrize("c", string.ascii_uppercase)
def test_to_lower_letters(c):
    assert to_lower(c) == c.lower()
    assert to_upper(to_lower(c)) == c


@pytest.mark.parametrize("c", string.digits + string.punctuation + " é")
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_conversion_keeps_int_form():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)