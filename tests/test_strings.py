import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.strings import (
    atoi,
    itoa,
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

plain_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=126))
letters = st.sampled_from("abcxyz")
small_text = st.text(alphabet="abcxyz", max_size=12)


# atoi / itoa

@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@given(st.integers())
def test_itoa_matches_decimal_format(n):
    assert itoa(n) == format(n, "d")


def test_itoa_zero_and_int_min():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


@given(st.integers(min_value=-(10**12), max_value=10**12), st.text(alphabet=" \t\n\r\f\v"))
def test_atoi_skips_leading_whitespace(n, space):
    assert atoi(space + str(n)) == n


@given(st.integers(min_value=0, max_value=10**9))
def test_atoi_stops_at_first_non_digit(n):
    assert atoi(f"{n}abc123") == n
    assert atoi(f"+{n}") == n
    assert atoi(f"-{n}x") == -n


@pytest.mark.parametrize("text", ["", "abc", "+-5", "-+5", "   ", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


# strlen

@given(plain_text)
def test_strlen_of_plain_text(s):
    assert strlen(s) == len(s)


@given(plain_text, plain_text)
def test_strlen_stops_at_nul(a, b):
    assert strlen(a + "\0" + b) == len(a)


# strchr / strrchr

@given(small_text, letters)
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[:index]
    else:
        assert index is None


@given(small_text, letters)
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[index + 1:]
    else:
        assert index is None


@given(small_text)
def test_nul_finds_terminator(s):
    assert strchr(s, 0) == len(s)
    assert strrchr(s, "\0") == len(s)


@given(small_text, letters)
def test_int_and_str_characters_agree(s, c):
    assert strchr(s, ord(c)) == strchr(s, c)
    assert strrchr(s, ord(c) + 256) == strrchr(s, c)


def test_strchr_rejects_long_string():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strrchr_rejects_non_character():
    with pytest.raises(TypeError):
        strrchr("abc", 1.5)


# strncmp

def _sign(x):
    return (x > 0) - (x < 0)


@given(small_text, small_text, st.integers(min_value=0, max_value=15))
def test_strncmp_orders_prefixes(a, b, n)  :
    pa, pb = a[:n], b[:n]
    expected = 0 if pa == pb else (1 if pa > pb else -1)
    assert strncmp(a, b, n) == expected


@given(small_text, small_text, st.integers(min_value=0, max_value=15))
def test_strncmp_is_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


@given(small_text, small_text)
def test_strncmp_zero_length_is_equal(a, b):
    assert strncmp(a, b, 0) == 0


def test_strncmp_uses_unsigned_order():
    assert strncmp("\x80", "a", 1) == 1


def test_strncmp_rejects_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr

@given(small_text, st.text(alphabet="abcxyz", min_size=1, max_size=3), st.integers(0, 15))
def test_strnstr_match_lies_within_bound(hay, needle, n):
    index = strnstr(hay, needle, n)
    if index is None:
        assert needle not in hay[:n]
    else:
        assert hay[index:index + len(needle)] == needle
        assert index + len(needle) <= n
        assert needle not in hay[:index + len(needle) - 1]


@given(small_text, st.integers(0, 15))
def test_strnstr_empty_needle_found_at_start(hay, n):
    assert strnstr(hay, "", n) == 0


def test_strnstr_bound_cuts_off_match():
    assert strnstr("lorem ipsum", "ipsum", 10) is None
    assert strnstr("lorem ipsum", "ipsum", 11) == 6


def test_strnstr_rejects_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "b", -2)


# strlcpy

@given(plain_text, st.integers(min_value=1, max_value=40))
def test_strlcpy_truncates_and_reports_source_length(src, size):
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert copied == src[:size - 1]
    assert len(copied) < size


@given(plain_text)
def test_strlcpy_zero_size_copies_nothing(src):
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


# strlcat

@given(plain_text, plain_text)
def test_strlcat_with_room_concatenates(dst, src):
    result, total = strlcat(dst, src, len(dst) + len(src) + 1)
    assert result == dst + src
    assert total == len(dst) + len(src)


@given(plain_text, plain_text, st.integers(min_value=0, max_value=40))
def test_strlcat_respects_size(dst, src, size):
    result, total = strlcat(dst, src, size)
    assert result.startswith(dst)
    assert src.startswith(result[len(dst):])
    if size == 0 or len(dst) > size:
        assert result == dst
        assert total == len(src) + size
    else:
        assert len(result) <= max(len(dst), size - 1)
        assert total == len(dst) + len(src)


def test_strlcat_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -3)