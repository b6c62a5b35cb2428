import pytest

from minishell.strutil import (
    atoi,
    itoa,
    split,
    strcmp,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


def test_atoi_skips_space_and_reads_sign():
    assert atoi("  \t-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_stops_at_second_sign():
    assert atoi("+-5") == 0


def test_atoi_wraps_like_int():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("number", [0, 5459, -7, 2147483647, -2147483648])
def test_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_pieces():
    assert split("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]
    assert split("", ":") == []
    assert split(":::", ":") == []


def test_split_join_invariant():
    text = "a:b:c"
    assert ":".join(split(text, ":")) == text


def test_strtrim():
    assert strtrim("  xx hello xx  ", " x") == "hello"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("keep", "") == "keep"


def test_substr():
    assert substr("minishell", 4, 5) == "shell"
    assert substr("minishell", 4, 100) == "shell"
    assert substr("minishell", 20, 3) == ""


def test_strnstr():
    big = "this is the way by the way."
    assert strnstr(big, "the way", len(big)) == "the way by the way."
    assert strnstr(big, "the way", 5) is None
    assert strnstr(big, "", 0) == big


def test_strlcpy():
    assert strlcpy("abc", 0) == ("", 3)
    assert strlcpy("abc", 2) == ("a", 3)
    assert strlcpy("abc", 10) == ("abc", 3)


def test_strlcat():
    assert strlcat("Hello", " World!", 20) == ("Hello World!", 12)
    assert strlcat("Hello", " World!", 8) == ("Hello W", 12)
    assert strlcat("Hello", " World!", 3) == ("Hello", 10)


def test_strcmp_order():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") < 0
    assert strcmp("abc", "ab") > 0


def test_strcmp_antisymmetric():
    for a, b in [("PATH", "HOME"), ("x", ""), ("a1", "a_")]:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0
    assert strncmp("anything", "else", 0) == 0
    assert strncmp("ab", "abc", 5) < 0