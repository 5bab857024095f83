import pytest

from fillit.strbuild import (
    strcat,
    striter,
    striteri,
    strjoin,
    strlcat,
    strmap,
    strmapi,
    strncat,
    strncpy,
    strsplit,
    strsub,
    strtrim,
)


@pytest.mark.parametrize("src,n", [("hello", 3), ("hi", 6), ("abc", 0), ("abc", 3)])
def test_strncpy_length_and_padding(src, n):
    result = strncpy(src, n)
    assert len(result) == n
    copied = min(n, len(src))
    assert result[:copied] == src[:copied]
    assert set(result[copied:]) <= {"\0"}


def test_strncpy_stops_at_nul():
    result = strncpy("ab\0cd", 4)
    assert result[:2] == "ab"
    assert result[2:] == "\0\0"


def test_strncpy_negative_length():
    with pytest.raises(ValueError):
        strncpy("abc", -1)


def test_strcat_concatenates():
    assert strcat("foo", "bar") == "foo" + "bar"
    assert strcat("", "bar") == "bar"
    assert strcat("foo", "") == "foo"


def test_strcat_ignores_after_nul():
    assert strcat("foo\0xx", "bar\0yy") == "foo" + "bar"


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10])
def test_strncat_limits_appended(n):
    dest, src = "abc", "xyz"
    result = strncat(dest, src, n)
    assert result == dest + src[:n]
    assert len(result) <= len(dest) + n


def test_strncat_negative_appends_nothing():
    assert strncat("abc", "xyz", -2) == "abc"


@pytest.mark.parametrize("size", [4, 5, 6, 7, 8, 20])
def test_strlcat_truncates_and_reports_total(size):
    dest, src = "abcd", "efgh"
    result, total = strlcat(dest, src, size)
    assert total == len(dest) + len(src)
    assert result.startswith(dest)
    assert len(result) <= max(size - 1, len(dest))
    assert (dest + src).startswith(result)


def test_strlcat_large_buffer_copies_all():
    result, total = strlcat("abc", "def", 100)
    assert result == "abc" + "def"
    assert total == len(result)


def test_strlcat_zero_size():
    result, total = strlcat("abc", "defg", 0)
    assert result == "abc"
    assert total == len("defg")


def test_strlcat_size_smaller_than_dest():
    result, total = strlcat("abcdef", "gh", 3)
    assert result == "abcdef"
    assert total == 3 + len("gh")


def test_strsub_takes_slice():
    s = "hello world"
    assert strsub(s, 6, 5) == s[6:11]
    assert strsub(s, 0, 0) == ""
    assert strsub(None, 0, 3) is None


def test_strsub_out_of_range():
    with pytest.raises(IndexError):
        strsub("short", 3, 5)


def test_strjoin():
    assert strjoin("where is my ", "malloc ???") == "where is my " + "malloc ???"
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


@pytest.mark.parametrize(
    "text,core",
    [
        ("  \t hello world \n", "hello world"),
        ("no-trim", "no-trim"),
        ("\n\n\tx\t", "x"),
    ],
)
def test_strtrim(text, core):
    assert strtrim(text) == core


def test_strtrim_only_blanks_and_none():
    assert strtrim(" \t\n \n") == ""
    assert strtrim(None) is None


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\vab\f") == "\vab\f"


def test_strsplit_drops_empty_pieces():
    assert strsplit("*hello*fellow***students*", "*") == ["hello", "fellow", "students"]
    assert strsplit("****", "*") == []
    assert strsplit("", "*") == []
    assert strsplit(None, "*") is None


def test_strsplit_pieces_rejoin_without_separator():
    text = "a,,bb,ccc,"
    pieces = strsplit(text, ",")
    assert "".join(pieces) == text.replace(",", "")
    assert all("," not in p and p for p in pieces)


def test_strsplit_rejects_long_separator():
    with pytest.raises(ValueError):
        strsplit("a,b", ",,")


def test_strmap_applies_function():
    text = "Hello"
    assert strmap(text, str.upper) == text.upper()
    assert strmap(None, str.upper) is None


def test_strmap_requires_single_character():
    with pytest.raises(ValueError):
        strmap("ab", lambda ch: ch * 2)


def test_strmapi_passes_index():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch

    text = "abc"
    assert strmapi(text, record) == text
    assert seen == list(enumerate(text))


def test_strmapi_alternating_case():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_striter_visits_every_character():
    seen = []
    text = "xyz"
    assert striter(text, seen.append) == text
    assert seen == list(text)


def test_striter_replaces_characters():
    text = "a.b.c"
    assert striter(text, lambda ch: "#" if ch == "." else None) == text.replace(".", "#")


def test_striter_without_function_and_none():
    assert striter("abc", None) == "abc"
    assert striter(None, lambda ch: ch) is None


def test_striteri_index_and_replacement():
    text = "abcdef"
    result = striteri(text, lambda i, ch: "_" if i >= 3 else None)
    assert result[:3] == text[:3]
    assert set(result[3:]) == {"_"}
    assert len(result) == len(text)


def test_striteri_rejects_bad_return():
    with pytest.raises(ValueError):
        striteri("ab", lambda i, ch: "")
    assert striteri(None, None) is None