import string

import pytest

from minibash.strings import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    split,
    strchr,
    strcmp,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
    tolower,
    toupper,
)


def test_split_drops_empty_words():
    assert split("::a::b:c:", ":") == ["a", "b", "c"]


def test_split_only_separators():
    assert split(":::", ":") == []
    assert split("", ":") == []


def test_split_join_round_trip():
    words = ["/usr/bin", "/bin", "/usr/local/bin"]
    assert split(":".join(words), ":") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("  \thello world\t ", " \t") == "hello world"


def test_strtrim_everything_and_nothing():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"


def test_substr_basic_and_clamped():
    assert substr("minishell", 4, 5) == "shell"
    assert substr("minishell", 4, 100) == "shell"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 3, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_found_within_limit():
    assert strnstr("echo hello", "hello", 10) == 5


def test_strnstr_match_must_end_within_limit():
    assert strnstr("echo hello", "hello", 9) is None


def test_strnstr_empty_needle():
    assert strnstr("", "", 0) == 0
    assert strnstr("abc", "", 0) == 0


def test_strcmp_equal():
    assert strcmp("echo", "echo") == 0


def test_strcmp_sign():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("abc", "ab") > 0
    assert strcmp("ab", "abc") < 0


def test_strcmp_antisymmetric():
    pairs = [("cd", "echo"), ("export", "exit"), ("", "x")]
    for a, b in pairs:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp_prefix_only():
    assert strncmp("exportX", "exportY", 6) == 0
    assert strncmp("exportX", "exportY", 7) < 0
    assert strncmp("a", "b", 0) == 0


def test_strncmp_matches_strcmp_with_large_limit():
    assert strncmp("abc", "abd", 100) == strcmp("abc", "abd")


def test_strchr_and_strrchr():
    text = "KEY=VAL=UE"
    assert strchr(text, "=") == 3
    assert strrchr(text, "=") == 7
    assert strchr(text, "#") is None
    assert strrchr(text, "#") is None


def test_nul_matches_end():
    assert strchr("abc", "\0") == 3
    assert strrchr("abc", "\0") == 3


def test_character_classes_against_string_module():
    for code in range(0, 200):
        ch = chr(code)
        assert isalpha(ch) == (ch in string.ascii_letters)
        assert isdigit(ch) == (ch in string.digits)
        assert isalnum(ch) == (ch in string.ascii_letters + string.digits)
        assert isascii(code) == (code < 128)


def test_isprint_bounds():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint("\n")
    assert not isprint(127)


def test_case_conversion():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("_") == "_"
    assert tolower("5") == "5"
    assert toupper(ord("q")) == ord("Q")


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert toupper(tolower(ch)) == ch