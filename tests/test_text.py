import pytest

from xpmkit.text import (
    bounded_concat,
    bounded_copy,
    compare,
    compare_n,
    find_bounded,
    find_char,
    iter_indexed,
    join,
    map_indexed,
    rfind_char,
    split,
    substring,
    trim,
)


def test_find_char_first_occurrence():
    text = "hello world"
    index = find_char(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_find_char_missing():
    assert find_char("abc", "z") == -1


def test_find_char_nul_is_end():
    assert find_char("abc", "\0") == len("abc")


def test_find_char_rejects_long_needle():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_rfind_char_last_occurrence():
    text = "hello world"
    index = rfind_char(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_rfind_char_missing_and_nul():
    assert rfind_char("abc", "q") == -1
    assert rfind_char("abc", "\0") == len("abc")


def test_compare_equal():
    assert compare("same", "same") == 0
    assert compare("", "") == 0


def test_compare_sign():
    assert compare("abc", "abd") < 0
    assert compare("abd", "abc") > 0
    assert compare("abc", "abd") == -compare("abd", "abc")


def test_compare_prefix_uses_terminator():
    assert compare("abc", "ab") == ord("c")
    assert compare("ab", "abc") == -ord("c")


def test_compare_n_limits_length():
    assert compare_n("abcX", "abcY", 3) == 0
    assert compare_n("abcX", "abcY", 4) < 0
    assert compare_n("x", "y", 0) == 0


def test_compare_n_negative():
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)


def test_bounded_copy_fits():
    assert bounded_copy("hello", 10) == ("hello", len("hello"))


def test_bounded_copy_truncates():
    copied, total = bounded_copy("hello", 3)
    assert copied == "he"
    assert total == len("hello")


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_concat_fits():
    result, total = bounded_concat("foo", "bar", 10)
    assert result == "foobar"
    assert total == len("foobar")


def test_bounded_concat_truncates():
    result, total = bounded_concat("foo", "bar", 5)
    assert result == "foob"
    assert len(result) == 5 - 1
    assert total == len("foobar")


def test_bounded_concat_small_buffer_keeps_dst():
    result, total = bounded_concat("foobar", "xy", 3)
    assert result == "foobar"
    assert total == 3 + len("xy")


def test_find_bounded():
    assert find_bounded("lorem ipsum", "ipsum", 11) == "lorem ipsum".find("ipsum")
    assert find_bounded("lorem ipsum", "ipsum", 10) == -1
    assert find_bounded("abc", "", 0) == 0
    assert find_bounded("abc", "z", 3) == -1


def test_substring():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 2, 100) == "llo"
    assert substring("hello", 10, 2) == ""
    assert substring("hello", 5, 2) == ""


def test_substring_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


def test_join():
    assert join("foo", "bar") == "foobar"
    assert join(None, "bar") == "bar"
    assert join("foo", None) == "foo"


def test_trim():
    assert trim("xxhixx", "x") == "hi"
    assert trim("  a b  ", " ") == "a b"
    assert trim("abc", "") == "abc"
    assert trim("aaaa", "a") == ""


def test_split():
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("one", ",") == ["one"]


def test_split_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_map_indexed():
    assert map_indexed("abc", lambda i, c: c.upper()) == "ABC"
    assert map_indexed("abc", lambda i, c: str(i)) == "012"
    assert map_indexed("", lambda i, c: c) == ""


def test_iter_indexed_calls_in_order():
    seen = []
    result = iter_indexed("xyz", lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert result == "xyz"


def test_iter_indexed_replaces():
    result = iter_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else None)
    assert result == "AbCd"