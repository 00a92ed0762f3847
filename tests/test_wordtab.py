import pytest

from xpmkit.wordtab import find_substring, find_unquoted, split_words


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_other_whitespace_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_find_substring_locates_first_occurrence():
    text = "hello, yellow fellow"
    pos = find_substring(text, "llo", len(text))
    assert text[pos:pos + 3] == "llo"
    assert "llo" not in text[:pos + 2]


def test_find_substring_missing():
    assert find_substring("abcdef", "xyz", 6) == -1


def test_find_substring_needle_longer_than_limit():
    assert find_substring("abcdef", "cde", 2) == -1


def test_find_substring_empty_needle_rejected():
    with pytest.raises(ValueError):
        find_substring("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = 'x "/*" y /* z'
    pos = find_unquoted(text, "/*", len(text))
    assert pos == text.rindex("/*")


def test_find_unquoted_only_quoted_occurrence():
    text = 'a "//" b'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_matches_plain_find_without_quotes():
    text = "some // text // here"
    assert find_unquoted(text, "//", len(text)) == text.find("//")


def test_find_unquoted_limit():
    assert find_unquoted("ab/*", "/*", 1) == -1


def test_find_unquoted_empty_needle_rejected():
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)