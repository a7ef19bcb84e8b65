import itertools
from math import factorial

import pytest

from lexitools.recursion import (
    count_occurrences,
    distinct_subsequences,
    is_palindrome_word,
    longest_common_subsequence,
    parse_antonym_line,
    parse_synonym_line,
    permutations,
    remove_occurrences,
    replace_occurrences,
    subsequences,
)

TEXT = ["hello world hello everyone\n", "say hello\n"]


def test_parse_synonym_line():
    assert parse_synonym_line("happy=glad") == ("happy", "glad")
    assert parse_synonym_line("happy= glad more") == ("happy", "glad")


@pytest.mark.parametrize("line", ["happy", "=glad", "happy=", "happy=   \n"])
def test_parse_synonym_line_incomplete(line):
    assert parse_synonym_line(line) is None


def test_parse_antonym_line():
    assert parse_antonym_line("happy=glad#sad\n") == ("happy=glad", "sad")
    assert parse_antonym_line("happy=glad") is None


def test_count_occurrences_source_example():
    assert count_occurrences(["hello world hello everyone"], "hello") == 2


def test_count_occurrences_sums_lines():
    total = count_occurrences(TEXT, "hello")
    assert total == sum(count_occurrences([line], "hello") for line in TEXT)


def test_count_occurrences_empty_word():
    with pytest.raises(ValueError):
        count_occurrences(TEXT, "")


def test_remove_occurrences_clears_word():
    result = remove_occurrences(TEXT, "hello")
    assert len(result) == len(TEXT)
    assert count_occurrences(result, "hello") == 0
    assert "world" in result[0]


def test_remove_occurrences_joined_before_cut_stays():
    assert remove_occurrences(["hehellollo"], "hello") == ["hello"]


def test_remove_occurrences_empty_word():
    with pytest.raises(ValueError):
        remove_occurrences(TEXT, "")


@pytest.mark.parametrize("word,replacement", [("world", "earth"), ("hello", "hi"), ("say", "announce")])
def test_replace_round_trip(word, replacement):
    replaced = replace_occurrences(TEXT, word, replacement)
    assert count_occurrences(replaced, word) == 0
    assert count_occurrences(replaced, replacement) == count_occurrences(TEXT, word)
    assert replace_occurrences(replaced, replacement, word) == TEXT


def test_replace_with_same_word_is_identity():
    assert replace_occurrences(TEXT, "hello", "hello") == TEXT


def test_replace_empty_word():
    with pytest.raises(ValueError):
        replace_occurrences(TEXT, "", "x")


@pytest.mark.parametrize("word", ["abc", "abcd", "aab"])
def test_permutations_match_stdlib(word):
    result = list(permutations(word))
    assert len(result) == factorial(len(word))
    assert result[0] == word
    assert sorted(result) == sorted("".join(p) for p in itertools.permutations(word))


def test_permutations_of_empty_word():
    assert list(permutations("")) == [""]


@pytest.mark.parametrize("word", ["abc", "abcd"])
def test_subsequences(word):
    result = list(subsequences(word))
    assert len(result) == 2 ** len(word)
    assert result[0] == word
    assert result[-1] == ""
    expected = {
        "".join(c)
        for size in range(len(word) + 1)
        for c in itertools.combinations(word, size)
    }
    assert set(result) == expected


def test_longest_common_subsequence_source_example():
    assert longest_common_subsequence("abcde", "ace") == 3


@pytest.mark.parametrize("a,b", [("abcde", "ace"), ("kitten", "sitting"), ("xyz", "")])
def test_longest_common_subsequence_invariants(a, b):
    value = longest_common_subsequence(a, b)
    assert value == longest_common_subsequence(b, a)
    assert value <= min(len(a), len(b))
    assert longest_common_subsequence(a, a) == len(a)
    assert longest_common_subsequence(a, "") == 0


@pytest.mark.parametrize("word", ["", "abc", "aab", "banana", "abab"])
def test_distinct_subsequences_counts_unique(word):
    assert distinct_subsequences(word) == len(set(subsequences(word)))


@pytest.mark.parametrize("word,expected", [("racecar", True), ("a", True), ("", True), ("ab", False)])
def test_is_palindrome_word(word, expected):
    assert is_palindrome_word(word) is expected