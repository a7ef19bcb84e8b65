import pytest

from lexitools.textutils import (
    Entry,
    MergedEntry,
    VowelType,
    centered_banner,
    count_syllables,
    count_vowels,
    format_entries,
    format_merged,
    is_palindrome,
    is_vowel,
    match_rate,
    vowel_type,
)


def test_banner_pinned_example():
    assert centered_banner("hi", 8) == "+------+\n|  hi  |\n+------+\n"


@pytest.mark.parametrize("text,width", [("word", 28), ("odd", 10), ("even", 11)])
def test_banner_lines_have_width(text, width):
    lines = centered_banner(text, width).splitlines()
    assert len(lines) == 3
    assert all(len(line) == width for line in lines)
    assert lines[0] == lines[2]
    assert lines[1].strip("| ") == text


def test_banner_keeps_long_text():
    text = "a" * 40
    middle = centered_banner(text, 10).splitlines()[1]
    assert middle == "|" + text + "|"


def test_count_vowels_all_vowels_any_case():
    assert count_vowels("aeiou") == len("aeiou")
    assert count_vowels("AEIOU") == count_vowels("aeiou")


def test_count_vowels_ignores_y_and_consonants():
    assert count_vowels("rhythm") == 0
    assert count_vowels("") == 0


@pytest.mark.parametrize("char", ["a", "E", "y", "Y", "u"])
def test_is_vowel_true(char):
    assert is_vowel(char) is True


@pytest.mark.parametrize("char", ["b", "Z", "1", " "])
def test_is_vowel_false(char):
    assert is_vowel(char) is False


@pytest.mark.parametrize("word", ["", "bcd", "a", "e"])
def test_count_syllables_at_least_one(word):
    assert count_syllables(word) == 1


def test_count_syllables_case_insensitive():
    assert count_syllables("BANANA") == count_syllables("banana")


def test_count_syllables_grouped_vowels_count_once():
    assert count_syllables("boat") == count_syllables("bat")


def test_match_rate_full_and_empty():
    assert match_rate("apple", "apple") == 100
    assert match_rate("anything", "") == 100
    assert match_rate("applesauce", "apple") == 100


def test_match_rate_no_common_prefix():
    assert match_rate("xyz", "abc") == 0


def test_match_rate_grows_with_prefix():
    target = "abcdefgh"
    rates = [match_rate(target[:n], target) for n in range(len(target) + 1)]
    assert rates == sorted(rates)
    assert rates[-1] == 100
    assert all(0 <= rate <= 100 for rate in rates)


@pytest.mark.parametrize("word", ["level", "racecar", "a", ""])
def test_is_palindrome_true(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["ab", "hello", "abca"])
def test_is_palindrome_false(word):
    assert is_palindrome(word) is False


@pytest.mark.parametrize(
    "word,expected",
    [
        ("rain", VowelType.DIPHTHONG),
        ("cloud", VowelType.DIPHTHONG),
        ("boy", VowelType.DIPHTHONG),
        ("cake", VowelType.LONG),
        ("cat", VowelType.SHORT),
        ("e", VowelType.SHORT),
        ("coine", VowelType.DIPHTHONG),
    ],
)
def test_vowel_type(word, expected):
    assert vowel_type(word) is expected


def test_entry_create_computes_counts():
    entry = Entry.create("happy", "joyful")
    assert entry.word == "happy"
    assert entry.related == "joyful"
    assert entry.char_count == len("happy")
    assert entry.vowel_count == count_vowels("happy")


def test_merged_entry_create_computes_counts():
    entry = MergedEntry.create("quick", "fast", "slow")
    assert (entry.word, entry.synonym, entry.antonym) == ("quick", "fast", "slow")
    assert entry.char_count == len("quick")
    assert entry.vowel_count == count_vowels("quick")


def test_format_entries_pinned_line():
    text = format_entries([Entry.create("happy", "joyful")], 0)
    assert text == "1) happy = joyful (Length = 5, Vowels Count 1)\n"


def test_format_entries_antonym_sign_and_numbering():
    entries = [Entry.create("up", "down"), Entry.create("hot", "cold")]
    lines = format_entries(entries, 1).splitlines()
    assert len(lines) == len(entries)
    assert lines[0].startswith("1) up # down ")
    assert lines[1].startswith("2) hot # cold ")


def test_format_entries_empty():
    assert format_entries([], 0) == "Empty List!\n"


def test_format_merged():
    entries = [MergedEntry.create("big", "large", "small")]
    text = format_merged(entries)
    assert text.startswith("1) big = large # small(Length = ")
    assert text.endswith("\n")
    assert format_merged([]) == "Empty List!\n"