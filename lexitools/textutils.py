"""Word records, vowel and syllable helpers, and plain-text formatting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

VOWELS = frozenset("aeiou")
DIPHTHONGS = ("ai", "au", "ei", "oi", "ou", "ow", "oy")


class VowelType(IntEnum):
    """Rough pronunciation class of a word's vowels."""

    SHORT = 0
    LONG = 1
    DIPHTHONG = 2
    UNKNOWN = 3


@dataclass
class Entry:
    """A word paired with one related word (a synonym or an antonym)."""

    word: str
    related: str
    char_count: int
    vowel_count: int

    @classmethod
    def create(cls, word: str, related: str) -> "Entry":
        """Build an entry, computing the length and vowel count of ``word``."""
        return cls(word, related, len(word), count_vowels(word))


@dataclass
class MergedEntry:
    """A word together with its synonym and its antonym."""

    word: str
    synonym: str
    antonym: str
    char_count: int
    vowel_count: int

    @classmethod
    def create(cls, word: str, synonym: str, antonym: str) -> "MergedEntry":
        """Build a merged entry, computing the length and vowel count of ``word``."""
        return cls(word, synonym, antonym, len(word), count_vowels(word))


def centered_banner(text: str, width: int) -> str:
    """Return ``text`` centred inside a three-line box ``width`` characters wide."""
    inner = width - 2
    length = min(len(text), inner)
    padding, extra = divmod(inner - length, 2)
    border = "+" + "-" * inner + "+"
    middle = "|" + " " * padding + text + " " * (padding + extra) + "|"
    return f"{border}\n{middle}\n{border}\n"


def count_vowels(word: str) -> int:
    """Count the letters a, e, i, o, u in ``word``, ignoring case."""
    return sum(1 for char in word if char.lower() in VOWELS)


def is_vowel(char: str) -> bool:
    """Tell whether ``char`` is a vowel for syllable counting (y included)."""
    return char.lower() in "aeiouy" and len(char) == 1


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in ``word``; never less than one."""
    count = 0
    previous_was_vowel = False
    for char in word:
        if is_vowel(char):
            if not previous_was_vowel:
                count += 1
                previous_was_vowel = True
        else:
            previous_was_vowel = False
    if word and word[-1].lower() == "e" and count > 1:
        count -= 1
    return max(count, 1)


def match_rate(word1: str, word2: str) -> int:
    """Percentage of ``word2`` matched by the common prefix with ``word1``."""
    if not word2:
        return 100
    common = 0
    for a, b in zip(word1, word2):
        if a != b:
            break
        common += 1
    if common == len(word2):
        return 100
    return common * 100 // len(word2)


def is_palindrome(word: str) -> bool:
    """Tell whether ``word`` reads the same in both directions."""
    return word == word[::-1]


def vowel_type(word: str) -> VowelType:
    """Classify ``word`` as having a diphthong, a long vowel or a short vowel."""
    if any(pair in word for pair in DIPHTHONGS):
        return VowelType.DIPHTHONG
    if len(word) >= 2 and word.endswith("e"):
        return VowelType.LONG
    return VowelType.SHORT


def format_entries(entries: Iterable[Entry], option: int) -> str:
    """Render numbered entries; option 0 marks synonyms with '=', otherwise '#'."""
    sign = "=" if option == 0 else "#"
    lines = [
        f"{number}) {entry.word} {sign} {entry.related} "
        f"(Length = {entry.char_count}, Vowels Count {entry.vowel_count})"
        for number, entry in enumerate(entries, start=1)
    ]
    if not lines:
        return "Empty List!\n"
    return "\n".join(lines) + "\n"


def format_merged(entries: Iterable[MergedEntry]) -> str:
    """Render numbered merged entries as 'word = synonym # antonym' lines."""
    lines = [
        f"{number}) {entry.word} = {entry.synonym} # {entry.antonym}"
        f"(Length = {entry.char_count}, Vowels Count {entry.vowel_count})"
        for number, entry in enumerate(entries, start=1)
    ]
    if not lines:
        return "Empty List!\n"
    return "\n".join(lines) + "\n"