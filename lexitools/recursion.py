"""Recursive word exercises: line parsing, occurrence editing, permutations and subsequences."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .textutils import is_palindrome


def _parse_pair(line: str, separator: str) -> Optional[tuple[str, str]]:
    """Split ``line`` at the first ``separator``; the right side is its first word."""
    end = line.find(separator)
    if end <= 0:
        return None
    rest = line[end + 1:].split()
    if not rest:
        return None
    return line[:end], rest[0]


def parse_synonym_line(line: str) -> Optional[tuple[str, str]]:
    """Parse ``word=synonym``; ``None`` if either part is missing."""
    return _parse_pair(line, "=")


def parse_antonym_line(line: str) -> Optional[tuple[str, str]]:
    """Parse ``word#antonym``; ``None`` if either part is missing."""
    return _parse_pair(line, "#")


def _check_word(word: str) -> None:
    if not word:
        raise ValueError("the word to search for must not be empty")


def count_occurrences(lines: Iterable[str], word: str) -> int:
    """Count the non-overlapping occurrences of ``word`` in all ``lines``."""
    _check_word(word)
    return sum(line.count(word) for line in lines)


def _remove_all(line: str, word: str) -> str:
    # Each cut is searched for again from where it happened, so occurrences
    # joined by a cut further on are removed too.
    pos = 0
    while (index := line.find(word, pos)) != -1:
        line = line[:index] + line[index + len(word):]
        pos = index
    return line


def remove_occurrences(lines: Iterable[str], word: str) -> list[str]:
    """Return the lines with every occurrence of ``word`` cut out."""
    _check_word(word)
    return [_remove_all(line, word) for line in lines]


def _replace_all(line: str, word: str, replacement: str) -> str:
    if word == replacement:
        return line
    shrinking = len(word) >= len(replacement)
    pos = 0
    while (index := line.find(word, pos)) != -1:
        line = line[:index] + replacement + line[index + len(word):]
        pos = index if shrinking else index + len(replacement)
    return line


def replace_occurrences(lines: Iterable[str], word: str, replacement: str) -> list[str]:
    """Return the lines with every occurrence of ``word`` replaced by ``replacement``."""
    _check_word(word)
    return [_replace_all(line, word, replacement) for line in lines]


def permutations(word: str) -> Iterator[str]:
    """Yield every arrangement of the letters of ``word``, in swap order."""
    chars = list(word)

    def permute(index: int) -> Iterator[str]:
        if index == len(chars):
            yield "".join(chars)
            return
        for i in range(index, len(chars)):
            chars[index], chars[i] = chars[i], chars[index]
            yield from permute(index + 1)
            chars[index], chars[i] = chars[i], chars[index]

    return permute(0)


def subsequences(word: str) -> Iterator[str]:
    """Yield every subsequence of ``word``, those keeping the first letter first."""
    if not word:
        yield ""
        return
    head, tail = word[0], word[1:]
    for rest in subsequences(tail):
        yield head + rest
    yield from subsequences(tail)


def longest_common_subsequence(word1: str, word2: str) -> int:
    """Length of the longest subsequence common to both words."""
    previous = [0] * (len(word2) + 1)
    for a in word1:
        current = [0]
        for j, b in enumerate(word2):
            current.append(previous[j] + 1 if a == b else max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def distinct_subsequences(word: str) -> int:
    """Number of distinct subsequences of ``word``, the empty one included."""
    counts = [0] * (len(word) + 1)
    counts[len(word)] = 1
    for i in reversed(range(len(word))):
        total = 2 * counts[i + 1]
        repeat = word.find(word[i], i + 1)
        if repeat != -1:
            total -= counts[repeat + 1]
        counts[i] = total
    return counts[0]


def is_palindrome_word(word: str) -> bool:
    """Tell whether ``word`` reads the same in both directions."""
    return is_palindrome(word)