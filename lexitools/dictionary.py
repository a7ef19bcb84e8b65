"""Synonym/antonym dictionary files and the word lists read from them.

A dictionary file holds one entry per line in the form ``word=synonym#antonym``.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .textutils import (
    Entry,
    MergedEntry,
    VowelType,
    centered_banner,
    count_syllables,
    is_palindrome,
    match_rate,
    vowel_type,
)

PathLike = Union[str, "os.PathLike[str]"]

FIELD_LIMIT = 49
BANNER_WIDTH = 28
SEPARATOR = "----------------------------\n"
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _scan_until(
    text: str, pos: int, stops: str, limit: Optional[int] = None
) -> Optional[tuple[str, int]]:
    """Read characters not in ``stops``; ``None`` if none could be read."""
    end = pos
    while end < len(text) and text[end] not in stops:
        if limit is not None and end - pos >= limit:
            break
        end += 1
    if end == pos:
        return None
    return text[pos:end], end


def _parse_synonym_entry(line: str) -> Optional[tuple[str, str]]:
    got = _scan_until(line, 0, "=", FIELD_LIMIT)
    if got is None:
        return None
    word, pos = got
    pos = _skip_whitespace(line, pos)
    if pos >= len(line) or line[pos] != "=":
        return None
    pos = _skip_whitespace(line, pos + 1)
    got = _scan_until(line, pos, "#", FIELD_LIMIT)
    if got is None:
        return None
    return word, got[0]


def _parse_antonym_entry(line: str) -> Optional[tuple[str, str]]:
    pos = _skip_whitespace(line, 0)
    got = _scan_until(line, pos, "=", FIELD_LIMIT)
    if got is None:
        return None
    word, pos = got
    if pos >= len(line) or line[pos] != "=":
        return None
    got = _scan_until(line, pos + 1, "#")
    if got is None:
        return None
    pos = got[1]
    if pos >= len(line) or line[pos] != "#":
        return None
    got = _scan_until(line, pos + 1, "\n", FIELD_LIMIT)
    if got is None:
        return None
    return word, got[0]


def _leading_field(line: str) -> Optional[str]:
    got = _scan_until(line, 0, "=", FIELD_LIMIT)
    return None if got is None else got[0]


def _read_entries(
    path: PathLike, parse: Callable[[str], Optional[tuple[str, str]]]
) -> list[Entry]:
    with open(path, encoding="utf-8") as handle:
        return [
            Entry.create(*parsed)
            for parsed in map(parse, handle)
            if parsed is not None
        ]


def _rewrite(path: PathLike, transform: Callable[[str], Optional[str]]) -> None:
    """Rewrite ``path`` line by line; a ``None`` from ``transform`` drops the line."""
    path = Path(path)
    with open(path, encoding="utf-8") as source:
        lines = source.readlines()
    fd, temp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as target:
            for line in lines:
                new_line = transform(line)
                if new_line is not None:
                    target.write(new_line)
        os.replace(temp_name, path)
    except BaseException:
        if os.path.exists(temp_name):
            os.remove(temp_name)
        raise


def read_synonyms(path: PathLike) -> list[Entry]:
    """Read ``word=synonym`` pairs from a dictionary file."""
    return _read_entries(path, _parse_synonym_entry)


def read_antonyms(path: PathLike) -> list[Entry]:
    """Read ``word ... #antonym`` pairs from a dictionary file."""
    return _read_entries(path, _parse_antonym_entry)


def _first(entries: Iterable[Entry], predicate: Callable[[Entry], bool]) -> Optional[Entry]:
    return next((entry for entry in entries if predicate(entry)), None)


def word_info(synonyms: Iterable[Entry], antonyms: Iterable[Entry], word: str) -> str:
    """Describe ``word``: its length, vowel count, synonym and antonym."""
    parts = [centered_banner(word, BANNER_WIDTH)]
    syn = _first(synonyms, lambda entry: entry.word == word)
    if syn is not None:
        parts.append(
            f"Char Count = {syn.char_count}\nVowels Count = {syn.vowel_count}\n"
            f"Synonym = {syn.related}\n"
        )
    else:
        parts.append("Word not found in sysnonyms dictionary!\n")
    ant = _first(antonyms, lambda entry: entry.word == word)
    if ant is not None:
        if syn is not None:
            parts.append(f"Antonym = {ant.related}\n")
        else:
            parts.append(
                f"Antonym = {ant.related}\nChar Count = {ant.char_count}\n"
                f"Vowels Count = {ant.vowel_count}\n"
            )
    else:
        parts.append("Word Not found in antonyms dictionary! \n")
    parts.append(SEPARATOR)
    return "".join(parts)


def related_info(synonyms: Iterable[Entry], antonyms: Iterable[Entry], related: str) -> str:
    """Describe which word ``related`` is a synonym or an antonym of."""
    parts = [centered_banner(related, BANNER_WIDTH)]
    syn = _first(synonyms, lambda entry: entry.related == related)
    if syn is not None:
        parts.append(
            f"Is a synonym for : {syn.word}\nChars Count = {syn.char_count}\n"
            f"Vowels Count = {syn.vowel_count}\n"
        )
    else:
        ant = _first(antonyms, lambda entry: entry.related == related)
        if ant is not None:
            parts.append(
                f"Is an antonym for : {ant.word}\nChars Count = {ant.char_count}\n"
                f"Vowels Count = {ant.vowel_count}\n"
            )
        else:
            parts.append("Word Not found neither in synonym nor antonym list.\n")
    parts.append(SEPARATOR)
    return "".join(parts)


def _selection_sort(entries: list[Entry], better: Callable[[Entry, Entry], bool]) -> list[Entry]:
    """Sort in place by selection, swapping in the first best entry each pass."""
    for start in range(len(entries) - 1):
        best = start
        for candidate in range(start, len(entries)):
            if better(entries[candidate], entries[best]):
                best = candidate
        if best != start:
            entries[start], entries[best] = entries[best], entries[start]
    return entries


def sort_alphabetical(entries: list[Entry]) -> list[Entry]:
    """Sort entries in place by word, alphabetically; return the same list."""
    return _selection_sort(entries, lambda a, b: a.word < b.word)


def sort_by_length(entries: list[Entry]) -> list[Entry]:
    """Sort entries in place by ascending word length; return the same list."""
    return _selection_sort(entries, lambda a, b: a.char_count < b.char_count)


def sort_by_vowels(entries: list[Entry]) -> list[Entry]:
    """Sort entries in place by descending vowel count; return the same list."""
    return _selection_sort(entries, lambda a, b: a.vowel_count > b.vowel_count)


def delete_word(
    path: PathLike, synonyms: list[Entry], antonyms: list[Entry], word: str
) -> None:
    """Remove every entry for ``word`` from the file and from both lists."""

    def keep(line: str) -> Optional[str]:
        return None if _leading_field(line) == word else line

    _rewrite(path, keep)
    synonyms[:] = [entry for entry in synonyms if entry.word != word]
    antonyms[:] = [entry for entry in antonyms if entry.word != word]


def update_word(
    path: PathLike,
    synonyms: list[Entry],
    antonyms: list[Entry],
    word: str,
    synonym: str,
    antonym: str,
) -> None:
    """Give ``word`` a new synonym and antonym in the file and in both lists."""

    def replace(line: str) -> str:
        field = _leading_field(line)
        if field == word:
            return f"{field}={synonym}#{antonym}\n"
        return line

    _rewrite(path, replace)
    for entry in synonyms:
        if entry.word == word:
            entry.related = synonym
    for entry in antonyms:
        if entry.word == word:
            entry.related = antonym


def add_word(
    path: PathLike,
    synonyms: list[Entry],
    antonyms: list[Entry],
    word: str,
    synonym: str,
    antonym: str,
) -> None:
    """Append ``word`` to both lists and as a new line of the file."""
    synonyms.append(Entry.create(word, synonym))
    antonyms.append(Entry.create(word, antonym))
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{word}={synonym}#{antonym}\n")


def similar_words(entries: Iterable[Entry], word: str, rate: int) -> list[Entry]:
    """Entries whose word shares a prefix with ``word`` at ``rate`` percent or more."""
    return [
        Entry.create(entry.word, entry.related)
        for entry in entries
        if match_rate(entry.word, word) >= rate
    ]


def containing(entries: Iterable[Entry], part: str) -> list[Entry]:
    """Entries whose word contains ``part``."""
    return [Entry.create(entry.word, entry.related) for entry in entries if part in entry.word]


def palindromes(entries: Iterable[Entry]) -> list[Entry]:
    """Entries whose word is a palindrome, sorted alphabetically."""
    found = [
        Entry(entry.word, entry.related, entry.char_count, entry.vowel_count)
        for entry in entries
        if is_palindrome(entry.word)
    ]
    return sorted(found, key=lambda entry: entry.word)


def merge(synonyms: Iterable[Entry], antonyms: Iterable[Entry]) -> list[MergedEntry]:
    """Pair the lists position by position into word/synonym/antonym records."""
    return [
        MergedEntry(ant.word, syn.related, ant.related, ant.char_count, ant.vowel_count)
        for syn, ant in zip(synonyms, antonyms)
    ]


def by_syllables(entries: Iterable[Entry]) -> list[str]:
    """Words ordered by syllable count, then alphabetically."""
    return [
        entry.word
        for entry in sorted(entries, key=lambda entry: (count_syllables(entry.word), entry.word))
    ]


def by_pronunciation(entries: Iterable[Entry]) -> dict[VowelType, list[str]]:
    """Words grouped into short-vowel, long-vowel and diphthong queues."""
    groups: dict[VowelType, list[str]] = {
        VowelType.SHORT: [],
        VowelType.LONG: [],
        VowelType.DIPHTHONG: [],
    }
    for entry in entries:
        groups[vowel_type(entry.word)].append(entry.word)
    return groups