"""A stack of word/synonym/antonym records and the operations built on it."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator, Optional

from .textutils import MergedEntry, VowelType, count_syllables, format_merged, vowel_type


class WordStack:
    """A last-in, first-out stack of :class:`MergedEntry` records.

    Iteration runs from the top of the stack down to the bottom.
    """

    def __init__(self, entries: Iterable[MergedEntry] = ()) -> None:
        # Stored bottom first; the top of the stack is the end of the list.
        self._items: list[MergedEntry] = list(entries)

    @classmethod
    def from_merged(cls, entries: Iterable[MergedEntry]) -> "WordStack":
        """Push copies of ``entries`` in order, so the last one ends on top."""
        return cls(replace(entry) for entry in entries)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[MergedEntry]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, entry: MergedEntry) -> None:
        """Put ``entry`` on top of the stack."""
        self._items.append(entry)

    def pop(self) -> MergedEntry:
        """Remove and return the top entry; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> MergedEntry:
        """Return the top entry without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def find(self, word: str) -> Optional[MergedEntry]:
        """Return the entry for ``word`` nearest the top, or ``None``."""
        return next((entry for entry in self if entry.word == word), None)

    def insert_sorted(self, entry: MergedEntry) -> None:
        """Insert ``entry`` below every entry whose word does not sort after it."""
        position = 0
        for index in range(len(self._items) - 1, -1, -1):
            if entry.word < self._items[index].word:
                position = index + 1
                break
        self._items.insert(position, entry)

    def sort(self) -> "WordStack":
        """Sort in place so words ascend from the top down; return the stack."""
        items, self._items = self._items, []
        for entry in items:
            self.insert_sorted(entry)
        return self

    def delete(self, word: str) -> "WordStack":
        """Remove every entry for ``word``; return the stack."""
        self._items = [entry for entry in self._items if entry.word != word]
        return self

    def update(self, word: str, synonym: str, antonym: str) -> "WordStack":
        """Give every entry for ``word`` a new synonym and antonym; return the stack."""
        for entry in self._items:
            if entry.word == word:
                entry.synonym = synonym
                entry.antonym = antonym
        return self

    def add(self, word: str, synonym: str, antonym: str) -> "WordStack":
        """Insert a new entry in sorted position; return the stack."""
        self.insert_sorted(MergedEntry.create(word, synonym, antonym))
        return self

    def info(self, word: str) -> str:
        """Describe the entry for ``word``, or return an empty string if absent."""
        entry = self.find(word)
        if entry is None:
            return ""
        return format_merged([entry]).split(") ", 1)[1]

    def reversed(self) -> "WordStack":
        """Return a new stack holding copies of the entries in reverse order."""
        return WordStack(replace(entry) for entry in reversed(self._items))

    def by_syllables(self) -> "WordStack":
        """Return a new stack ordered by syllable count, then word; the largest on top."""
        ordered = sorted(self, key=lambda entry: (count_syllables(entry.word), entry.word))
        return WordStack(replace(entry) for entry in ordered)

    def by_pronunciation(self) -> dict[VowelType, "WordStack"]:
        """Split copies of the entries into short-vowel, long-vowel and diphthong stacks."""
        groups = {
            VowelType.SHORT: WordStack(),
            VowelType.LONG: WordStack(),
            VowelType.DIPHTHONG: WordStack(),
        }
        for entry in self:
            groups[vowel_type(entry.word)].push(replace(entry))
        return groups

    def smallest(self) -> Optional[str]:
        """Return the shortest word, the one nearest the top on ties, or ``None``."""
        best: Optional[MergedEntry] = None
        for entry in self:
            if best is None or entry.char_count < best.char_count:
                best = entry
        return None if best is None else best.word

    def to_queue(self) -> list[str]:
        """Sort the stack in place and return its words from the top down."""
        self.sort()
        return [entry.word for entry in self]

    def to_list(self) -> list[MergedEntry]:
        """Sort the stack in place and return copies of its entries from the top down."""
        self.sort()
        return [replace(entry) for entry in self]

    def format(self) -> str:
        """Render the entries from the top down as numbered lines."""
        if not self._items:
            return ""
        return format_merged(self)


def is_palindrome_stack(word: str) -> bool:
    """Tell whether ``word`` reads the same backwards, comparing via a character stack."""
    stack = list(word)
    return all(stack.pop() == char for char in word)