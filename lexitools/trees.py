"""A binary search tree of words, each with any number of synonyms and antonyms.

A tree is represented by its root :class:`TreeNode`; an empty tree is ``None``.
Functions that may change the shape of the tree return the (possibly new) root.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence, Union

from .textutils import count_vowels

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

_GREEN = "\033[0;32m"
_CYAN = "\033[0;36m"
_MAGENTA = "\033[0;35m"
_RESET = "\033[0m"


@dataclass
class TreeNode:
    """One word of the tree with its synonyms, antonyms and children."""

    word: str
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(
    root: Optional[TreeNode],
    word: str,
    synonyms: Iterable[str] = (),
    antonyms: Iterable[str] = (),
) -> TreeNode:
    """Insert ``word`` with copies of its word lists; an existing word is left as is."""
    new_node = TreeNode(word, list(synonyms), list(antonyms))
    if root is None:
        return new_node
    node = root
    while True:
        if word < node.word:
            if node.left is None:
                node.left = new_node
                break
            node = node.left
        elif word > node.word:
            if node.right is None:
                node.right = new_node
                break
            node = node.right
        else:
            break
    return root


def _tokens(text: str) -> list[str]:
    return [token for token in text.split("=") if token]


def parse_tree_line(line: str) -> Optional[tuple[str, list[str], list[str]]]:
    """Split ``word=syn=syn#ant=ant`` into its parts; ``None`` if there is no word."""
    if line and line[-1] in "\n\r":
        line = line[:-1]
    before, hash_sign, after = line.partition("#")
    words = _tokens(before)
    if not words:
        return None
    antonyms = _tokens(after) if hash_sign else []
    return words[0], words[1:], antonyms


def fill_tree(path: PathLike) -> Optional[TreeNode]:
    """Build a tree from a dictionary file; lines without a word are skipped."""
    root: Optional[TreeNode] = None
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            if "#" not in line:
                _log.info("Line %d does not contain '#' delimiter: %s", number, line.rstrip("\n"))
            parsed = parse_tree_line(line)
            if parsed is None:
                _log.warning("Line %d has no main word before '='", number)
                continue
            word, synonyms, antonyms = parsed
            _log.info(
                "Inserting word: '%s' with '%d' synonyms and '%d' antonyms",
                word,
                len(synonyms),
                len(antonyms),
            )
            root = insert(root, word, synonyms, antonyms)
    if root is None:
        _log.warning("Tree is empty. Can't work with that file!")
    return root


def find(root: Optional[TreeNode], word: str) -> Optional[TreeNode]:
    """Return the node holding ``word``, or ``None``."""
    node = root
    while node is not None:
        if node.word == word:
            return node
        node = node.right if node.word < word else node.left
    return None


def _format_list(words: Iterable[str]) -> str:
    return "".join(f"|{word}" for word in words) + "|\n"


def characteristics(root: Optional[TreeNode], word: str) -> str:
    """Describe ``word``: its length, vowel count, synonyms and antonyms."""
    target = find(root, word)
    if target is None:
        return f"Word '{word}' not found in tree\n"
    return (
        f"Word : {word}\n"
        f"Word length : {len(word)}\n"
        f"Number Of Vowels : {count_vowels(word)}\n"
        f"Synonym(s) of {word} : {_format_list(target.synonyms)}"
        f"Antonym(s) of {word} : {_format_list(target.antonyms)}"
    )


def format_node(node: Optional[TreeNode]) -> str:
    """Render one node with colour codes; an empty string for ``None``."""
    if node is None:
        return ""
    return (
        f"{_GREEN}Word : {node.word} {_RESET}\n"
        f"{_CYAN}Synonym(s) of {node.word} {_RESET}: {_format_list(node.synonyms)}"
        f"{_MAGENTA}Antonym(s) of {node.word} : {_RESET}{_format_list(node.antonyms)}"
        "\n"
    )


def _min_node(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def delete_word(root: Optional[TreeNode], word: str) -> Optional[TreeNode]:
    """Remove ``word`` from the tree and return the new root."""
    if root is None:
        return None
    if word < root.word:
        root.left = delete_word(root.left, word)
    elif word > root.word:
        root.right = delete_word(root.right, word)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = _min_node(root.right)
        root.word = successor.word
        root.synonyms = list(successor.synonyms)
        root.antonyms = list(successor.antonyms)
        root.right = delete_word(root.right, successor.word)
    return root


def update_word(
    root: Optional[TreeNode], word: str, synonym: str, antonym: str
) -> Optional[TreeNode]:
    """Append a synonym and an antonym to ``word`` if it is in the tree."""
    target = find(root, word)
    if target is not None:
        target.synonyms.append(synonym)
        target.antonyms.append(antonym)
    return root


def _remove_first(words: list[str], value: str) -> None:
    if value in words:
        words.remove(value)


def delete_synonym(root: Optional[TreeNode], word: str, synonym: str) -> Optional[TreeNode]:
    """Remove the first occurrence of ``synonym`` from ``word``'s synonyms."""
    target = find(root, word)
    if target is not None:
        _remove_first(target.synonyms, synonym)
    return root


def delete_antonym(root: Optional[TreeNode], word: str, antonym: str) -> Optional[TreeNode]:
    """Remove the first occurrence of ``antonym`` from ``word``'s antonyms."""
    target = find(root, word)
    if target is not None:
        _remove_first(target.antonyms, antonym)
    return root


def in_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes left subtree first, then the node, then the right subtree."""
    if root is not None:
        yield from in_order(root.left)
        yield root
        yield from in_order(root.right)


def pre_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield each node before its left and right subtrees."""
    if root is not None:
        yield root
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def post_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield each node after its left and right subtrees."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root


def height(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""
    if root is None:
        return -1
    return max(height(root.left), height(root.right)) + 1


def size(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in pre_order(root))


def lowest_common_ancestor(
    root: Optional[TreeNode], word1: str, word2: str
) -> Optional[TreeNode]:
    """Return the deepest node lying between ``word1`` and ``word2`` on the search path."""
    node = root
    while node is not None:
        if node.word < word1 and node.word < word2:
            node = node.right
        elif node.word > word1 and node.word > word2:
            node = node.left
        else:
            return node
    return None


def count_in_range(root: Optional[TreeNode], low: int, high: int) -> int:
    """Count the words whose length lies within ``[low, high]``."""
    return sum(1 for node in pre_order(root) if low <= len(node.word) <= high)


def in_order_successor(root: Optional[TreeNode], word: str) -> Optional[TreeNode]:
    """Return the node following ``word`` in in-order, or ``None``."""
    if find(root, word) is None:
        return None
    nodes = in_order(root)
    for node in nodes:
        if node.word == word:
            return next(nodes, None)
    return None


def mirror(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        mirror(root.left)
        mirror(root.right)
    return root


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    if abs(height(root.left) - height(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def from_stack(nodes: Sequence[TreeNode]) -> Optional[TreeNode]:
    """Build a tree from a stack of nodes given in push order (the last is the top).

    The top node becomes the root; the others are popped and inserted by word.
    """
    if not nodes:
        return None
    root = nodes[-1]
    for node in reversed(nodes[:-1]):
        root = insert(root, node.word, node.synonyms, node.antonyms)
    return root