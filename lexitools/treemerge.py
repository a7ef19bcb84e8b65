"""Merging two word trees into one."""

from __future__ import annotations

from heapq import merge as _merge_sorted
from typing import Optional

from .trees import TreeNode, in_order, insert


def merge_trees(first: Optional[TreeNode], second: Optional[TreeNode]) -> Optional[TreeNode]:
    """Merge two trees into a new one holding copies of their nodes.

    If either tree is empty the other one is returned unchanged.

    Otherwise both trees are read in order and merged by word. On equal words
    the node from ``first`` comes first. The middle node of the merged sequence
    becomes the root. The nodes before it are inserted in order, then the nodes
    after it. A word that is already in the new tree is not inserted again.
    """
    if first is None:
        return second
    if second is None:
        return first

    merged = list(_merge_sorted(in_order(first), in_order(second), key=lambda node: node.word))
    if not merged:
        return None

    middle = len(merged) // 2
    centre = merged[middle]
    root = insert(None, centre.word, centre.synonyms, centre.antonyms)
    for node in merged[:middle] + merged[middle + 1:]:
        root = insert(root, node.word, node.synonyms, node.antonyms)
    return root