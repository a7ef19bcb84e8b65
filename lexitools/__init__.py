"""Synonym and antonym dictionary tools built on lists, stacks, trees and recursion."""

__version__ = "0.1.0"

__all__ = ["textutils", "dictionary", "stacks", "trees", "treemerge", "recursion"]