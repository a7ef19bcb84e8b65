# lexitools

This library works with a small synonym/antonym dictionary file. It also has
some recursive word exercises.

The dictionary is a plain text file with one entry per line:

```
happy=glad#sad
fast=quick#slow
```

The word comes before `=`. The synonym sits between `=` and `#`, and the
antonym comes after `#`. When you load the file into a tree, a word can have
more than one synonym or antonym. Separate them with further `=` signs, for
example `happy=glad=joyful#sad=unhappy`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `lexitools.textutils`

Basic helpers and record types.

- `Entry` and `MergedEntry`: dataclasses for the records. Their `create`
  constructors work out the word's length and vowel count for you.
- Word checks:
  - `count_vowels` counts vowels.
  - `is_vowel` checks one character. It counts `y` as a vowel.
  - `count_syllables` estimates syllables.
  - `match_rate` gives the prefix match as a percentage.
  - `is_palindrome` checks whether a word reads the same both ways.
- `vowel_type`: puts a word into a `VowelType` class: `SHORT`, `LONG` or
  `DIPHTHONG`.
- Text rendering:
  - `centered_banner` draws a boxed banner.
  - `format_entries` and `format_merged` turn records into numbered lines.

### `lexitools.dictionary`

Reads the dictionary file and works on the lists it gives.

- Reading:
  - `read_synonyms` reads `word=synonym` pairs.
  - `read_antonyms` reads `word=…#antonym` pairs.
- Lookups, each returning text:
  - `word_info` describes a word.
  - `related_info` shows which word a synonym or antonym belongs to.
- Sorting, done in place on the list:
  - `sort_alphabetical` sorts by word.
  - `sort_by_length` sorts by ascending length.
  - `sort_by_vowels` sorts by descending vowel count.
- Editing, which changes both the file and the lists:
  - `delete_word`
  - `update_word`
  - `add_word`
- Filters:
  - `similar_words` keeps words at or above a prefix match rate.
  - `containing` keeps words that contain a given substring.
  - `palindromes` keeps palindromes, sorted alphabetically.
- Combining and grouping:
  - `merge` pairs the synonym and antonym lists by position.
  - `by_syllables` orders words by syllable count, then by word.
  - `by_pronunciation` groups words by `VowelType`.

### `lexitools.stacks`

`WordStack` is a last-in, first-out stack of `MergedEntry` records.
Iterating over it runs from the top down.

- Basic operations:
  - `push`, `pop` and `peek`. `pop` and `peek` raise `IndexError` on an empty
    stack.
  - `find` looks up an entry by word.
  - `insert_sorted` inserts an entry in sorted position.
- Sorting and editing:
  - `sort` sorts the stack.
  - `delete`, `update` and `add` change its entries.
- Queries and copies:
  - `info` describes one entry as text.
  - `reversed` gives a reversed copy.
  - `by_syllables` and `by_pronunciation` give grouped copies.
  - `smallest` returns the shortest word.
- Conversion and output:
  - `to_queue` sorts the stack, then returns its words.
  - `to_list` sorts the stack, then returns copies of its entries.
  - `format` renders the stack as text.
- `WordStack.from_merged` builds a stack from merged entries.

`is_palindrome_stack` checks a word by comparing it against a stack of its
characters.

### `lexitools.trees`

A binary search tree of `TreeNode` values. Each node holds a word and lists
of its synonyms and antonyms. An empty tree is `None`. Functions that can
change the shape of the tree return the new root.

- Building:
  - `insert` adds a word.
  - `parse_tree_line` parses one line of the file.
  - `fill_tree` builds a tree from a file and reports progress through
    `logging`.
  - `from_stack` builds a tree from a list of nodes.
- Lookup and display:
  - `find` returns the node for a word.
  - `characteristics` describes a word as text.
  - `format_node` renders one node with colour codes.
- Editing:
  - `delete_word` removes a word.
  - `update_word` appends a synonym and an antonym to a word.
  - `delete_synonym` and `delete_antonym` remove one synonym or antonym.
- Traversal: `in_order`, `pre_order` and `post_order` are generators.
- Measures and queries:
  - `height` and `size`.
  - `lowest_common_ancestor`.
  - `count_in_range` counts words whose length falls in a range.
  - `in_order_successor`.
- Whole-tree operations:
  - `mirror` swaps every node's children in place.
  - `is_balanced` checks the balance of the tree.

### `lexitools.treemerge`

`merge_trees` merges two trees into a new one. It reads both trees in order
and makes the middle word the root.

### `lexitools.recursion`

- Parsing: `parse_synonym_line` and `parse_antonym_line` parse one line each.
- Working across lines of text:
  - `count_occurrences` counts a word.
  - `remove_occurrences` removes it.
  - `replace_occurrences` replaces it.
- Generators: `permutations` and `subsequences`.
- Counts and checks:
  - `longest_common_subsequence` gives the length of the longest common
    subsequence of two words.
  - `distinct_subsequences` counts distinct subsequences, the empty one
    included.
  - `is_palindrome_word` checks for a palindrome.

## Example

```python
from lexitools import dictionary, trees, recursion

synonyms = dictionary.read_synonyms("dictionary.txt")
for entry in dictionary.sort_alphabetical(synonyms):
    print(entry.word, entry.related)

root = trees.fill_tree("dictionary.txt")
print(trees.height(root), trees.size(root))

print(list(recursion.permutations("abc")))
print(recursion.longest_common_subsequence("abcde", "ace"))  # 3
```

## What it does not do

lexitools is a library only. It has no command-line program and no window or
interactive screen for choosing operations. To use it, import the modules and
call their functions from your own code.

The occurrence functions in `lexitools.recursion` take lines of text and
return new lines. They never read or write files themselves.