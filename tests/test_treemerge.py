import pytest

from lexitools.treemerge import merge_trees
from lexitools.trees import find, in_order, insert, pre_order, size


def build(*words):
    root = None
    for word in words:
        root = insert(root, word, [word + "_syn"], [word + "_ant"])
    return root


def words_of(root):
    return [node.word for node in in_order(root)]


def assert_bst(node, low=None, high=None):
    if node is None:
        return
    if low is not None:
        assert node.word > low
    if high is not None:
        assert node.word < high
    assert_bst(node.left, low, node.word)
    assert_bst(node.right, node.word, high)


def test_empty_first_returns_second():
    second = build("b", "a")
    assert merge_trees(None, second) is second


def test_empty_second_returns_first():
    first = build("b", "a")
    assert merge_trees(first, None) is first


def test_both_empty_is_none():
    assert merge_trees(None, None) is None


def test_merged_in_order_is_sorted_union():
    first = build("delta", "alpha", "echo")
    second = build("charlie", "bravo")
    merged = merge_trees(first, second)
    assert words_of(merged) == ["alpha", "bravo", "charlie", "delta", "echo"]
    assert_bst(merged)


def test_root_is_middle_of_merged_sequence():
    first = build("a", "c", "e")
    second = build("b", "d")
    merged = merge_trees(first, second)
    assert merged.word == "c"


def test_duplicates_appear_once():
    first = build("m", "a", "z")
    second = build("m", "k")
    merged = merge_trees(first, second)
    assert words_of(merged) == ["a", "k", "m", "z"]
    assert size(merged) == 4


def test_word_lists_are_carried_over():
    first = build("apple", "pear")
    second = build("fig")
    merged = merge_trees(first, second)
    node = find(merged, "fig")
    assert node.synonyms == ["fig_syn"]
    assert node.antonyms == ["fig_ant"]


def test_result_is_a_copy():
    first = build("b", "a")
    second = build("c")
    merged = merge_trees(first, second)
    for node in pre_order(merged):
        node.synonyms.append("extra")
    assert find(first, "a").synonyms == ["a_syn"]
    assert find(second, "c").synonyms == ["c_syn"]
    assert all(
        original is not copy
        for original in list(pre_order(first)) + list(pre_order(second))
        for copy in pre_order(merged)
    )


def test_inputs_left_unchanged():
    first = build("d", "b", "f")
    second = build("a", "g")
    before_first = words_of(first)
    before_second = words_of(second)
    merge_trees(first, second)
    assert words_of(first) == before_first
    assert words_of(second) == before_second


@pytest.mark.parametrize(
    "left, right",
    [
        (["x"], ["y"]),
        (["one", "two", "three"], ["four", "five", "six", "seven"]),
        (["same"], ["same"]),
    ],
)
def test_size_matches_distinct_words(left, right):
    merged = merge_trees(build(*left), build(*right))
    assert size(merged) == len(set(left) | set(right))
    assert words_of(merged) == sorted(set(left) | set(right))
    assert_bst(merged)