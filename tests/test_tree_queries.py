import pytest

from edjudge.bintree import BinTree
from edjudge.tree_queries import (
    first_repeated_level,
    is_prime,
    is_search_tree,
    nearest_multiple_of_seven,
    rebuild,
    right_profile,
)


def leaf(x):
    return BinTree.leaf(x)


@pytest.fixture
def sample():
    return BinTree(
        BinTree(leaf(4), 2, BinTree(leaf(7), 5, None)),
        1,
        BinTree(None, 3, leaf(6)),
    )


def test_rebuild_round_trip(sample):
    rebuilt = rebuild(sample.preorder(), sample.inorder())
    assert rebuilt.preorder() == sample.preorder()
    assert rebuilt.inorder() == sample.inorder()
    assert rebuilt.postorder() == sample.postorder()


def test_rebuild_empty():
    assert not rebuild([], [])


def test_rebuild_rejects_mismatch():
    with pytest.raises(ValueError):
        rebuild([1, 2], [1])
    with pytest.raises(ValueError):
        rebuild([1, 2], [3, 4])


def test_first_repeated_level_found():
    tree = BinTree(leaf(2), 1, leaf(2))
    assert first_repeated_level(tree, 2) == 2


def test_first_repeated_level_missing(sample):
    assert first_repeated_level(sample, 1) is None
    assert first_repeated_level(sample, 99) is None
    assert first_repeated_level(BinTree(), 1) is None


def test_repeats_on_different_levels_do_not_count():
    tree = BinTree(leaf(3), 3, None)
    assert first_repeated_level(tree, 3) is None


def test_is_prime():
    assert is_prime(2)
    assert is_prime(97)
    assert not is_prime(1)
    assert not is_prime(91)
    assert not is_prime(-7)


def test_multiple_of_seven_blocked_by_prime():
    tree = BinTree(leaf(14), 5, None)
    assert nearest_multiple_of_seven(tree) is None


def test_multiple_of_seven_at_root():
    assert nearest_multiple_of_seven(leaf(49)) == (49, 1)


def test_multiple_of_seven_prefers_shallower():
    tree = BinTree(BinTree(leaf(21), 4, None), 8, leaf(14))
    value, level = nearest_multiple_of_seven(tree)
    assert value == 14
    assert level == len(right_profile(BinTree(None, 8, leaf(14))))


def test_seven_itself_is_prime():
    assert nearest_multiple_of_seven(leaf(7)) is None
    assert nearest_multiple_of_seven(BinTree()) is None


def test_right_profile(sample):
    tree = BinTree(BinTree(leaf(4), 2, None), 1, leaf(3))
    assert right_profile(tree) == [1, 3, 4]
    assert right_profile(BinTree()) == []
    assert len(right_profile(sample)) == 4


def test_is_search_tree():
    good = BinTree(BinTree(leaf(1), 2, leaf(3)), 4, leaf(6))
    bad = BinTree(BinTree(leaf(1), 2, leaf(5)), 4, leaf(6))
    duplicate = BinTree(leaf(4), 4, None)
    assert is_search_tree(good)
    assert not is_search_tree(bad)
    assert not is_search_tree(duplicate)
    assert is_search_tree(BinTree())