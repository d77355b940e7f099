import pytest

from edjudge.bintree import BinTree, read_tree


def heap_tree(count, index=1):
    """Complete tree holding 1..count in level order."""
    if index > count:
        return BinTree()
    return BinTree(heap_tree(count, 2 * index), index, heap_tree(count, 2 * index + 1))


def mirror(tree):
    if not tree:
        return BinTree()
    return BinTree(mirror(tree.right()), tree.root(), mirror(tree.left()))


def bst(values):
    values = sorted(values)
    if not values:
        return BinTree()
    mid = len(values) // 2
    return BinTree(bst(values[:mid]), values[mid], bst(values[mid + 1:]))


def test_empty_tree_is_false_and_has_no_root():
    tree = BinTree()
    assert not tree
    with pytest.raises(IndexError):
        tree.root()
    with pytest.raises(IndexError):
        tree.left()
    with pytest.raises(IndexError):
        tree.right()


def test_leaf_has_empty_children():
    tree = BinTree.leaf("x")
    assert tree
    assert tree.root() == "x"
    assert not tree.left()
    assert not tree.right()


def test_children_are_shared_subtrees():
    left = BinTree.leaf(1)
    right = BinTree.leaf(3)
    tree = BinTree(left, 2, right)
    assert tree.left().root() == left.root()
    assert tree.right().root() == right.root()
    assert tree.root() == 2


def test_children_without_root_rejected():
    with pytest.raises(TypeError):
        BinTree(BinTree.leaf(1))


@pytest.mark.parametrize("count", [0, 1, 2, 7, 12])
def test_levelorder_of_heap_tree(count):
    assert heap_tree(count).levelorder() == list(range(1, count + 1))


@pytest.mark.parametrize("values", [[], [5], [3, 1, 2], list(range(20, 0, -3))])
def test_inorder_of_search_tree_is_sorted(values):
    tree = bst(values)
    assert tree.inorder() == sorted(values)
    assert list(tree) == tree.inorder()


@pytest.mark.parametrize("count", [0, 1, 6, 15])
def test_postorder_is_reversed_preorder_of_mirror(count):
    tree = heap_tree(count)
    assert tree.postorder() == mirror(tree).preorder()[::-1]


@pytest.mark.parametrize("count", [1, 5, 10])
def test_traversals_visit_every_node_once(count):
    tree = heap_tree(count)
    expected = sorted(range(1, count + 1))
    for order in (tree.preorder(), tree.inorder(), tree.postorder(), tree.levelorder()):
        assert sorted(order) == expected


def test_read_tree_round_trips_preorder():
    tokens = "a b . . c d . . .".split()
    tree = read_tree(tokens, ".")
    assert tree.preorder() == [t for t in tokens if t != "."]
    assert tree.left().root() == "b"
    assert not tree.right().right()


def test_read_tree_with_conversion():
    tree = read_tree("1 2 -1 -1 3 -1 -1".split(), -1, int)
    assert tree.preorder() == [1, 2, 3]
    assert tree.root() == 1


def test_read_tree_consumes_only_its_tokens():
    stream = iter("7 -1 -1 rest".split())
    tree = read_tree(stream, -1, int)
    assert tree.preorder() == [7]
    assert next(stream) == "rest"


def test_read_tree_of_empty_marker_is_empty():
    assert not read_tree(["#"], "#")


def test_read_tree_truncated_raises():
    with pytest.raises(EOFError):
        read_tree(["1", "-1"], -1, int)


def test_read_tree_deep_chain():
    depth = 3000
    tokens = [str(i) for i in range(1, depth + 1)] + ["-1"] * (depth + 1)
    tree = read_tree(tokens, -1, int)
    assert tree.preorder() == list(range(1, depth + 1))
    assert tree.inorder() == list(range(depth, 0, -1))