from bintree.core.search import BinarySearchTree
import numpy as np
import pytest


def test_search_tree_add():
    tree = BinarySearchTree()
    for i in [5, 3, 8, 1]:
        tree.add(i)
    assert tree.size() == 4
    assert tree.to_list("preorder") == [5, 3, 1, 8]
    assert tree.to_list("level") == [5, 3, 8, 1]
    assert tree.root.left.parent is tree.root


def test_search_tree_add_none():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.add(None)
    assert tree.is_empty() is True


def test_search_tree_add_duplicate():
    """duplicates replace the stored element without growing the tree"""
    tree = BinarySearchTree(key=lambda item: item[0])
    tree.add((1, "one"))
    tree.add((2, "two"))
    tree.add((1, "uno"))
    assert tree.size() == 2
    assert tree.to_list() == [(1, "uno"), (2, "two")]


def test_search_tree_key():
    tree = BinarySearchTree(key=len)
    for word in ["pear", "fig", "banana", "kiwifruit"]:
        tree.add(word)
    assert tree.to_list() == ["fig", "pear", "banana", "kiwifruit"]
    assert tree.contains("ant") is True  # same length as "fig"


def test_search_tree_contains():
    tree = BinarySearchTree()
    values = list(range(-5, 6))
    for i in values:
        tree.add(i)
    for i in values:
        assert tree.contains(i) is True
        assert i in tree
    assert tree.contains(100) is False
    assert 100 not in tree
    assert None not in tree
    assert tree.get_node(3).element == 3


def test_search_tree_min_max():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.min()
    with pytest.raises(ValueError):
        tree.max()
    for i in [4, 9, -2, 7, 0]:
        tree.add(i)
    assert tree.min() == -2
    assert tree.max() == 9


def test_search_tree_remove_leaf():
    tree = BinarySearchTree()
    for i in [5, 3, 8, 1]:
        tree.add(i)
    assert tree.remove(1) is True
    assert tree.size() == 3
    assert tree.to_list("preorder") == [5, 3, 8]
    assert tree.get_node(3).is_leaf() is True


def test_search_tree_remove_one_child():
    tree = BinarySearchTree()
    for i in [5, 3, 8, 1]:
        tree.add(i)
    assert tree.remove(3) is True
    one = tree.get_node(1)
    assert one.parent is tree.root
    assert tree.root.left is one
    assert tree.to_list("preorder") == [5, 1, 8]


def test_search_tree_remove_two_children():
    tree = BinarySearchTree()
    for i in [5, 3, 8, 1, 4, 7, 9, 6]:
        tree.add(i)
    assert tree.remove(5) is True
    # the successor (6) takes the root's place
    assert tree.root.element == 6
    assert tree.root.parent is None
    assert tree.to_list() == [1, 3, 4, 6, 7, 8, 9]
    assert tree.get_node(7).left is None
    assert tree.size() == 7


def test_search_tree_remove_root_chain():
    tree = BinarySearchTree()
    for i in [1, 2, 3]:
        tree.add(i)
    assert tree.remove(1) is True
    assert tree.root.element == 2
    assert tree.root.parent is None
    tree.remove(2)
    tree.remove(3)
    assert tree.root is None
    assert tree.is_empty() is True


def test_search_tree_remove_missing():
    tree = BinarySearchTree()
    assert tree.remove(1) is False
    tree.add(2)
    assert tree.remove(1) is False
    assert tree.size() == 1
    with pytest.raises(ValueError):
        tree.remove(None)


def test_search_tree_random_removals():
    """remove values in a random order and verify that the tree keeps its order
    and its parent links after every removal"""
    rng = np.random.RandomState(12)
    values = [int(v) for v in rng.permutation(200)]
    tree = BinarySearchTree()
    for v in values:
        tree.add(v)
    remaining = set(values)
    for v in rng.permutation(values):
        assert tree.remove(int(v)) is True
        remaining.discard(int(v))
        assert tree.to_list() == sorted(remaining)
        assert tree.size() == len(remaining)
        if tree.root is not None:
            assert tree.root.parent is None

            def check_links(node, depth, data):
                for child in node.get_children():
                    assert child.parent is node

            tree.root.visit_preorder(check_links)
