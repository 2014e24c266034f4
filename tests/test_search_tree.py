import random

import pytest

from dsakit.search_tree import BinarySearchTree


def _random_values(seed, count=40):
    rng = random.Random(seed)
    return rng.sample(range(-200, 200), count)


@pytest.mark.parametrize("seed", range(5))
def test_inorder_is_sorted(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)
    assert len(tree) == len(values)


def test_duplicate_insert_rejected():
    tree = BinarySearchTree([5, 3, 8])
    with pytest.raises(ValueError):
        tree.insert(3)
    assert tree.inorder() == [3, 5, 8]


def test_contains():
    tree = BinarySearchTree([5, 3, 8])
    assert 8 in tree
    assert 4 not in tree


@pytest.mark.parametrize("seed", range(5))
def test_delete_keeps_order(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    rng = random.Random(seed + 100)
    remaining = set(values)
    for value in rng.sample(values, len(values)):
        tree.delete(value)
        remaining.discard(value)
        assert value not in tree
        assert tree.inorder() == sorted(remaining)
    assert len(tree) == 0


def test_delete_root_with_two_children():
    tree = BinarySearchTree([50, 30, 70, 60, 80])
    tree.delete(50)
    assert tree.inorder() == [30, 60, 70, 80]
    assert 50 not in tree


def test_delete_only_node_empties_tree():
    tree = BinarySearchTree([7])
    tree.delete(7)
    assert tree.inorder() == []


def test_delete_missing_raises():
    tree = BinarySearchTree([5, 3])
    with pytest.raises(ValueError):
        tree.delete(9)


def test_delete_from_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().delete(1)


def test_inorder_successor():
    tree = BinarySearchTree([50, 30, 70, 60, 80, 65])
    assert tree.inorder_successor(50) == 60
    assert tree.inorder_successor(60) == 65
    assert tree.inorder_successor(30) is None


def test_inorder_successor_missing_raises():
    with pytest.raises(ValueError):
        BinarySearchTree([1]).inorder_successor(2)


def test_leaf_count():
    assert BinarySearchTree([2, 1, 3]).leaf_count() == 2
    assert BinarySearchTree([1, 2, 3]).leaf_count() == 1
    assert BinarySearchTree().leaf_count() == 0


@pytest.mark.parametrize("seed", range(3))
def test_leaf_count_bounded_by_size(seed):
    tree = BinarySearchTree(_random_values(seed))
    assert 1 <= tree.leaf_count() <= (len(tree) + 1) // 2