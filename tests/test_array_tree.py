import pytest

from dsakit.array_tree import array_inorder, build_array_tree
from dsakit.binary_tree import build_tree


def _asker(spec):
    return lambda value, side: spec.get((value, side))


SPEC = {
    (10, "left"): 20,
    (10, "right"): 30,
    (20, "right"): 40,
    (30, "left"): 50,
}


def test_children_land_at_doubled_indices():
    slots = build_array_tree(10, _asker(SPEC))
    assert slots[1] == 10
    assert slots[2] == 20
    assert slots[3] == 30
    assert slots[2 * 2 + 1] == 40
    assert slots[2 * 3] == 50
    assert slots[0] is None


def test_default_size_is_thirty_slots():
    slots = build_array_tree(10, _asker({}))
    assert len(slots) == 30
    assert [s for s in slots if s is not None] == [10]


def test_inorder_matches_linked_tree():
    slots = build_array_tree(10, _asker(SPEC))
    linked = build_tree(10, _asker(SPEC))
    assert array_inorder(slots) == linked.inorder()


def test_inorder_of_small_tree():
    slots = build_array_tree(1, _asker({(1, "left"): 2, (1, "right"): 3}), size=4)
    assert array_inorder(slots) == [2, 1, 3]


def test_child_beyond_array_raises():
    chain = {(1, "left"): 2, (2, "left"): 3, (3, "left"): 4}
    with pytest.raises(IndexError):
        build_array_tree(1, _asker(chain), size=8)


def test_inorder_of_empty_slots():
    assert array_inorder([None] * 10) == []
    assert array_inorder([]) == []


def test_custom_size_is_respected():
    slots = build_array_tree(5, _asker({(5, "right"): 6}), size=4)
    assert len(slots) == 4
    assert slots[3] == 6