import pytest

from classics.bst import BinarySearchTree

SAMPLE = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    return BinarySearchTree(SAMPLE)


def test_inorder_is_sorted(tree):
    assert list(tree.inorder()) == sorted(SAMPLE)


def test_preorder_matches_source_example(tree):
    assert list(tree.preorder()) == [50, 30, 20, 40, 70, 60, 80]


def test_preorder_starts_and_postorder_ends_with_root(tree):
    assert next(iter(tree.preorder())) == SAMPLE[0]
    assert list(tree.postorder())[-1] == SAMPLE[0]
    assert sorted(tree.postorder()) == sorted(SAMPLE)


def test_duplicates_are_ignored():
    tree = BinarySearchTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1
    assert list(tree.inorder()) == [5]


def test_contains(tree):
    assert 40 in tree
    assert 100 not in tree


def test_count_and_height(tree):
    assert len(tree) == len(SAMPLE)
    assert tree.height() == 3


def test_height_of_empty_and_chain():
    assert BinarySearchTree().height() == 0
    values = list(range(10))
    assert BinarySearchTree(values).height() == len(values)


def test_minimum(tree):
    assert tree.minimum() == min(SAMPLE)


def test_minimum_of_empty_tree_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


@pytest.mark.parametrize("value", [20, 30, 50, 70, 80])
def test_delete_keeps_order(tree, value):
    assert tree.delete(value) is True
    expected = sorted(v for v in SAMPLE if v != value)
    assert list(tree.inorder()) == expected
    assert value not in tree
    assert len(tree) == len(expected)


def test_delete_sequence_from_source(tree):
    for value in (20, 30, 50):
        tree.delete(value)
    remaining = sorted(set(SAMPLE) - {20, 30, 50})
    assert list(tree.inorder()) == remaining
    # the root is replaced by its in-order successor
    assert next(iter(tree.preorder())) == min(v for v in SAMPLE if v > 50)


def test_delete_missing_value(tree):
    assert tree.delete(999) is False
    assert len(tree) == len(SAMPLE)


def test_delete_everything():
    tree = BinarySearchTree(SAMPLE)
    for value in SAMPLE:
        assert tree.delete(value)
    assert len(tree) == 0
    assert list(tree.inorder()) == []
    assert tree.height() == 0