import pytest

from algoshelf.splay_tree import SplayNode, SplayTree, splay


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.value] + _in_order(node.right)


@pytest.fixture
def tree():
    t = SplayTree()
    for value in (67, 45, 183, 23, 59):
        t.insert(value)
    return t


def test_empty_describe():
    assert SplayTree().describe() == "-- empty --"


def test_single_insert():
    t = SplayTree()
    t.insert(67)
    assert list(t) == [67]
    assert t.describe() == "67 < "


def test_inserts_are_ordered(tree):
    assert list(tree) == [23, 45, 59, 67, 183]
    assert tree.describe() == "23 < 45 < 59 < 67 < 183 < "


def test_duplicate_insert_ignored(tree):
    tree.insert(59)
    assert len(tree) == 5


def test_deletes_follow_example(tree):
    tree.delete(23)
    tree.delete(183)
    tree.delete(67)
    assert list(tree) == [45, 59]
    tree.delete(45)
    tree.delete(59)
    assert len(tree) == 0
    assert tree.describe() == "-- empty --"


def test_delete_absent_keeps_values(tree):
    tree.delete(1000)
    tree.delete(50)
    assert list(tree) == [23, 45, 59, 67, 183]


def test_delete_on_empty_tree():
    t = SplayTree()
    t.delete(5)
    assert len(t) == 0


@pytest.mark.parametrize("target", [5, 10, 20, 1, 15, 25])
def test_splay_preserves_order(target):
    root = SplayNode(10, left=SplayNode(5, left=SplayNode(1)), right=SplayNode(20))
    before = _in_order(root)
    new_root = splay(root, target)
    assert _in_order(new_root) == before


@pytest.mark.parametrize("target", [1, 5, 10, 20])
def test_splay_brings_present_value_to_root(target):
    root = SplayNode(10, left=SplayNode(5, left=SplayNode(1)), right=SplayNode(20))
    assert splay(root, target).value == target


def test_many_inserts_sorted():
    values = [50, 3, 99, 17, 42, 8, 71, 64, 1, 30]
    t = SplayTree()
    for value in values:
        t.insert(value)
    assert list(t) == sorted(values)
    for value in values[::2]:
        t.delete(value)
    assert list(t) == sorted(values[1::2])