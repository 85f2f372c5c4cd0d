import copy
import io

import pytest

from spellwise.bst import BinarySearchTree


class Keyed:
    """Ordered by key only, so distinct payloads can match."""

    def __init__(self, key, payload):
        self.key = key
        self.payload = payload

    def __lt__(self, other):
        return self.key < other.key


@pytest.fixture
def tree():
    t = BinarySearchTree(-1)
    for value in [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]:
        t.insert(value)
    return t


def test_iteration_is_sorted(tree):
    assert list(tree) == sorted([50, 30, 70, 20, 40, 60, 80, 35, 45, 65])


def test_duplicates_are_ignored():
    t = BinarySearchTree(None)
    t.insert(5)
    t.insert(5)
    assert list(t) == [5]


def test_empty_tree_returns_not_found():
    t = BinarySearchTree("missing")
    assert t.is_empty()
    assert t.find_min() == "missing"
    assert t.find_max() == "missing"
    assert t.find("x") == "missing"


def test_min_and_max(tree):
    assert tree.find_min() == 20
    assert tree.find_max() == 80


def test_find_present_and_absent(tree):
    assert tree.find(45) == 45
    assert tree.find(99) == -1


def test_find_returns_stored_item():
    t = BinarySearchTree(None)
    stored = Keyed("k", "first")
    t.insert(stored)
    t.insert(Keyed("k", "second"))
    assert t.find(Keyed("k", "probe")) is stored


@pytest.mark.parametrize("victim", [20, 35, 30, 50, 70, 80])
def test_remove_keeps_order(tree, victim):
    before = list(tree)
    tree.remove(victim)
    assert tree.find(victim) == -1
    assert list(tree) == [v for v in before if v != victim]


def test_remove_missing_is_noop(tree):
    before = list(tree)
    tree.remove(1000)
    assert list(tree) == before


def test_remove_all_empties_tree(tree):
    for value in list(tree):
        tree.remove(value)
    assert tree.is_empty()
    assert list(tree) == []


def test_clear(tree):
    tree.clear()
    assert tree.is_empty()
    assert tree.find_min() == -1


def test_copy_is_independent(tree):
    duplicate = tree.copy()
    tree.remove(50)
    duplicate.insert(99)
    assert 50 in list(duplicate)
    assert 99 not in list(tree)
    assert duplicate.not_found == tree.not_found


def test_copy_module_uses_copy(tree):
    duplicate = copy.copy(tree)
    tree.clear()
    assert list(duplicate) == sorted([50, 30, 70, 20, 40, 60, 80, 35, 45, 65])


def test_write_outputs_sorted_lines():
    t = BinarySearchTree(0)
    for value in (3, 1, 2):
        t.insert(value)
    out = io.StringIO()
    t.write(out)
    assert out.getvalue() == "1\n2\n3\n"


def test_write_empty_tree():
    out = io.StringIO()
    BinarySearchTree(0).write(out)
    assert out.getvalue() == ""


def test_degenerate_tree_is_handled():
    t = BinarySearchTree(None)
    values = list(range(5000))
    for value in values:
        t.insert(value)
    assert list(t) == values
    assert t.find_max() == values[-1]
    assert list(t.copy()) == values