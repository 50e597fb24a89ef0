import random

import pytest

from indexbench.bplustree import BPlusTree, SearchResult, UpdateOutcome


def _check_structure(tree):
    root = tree._root
    if root is None:
        assert len(tree) == 0
        return
    assert root.parent is None
    leaf_depths = set()
    dfs_leaves = []

    def walk(node, depth, low, high):
        assert node.keys == sorted(node.keys)
        assert len(node.keys) < tree.order
        for key in node.keys:
            if low is not None:
                assert key >= low
            if high is not None:
                assert key < high
        if node is not root:
            assert len(node.keys) >= tree._min_keys
        if node.is_leaf:
            leaf_depths.add(depth)
            dfs_leaves.append(tuple(node.keys))
            return
        assert len(node.children) == len(node.keys) + 1
        bounds = [low] + node.keys + [high]
        for i, child in enumerate(node.children):
            assert child.parent is node
            walk(child, depth + 1, bounds[i], bounds[i + 1])

    walk(root, 0, None, None)
    assert len(leaf_depths) == 1
    assert dfs_leaves == list(tree.leaves())
    assert len(list(tree)) == len(tree)


def test_order_too_small():
    with pytest.raises(ValueError):
        BPlusTree(2)


def test_empty_tree():
    tree = BPlusTree()
    assert tree.search(5) == SearchResult(False, 0)
    assert tree.remove(5) is False
    assert tree.display() == ""
    assert list(tree) == []
    assert len(tree) == 0


def test_leaf_split_display():
    tree = BPlusTree(4)
    for key in [1, 2, 3, 4]:
        tree.insert(key)
    assert tree.display() == "1 -> 2 -> NULL\n3 -> 4 -> NULL\n"
    _check_structure(tree)


def test_single_leaf_display_and_search_count():
    tree = BPlusTree()
    for key in [3, 1, 2]:
        tree.insert(key)
    assert tree.display() == "1 -> 2 -> 3 -> NULL\n"
    assert tree.search(3) == SearchResult(True, 3)
    assert tree.search(1) == SearchResult(True, 1)
    assert tree.search(7) == SearchResult(False, 3)


def test_duplicate_insert_ignored():
    tree = BPlusTree()
    assert tree.insert(10) is True
    assert tree.insert(10) is False
    assert list(tree) == [10]
    assert len(tree) == 1


def test_search_result_truthiness():
    tree = BPlusTree()
    tree.insert(5)
    hit = tree.search(5)
    miss = tree.search(6)
    assert hit == SearchResult(True, 1)
    assert miss == SearchResult(False, 1)
    assert [bool(hit), bool(miss)] == [True, False]


@pytest.mark.parametrize("order", [3, 4, 5, 7])
def test_random_against_set(order):
    rng = random.Random(order)
    tree = BPlusTree(order)
    model = set()
    for _ in range(600):
        key = rng.randrange(200)
        if rng.random() < 0.6:
            assert tree.insert(key) == (key not in model)
            model.add(key)
        else:
            assert tree.remove(key) == (key in model)
            model.discard(key)
        _check_structure(tree)
    assert list(tree) == sorted(model)
    for key in range(200):
        assert (key in tree) == (key in model)


def test_remove_everything():
    tree = BPlusTree()
    keys = list(range(100))
    for key in keys:
        tree.insert(key)
    rng = random.Random(7)
    rng.shuffle(keys)
    for key in keys:
        assert tree.remove(key) is True
        _check_structure(tree)
    assert list(tree) == []
    assert len(tree) == 0
    assert tree.insert(42) is True
    assert list(tree) == [42]


def test_remove_missing():
    tree = BPlusTree()
    for key in range(20):
        tree.insert(key)
    assert tree.remove(1324) is False
    assert list(tree) == list(range(20))


def test_range_query_inclusive():
    tree = BPlusTree()
    for key in range(0, 100, 3):
        tree.insert(key)
    assert tree.range_query(5, 50) == [k for k in range(0, 100, 3) if 5 <= k <= 50]
    assert tree.range_query(6, 6) == [6]
    assert tree.range_query(50, 5) == []


def test_update_outcomes():
    tree = BPlusTree()
    for key in [1200, 15, 30, 1324]:
        tree.insert(key)
    assert tree.update(1200, 8) is UpdateOutcome.UPDATED
    assert 1200 not in tree and 8 in tree
    assert tree.update(15, 8) is UpdateOutcome.ALREADY_EXISTS
    assert 15 in tree
    assert tree.update(9999, 8) is UpdateOutcome.NOT_FOUND
    assert sorted(tree) == [8, 15, 30, 1324]
    _check_structure(tree)


def test_string_keys():
    tree = BPlusTree()
    names = ["Zyaire", "Aarya", "IZUL", "Budi", "Maurice", "Lennox", "Jagger", "azril"]
    for name in names:
        tree.insert(name)
    assert list(tree) == sorted(names)
    assert tree.update("IZUL", "Izul") is UpdateOutcome.UPDATED
    assert tree.remove("Budi") is True
    assert tree.range_query("A", "M") == [
        n for n in sorted(set(names) - {"IZUL", "Budi"} | {"Izul"}) if "A" <= n <= "M"
    ]
    assert tree.search("Aarya").found
    _check_structure(tree)


def test_display_matches_leaves():
    tree = BPlusTree()
    for key in range(30):
        tree.insert(key)
    lines = tree.display().splitlines()
    leaves = list(tree.leaves())
    assert len(lines) == len(leaves)
    for line, leaf in zip(lines, leaves):
        assert line == "".join(f"{k} -> " for k in leaf) + "NULL"