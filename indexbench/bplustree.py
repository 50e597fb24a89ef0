"""An in-memory B+ tree of unique, ordered keys with linked leaves."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a lookup: whether the key was found and how many leaf keys were compared."""

    found: bool
    comparisons: int

    def __bool__(self) -> bool:
        return self.found


class UpdateOutcome(Enum):
    """Result of replacing one key with another."""

    UPDATED = "updated"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


@dataclass(eq=False)
class _Node:
    is_leaf: bool
    keys: List[Any] = field(default_factory=list)
    children: List["_Node"] = field(default_factory=list)
    parent: Optional["_Node"] = None
    next: Optional["_Node"] = None


class BPlusTree:
    """A B+ tree whose nodes split once they hold ``order`` keys."""

    def __init__(self, order: int = 4) -> None:
        if order < 3:
            raise ValueError(f"order must be at least 3, got {order}")
        self.order = order
        self._min_keys = (order - 1) // 2
        self._root: Optional[_Node] = None
        self._size = 0

    # ----------------------------------------------------------------- lookup

    def _find_leaf(self, key: Any) -> _Node:
        node = self._root
        assert node is not None
        while not node.is_leaf:
            node = node.children[bisect_right(node.keys, key)]
        return node

    def search(self, key: Any) -> SearchResult:
        """Look a key up, counting the leaf keys examined on the way."""
        if self._root is None:
            return SearchResult(False, 0)
        leaf = self._find_leaf(key)
        for count, candidate in enumerate(leaf.keys, start=1):
            if candidate == key:
                return SearchResult(True, count)
        return SearchResult(False, len(leaf.keys))

    def __contains__(self, key: Any) -> bool:
        return self.search(key).found

    # -------------------------------------------------------------- insertion

    def insert(self, key: Any) -> bool:
        """Add a key; return False if it was already present."""
        if self._root is None:
            self._root = _Node(True, [key])
            self._size = 1
            return True
        leaf = self._find_leaf(key)
        pos = bisect_left(leaf.keys, key)
        if pos < len(leaf.keys) and leaf.keys[pos] == key:
            return False
        leaf.keys.insert(pos, key)
        self._size += 1
        if len(leaf.keys) >= self.order:
            self._split_leaf(leaf)
        return True

    def _split_leaf(self, leaf: _Node) -> None:
        mid = (self.order + 1) // 2
        sibling = _Node(True, leaf.keys[mid:], next=leaf.next)
        del leaf.keys[mid:]
        leaf.next = sibling
        self._attach(leaf, sibling.keys[0], sibling)

    def _attach(self, left: _Node, key: Any, right: _Node) -> None:
        if left is self._root:
            root = _Node(False, [key], [left, right])
            left.parent = root
            right.parent = root
            self._root = root
        else:
            assert left.parent is not None
            self._insert_internal(key, left.parent, right)

    def _insert_internal(self, key: Any, node: _Node, child: _Node) -> None:
        pos = bisect_right(node.keys, key)
        node.keys.insert(pos, key)
        node.children.insert(pos + 1, child)
        child.parent = node
        if len(node.keys) >= self.order:
            mid = self.order // 2
            sibling = _Node(False, node.keys[mid + 1:], node.children[mid + 1:])
            up_key = node.keys[mid]
            del node.keys[mid:]
            del node.children[mid + 1:]
            for grandchild in sibling.children:
                grandchild.parent = sibling
            self._attach(node, up_key, sibling)

    # ---------------------------------------------------------------- removal

    def remove(self, key: Any) -> bool:
        """Delete a key; return False if it was not present."""
        if self._root is None:
            return False
        leaf = self._find_leaf(key)
        try:
            leaf.keys.remove(key)
        except ValueError:
            return False
        self._size -= 1
        if leaf is self._root or len(leaf.keys) >= self._min_keys:
            return True
        self._rebalance_leaf(leaf)
        return True

    @staticmethod
    def _siblings(node: _Node) -> tuple[int, Optional[_Node], Optional[_Node]]:
        parent = node.parent
        assert parent is not None
        index = next(i for i, c in enumerate(parent.children) if c is node)
        left = parent.children[index - 1] if index > 0 else None
        right = parent.children[index + 1] if index + 1 < len(parent.children) else None
        return index, left, right

    def _rebalance_leaf(self, leaf: _Node) -> None:
        parent = leaf.parent
        assert parent is not None
        index, left, right = self._siblings(leaf)
        if left is not None and len(left.keys) > self._min_keys:
            leaf.keys.insert(0, left.keys.pop())
            parent.keys[index - 1] = leaf.keys[0]
        elif right is not None and len(right.keys) > self._min_keys:
            leaf.keys.append(right.keys.pop(0))
            parent.keys[index] = right.keys[0]
        elif left is not None:
            left.keys.extend(leaf.keys)
            left.next = leaf.next
            self._remove_entry(parent, index - 1)
        elif right is not None:
            leaf.keys.extend(right.keys)
            leaf.next = right.next
            self._remove_entry(parent, index)

    def _remove_entry(self, node: _Node, index: int) -> None:
        """Drop ``node.keys[index]`` and the child to its right, then rebalance."""
        del node.keys[index]
        del node.children[index + 1]

        if node is self._root:
            if not node.keys:
                self._root = node.children[0]
                self._root.parent = None
            return
        if len(node.keys) >= self._min_keys:
            return

        parent = node.parent
        assert parent is not None
        pos, left, right = self._siblings(node)

        if left is not None and len(left.keys) > self._min_keys:
            node.keys.insert(0, parent.keys[pos - 1])
            parent.keys[pos - 1] = left.keys.pop()
            moved = left.children.pop()
            node.children.insert(0, moved)
            moved.parent = node
        elif right is not None and len(right.keys) > self._min_keys:
            node.keys.append(parent.keys[pos])
            parent.keys[pos] = right.keys.pop(0)
            moved = right.children.pop(0)
            node.children.append(moved)
            moved.parent = node
        elif left is not None:
            left.keys.append(parent.keys[pos - 1])
            left.keys.extend(node.keys)
            for child in node.children:
                child.parent = left
            left.children.extend(node.children)
            self._remove_entry(parent, pos - 1)
        elif right is not None:
            node.keys.append(parent.keys[pos])
            node.keys.extend(right.keys)
            for child in right.children:
                child.parent = node
            node.children.extend(right.children)
            self._remove_entry(parent, pos)

    # ----------------------------------------------------------------- update

    def update(self, old_key: Any, new_key: Any) -> UpdateOutcome:
        """Replace ``old_key`` by ``new_key`` unless the old one is missing or the new one exists."""
        if old_key not in self:
            return UpdateOutcome.NOT_FOUND
        if new_key in self:
            return UpdateOutcome.ALREADY_EXISTS
        self.remove(old_key)
        self.insert(new_key)
        return UpdateOutcome.UPDATED

    # -------------------------------------------------------------- traversal

    def leaves(self) -> Iterator[tuple]:
        """Yield the keys of each leaf, left to right along the leaf chain."""
        node = self._root
        while node is not None and not node.is_leaf:
            node = node.children[0]
        while node is not None:
            yield tuple(node.keys)
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for leaf in self.leaves():
            yield from leaf

    def __len__(self) -> int:
        return self._size

    def range_query(self, start: Any, end: Any) -> List[Any]:
        """Return every key k with ``start <= k <= end``, in order."""
        return [key for key in self if start <= key <= end]

    def display(self) -> str:
        """Render the leaf chain, one leaf per line, each ending in ``NULL``."""
        return "".join(
            "".join(f"{key} -> " for key in leaf) + "NULL\n" for leaf in self.leaves()
        )