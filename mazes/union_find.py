"""Disjoint-set forest used by the set-merging generators."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Union-find with path halving and union by size.

    Items are added lazily: looking up an unseen item places it in its own set.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._parent: Dict[T, T] = {}
        self._size: Dict[T, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        if item not in self._parent:
            self._parent[item] = item
            self._size[item] = 1

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: T) -> T:
        self.add(item)
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, left: T, right: T) -> bool:
        """Merge the sets of ``left`` and ``right``; False if they were already one set."""

        left_root, right_root = self.find(left), self.find(right)
        if left_root == right_root:
            return False
        if self._size[left_root] < self._size[right_root]:
            left_root, right_root = right_root, left_root
        self._parent[right_root] = left_root
        self._size[left_root] += self._size.pop(right_root)
        return True

    def same_set(self, left: T, right: T) -> bool:
        return self.find(left) == self.find(right)

    def groups(self, items: Iterable[T]) -> List[List[T]]:
        """Partition ``items`` by set, keeping first-seen order inside and across groups."""

        grouped: Dict[T, List[T]] = {}
        for item in items:
            grouped.setdefault(self.find(item), []).append(item)
        return list(grouped.values())

    def set_count(self) -> int:
        return sum(1 for item, parent in self._parent.items() if item == parent)


__all__ = ["DisjointSet"]
