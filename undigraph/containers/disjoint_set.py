"""
Union-Find (disjoint set) over a registered universe of elements.

Elements are assigned integer set ids in registration order; ``find_set``
returns the id of the class root. Union by rank plus path compression give
amortized near-constant time per operation.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, List


class DisjointSet:
    """
    Disjoint-set forest with path compression and union by rank.

    Unlike a permissive union-find, this structure is strict: registering an
    element twice, touching an unregistered element, or unioning two elements
    that already share a class all raise ``ValueError`` and leave the forest
    untouched.

    Complexity:
        - make_set: O(1) amortized
        - find_set: O(alpha(n)) amortized
        - union: O(alpha(n)) amortized
    """

    def __init__(self) -> None:
        self._index: Dict[Hashable, int] = {}
        self._parent: List[int] = []
        self._rank: List[int] = []
        self._num_sets = 0

    def __contains__(self, item: Hashable) -> bool:
        return item in self._index

    def __len__(self) -> int:
        return len(self._parent)

    def num_sets(self) -> int:
        """Return the number of disjoint classes."""
        return self._num_sets

    def make_set(self, item: Hashable) -> None:
        """
        Register ``item`` as a new singleton class.

        Args:
            item: Hashable element (``None`` is allowed).

        Raises:
            ValueError: If ``item`` is already registered.
        """
        if item in self._index:
            raise ValueError(f"Element {item!r} is already registered")

        set_id = len(self._parent)
        self._index[item] = set_id
        self._parent.append(set_id)
        self._rank.append(0)
        self._num_sets += 1

    def find_set(self, item: Hashable) -> int:
        """
        Return the representative id of the class containing ``item``.

        Args:
            item: Registered element.

        Returns:
            Integer id of the class root.

        Raises:
            ValueError: If ``item`` was never registered.
        """
        return self._find(self._lookup(item))

    def union(self, item1: Hashable, item2: Hashable) -> None:
        """
        Merge the classes containing ``item1`` and ``item2``.

        On equal rank the root of ``item1`` becomes the new root.

        Raises:
            ValueError: If either element is unregistered, or both are
                already in the same class.
        """
        root1 = self._find(self._lookup(item1))
        root2 = self._find(self._lookup(item2))

        if root1 == root2:
            raise ValueError(f"Elements {item1!r} and {item2!r} are already in the same set")

        if self._rank[root1] < self._rank[root2]:
            self._parent[root1] = root2
        elif self._rank[root1] > self._rank[root2]:
            self._parent[root2] = root1
        else:
            self._parent[root2] = root1
            self._rank[root1] += 1

        self._num_sets -= 1

    def connected(self, item1: Hashable, item2: Hashable) -> bool:
        """Return True if both elements are in the same class."""
        return self.find_set(item1) == self.find_set(item2)

    def _lookup(self, item: Hashable) -> int:
        try:
            return self._index[item]
        except KeyError:
            raise ValueError(f"Element {item!r} is not registered") from None

    def _find(self, node: int) -> int:
        parent = self._parent

        root = node
        while parent[root] != root:
            root = parent[root]

        # Path compression
        while parent[node] != root:
            parent[node], node = root, parent[node]

        return root
