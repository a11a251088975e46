"""Disjoint-set forest with union by rank."""


class DisjointSet:
    """Union-find over the integers ``0`` to ``n - 1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.root = list(range(n))
        self.rank = [0] * n

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self.root):
            raise IndexError(f"element {i} is out of range")

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        self._check(i)
        while self.root[i] != i:
            i = self.root[i]
        return i

    def union(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return
        if self.rank[root_i] > self.rank[root_j]:
            self.root[root_j] = root_i
        elif self.rank[root_i] < self.rank[root_j]:
            self.root[root_i] = root_j
        else:
            self.root[root_j] = root_i
            self.rank[root_i] += 1

    def connected(self, i: int, j: int) -> bool:
        """Tell whether ``i`` and ``j`` are in the same set."""
        return self.find(i) == self.find(j)