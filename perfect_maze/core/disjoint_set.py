from typing import List


class DisjointSet:
    """
    Union-Find over the integers 0..size-1, kept as flat parent/rank lists.
    Cell indices come from Grid.get_index.
    """

    __slots__ = ('parent', 'rank', 'set_count')

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"DisjointSet size must be >= 0, got {size}")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self.set_count = size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, i: int) -> int:
        parent = self.parent
        root = i
        while parent[root] != root:
            root = parent[root]

        # Path compression
        while parent[i] != root:
            parent[i], i = root, parent[i]

        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merges the sets holding a and b by rank.
        Returns False (and changes nothing) if they already share a root.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

        self.set_count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
