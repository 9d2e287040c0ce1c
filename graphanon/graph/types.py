"""Labelled undirected graph container used by the anonymization engine."""

from collections.abc import Iterable, Iterator

import numpy as np
import scipy.sparse


class LabelledGraph:
    """Undirected simple graph whose vertices each carry one label.

    Vertices are the integers 0..n-1 and labels are drawn from
    0..num_labels-1. Adjacency is one set per vertex. Edges can be added
    but never removed, and labels are fixed at construction.
    """

    def __init__(
        self,
        n: int,
        num_labels: int,
        labels: Iterable[int] | None = None,
    ) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if num_labels <= 0:
            raise ValueError(f"num_labels must be positive, got {num_labels}")

        self._n = n
        self._num_labels = num_labels
        if labels is None:
            self._labels = np.zeros(n, dtype=np.int64)
        else:
            self._labels = np.array(list(labels), dtype=np.int64)
        if self._labels.shape != (n,):
            raise ValueError(
                f"Expected {n} labels, got {self._labels.shape[0]}"
            )
        if n > 0 and (self._labels.min() < 0 or self._labels.max() >= num_labels):
            raise ValueError(
                f"Labels must lie in [0, {num_labels}), "
                f"got range [{self._labels.min()}, {self._labels.max()}]"
            )
        self._labels.flags.writeable = False

        self._adjacency: list[set[int]] = [set() for _ in range(n)]
        self._m = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def num_labels(self) -> int:
        return self._num_labels

    @property
    def labels(self) -> np.ndarray:
        """Read-only int64 array mapping vertex -> label."""
        return self._labels

    @property
    def num_edges(self) -> int:
        return self._m

    @property
    def max_edges(self) -> int:
        return self._n * (self._n - 1) // 2

    def label(self, v: int) -> int:
        return int(self._labels[v])

    def neighbors(self, v: int) -> Iterator[int]:
        return iter(self._adjacency[v])

    def degree(self, v: int) -> int:
        return len(self._adjacency[v])

    def has_edge(self, u: int, v: int) -> bool:
        return v in self._adjacency[u]

    def add_edge(self, u: int, v: int) -> bool:
        """Insert the undirected edge (u, v).

        Returns:
            True if the edge is new, False if it was already present.

        Raises:
            ValueError: On a self loop or an out-of-range vertex.
        """
        if u == v:
            raise ValueError(f"Self loops are not allowed (vertex {u})")
        if not (0 <= u < self._n and 0 <= v < self._n):
            raise ValueError(f"Edge ({u}, {v}) out of range for n={self._n}")
        if v in self._adjacency[u]:
            return False
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)
        self._m += 1
        return True

    def is_complete(self) -> bool:
        return self._m == self.max_edges

    def edges(self) -> list[tuple[int, int]]:
        """All edges as sorted (u, v) pairs with u < v."""
        return [
            (u, v)
            for u in range(self._n)
            for v in sorted(self._adjacency[u])
            if u < v
        ]

    def add_random_edge(self, rng: np.random.Generator) -> tuple[int, int]:
        """Insert one edge chosen uniformly among the currently absent pairs.

        Rejection-samples vertex pairs while the graph is sparse and switches
        to enumerating the absent pairs once fewer than a quarter remain, so
        the cost stays bounded as the graph approaches completeness.

        Raises:
            ValueError: If the graph is already complete.
        """
        absent = self.max_edges - self._m
        if absent == 0:
            raise ValueError("Cannot add a random edge to a complete graph")

        if 4 * absent >= self.max_edges:
            while True:
                u, v = (int(x) for x in rng.integers(0, self._n, size=2))
                if u != v and v not in self._adjacency[u]:
                    break
        else:
            candidates = [
                (u, v)
                for u in range(self._n)
                for v in range(u + 1, self._n)
                if v not in self._adjacency[u]
            ]
            u, v = candidates[int(rng.integers(len(candidates)))]

        self.add_edge(u, v)
        return (min(u, v), max(u, v))

    def copy(self) -> "LabelledGraph":
        clone = LabelledGraph(self._n, self._num_labels, self._labels)
        clone._adjacency = [set(nbrs) for nbrs in self._adjacency]
        clone._m = self._m
        return clone

    def to_csr(self) -> scipy.sparse.csr_matrix:
        """Symmetric 0/1 adjacency matrix (n x n)."""
        pairs = self.edges()
        if not pairs:
            return scipy.sparse.csr_matrix((self._n, self._n), dtype=np.int8)
        rows, cols = np.array(pairs, dtype=np.int64).T
        data = np.ones(2 * len(pairs), dtype=np.int8)
        return scipy.sparse.csr_matrix(
            (data, (np.concatenate([rows, cols]), np.concatenate([cols, rows]))),
            shape=(self._n, self._n),
        )

    @classmethod
    def from_csr(
        cls,
        adj: scipy.sparse.spmatrix,
        labels: Iterable[int],
        num_labels: int,
    ) -> "LabelledGraph":
        """Build a graph from any sparse adjacency; direction is discarded."""
        n = adj.shape[0]
        graph = cls(n, num_labels, labels)
        csr = scipy.sparse.csr_matrix(adj, copy=True)
        csr.eliminate_zeros()
        coo = csr.tocoo()
        for u, v in zip(coo.row.tolist(), coo.col.tolist()):
            if u != v:
                graph.add_edge(u, v)
        return graph

    def __repr__(self) -> str:
        return (
            f"LabelledGraph(n={self._n}, num_labels={self._num_labels}, "
            f"edges={self._m})"
        )
