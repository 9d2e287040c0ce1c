"""Label-frequency histograms and deficiency sets.

A LabelDistribution counts how often each label occurs among some group of
vertices: the whole graph (total n) or one vertex's closed neighbourhood
(total degree + 1). Distributions with different totals are compared through
their proportion vectors using total variation distance,

    TV(p, q) = 1/2 * sum_i |p_i - q_i| = sum_i max(0, q_i - p_i),

which is symmetric, lies in [0, 1] and is 0 exactly when the shapes match.
The second form makes TV the sum of per-label shortfalls, which is what ties
deficiencies to distance: a distribution with no deficient label cannot be
further than alpha from the target.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class LabelSet:
    """Immutable set of label indices backed by an arbitrary-precision int.

    Bit i of ``mask`` is set iff label i is a member. Python ints grow as
    needed, so the alphabet size is unbounded.
    """

    mask: int = 0

    def __post_init__(self) -> None:
        if self.mask < 0:
            raise ValueError(f"mask must be non-negative, got {self.mask}")

    @classmethod
    def from_labels(cls, labels: Iterable[int]) -> "LabelSet":
        mask = 0
        for label in labels:
            if label < 0:
                raise ValueError(f"Labels must be non-negative, got {label}")
            mask |= 1 << label
        return cls(mask)

    def contains(self, label: int) -> bool:
        return label >= 0 and bool(self.mask >> label & 1)

    def add(self, label: int) -> "LabelSet":
        return LabelSet(self.mask | 1 << label)

    def remove(self, label: int) -> "LabelSet":
        return LabelSet(self.mask & ~(1 << label))

    def lowest(self) -> int:
        """Smallest member (lowest set bit).

        Raises:
            ValueError: If the set is empty.
        """
        if not self.mask:
            raise ValueError("lowest() of an empty LabelSet")
        return (self.mask & -self.mask).bit_length() - 1

    def __contains__(self, label: object) -> bool:
        return isinstance(label, int) and self.contains(label)

    def __iter__(self) -> Iterator[int]:
        remaining = self.mask
        while remaining:
            low = remaining & -remaining
            yield low.bit_length() - 1
            remaining ^= low

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def __bool__(self) -> bool:
        return self.mask != 0

    def __repr__(self) -> str:
        return f"LabelSet({sorted(self)})"


class LabelDistribution:
    """Immutable histogram of label counts over a fixed alphabet.

    Counts are stored raw; normalization happens only inside distance and
    deficiency computations.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self, counts: Sequence[int] | np.ndarray) -> None:
        arr = np.array(counts, dtype=np.int64)
        if arr.ndim != 1:
            raise ValueError(f"counts must be one-dimensional, got shape {arr.shape}")
        if arr.shape[0] == 0:
            raise ValueError("Label alphabet must contain at least one label")
        if (arr < 0).any():
            raise ValueError(f"counts must be non-negative, got {arr.tolist()}")
        arr.flags.writeable = False
        self._counts = arr
        self._total = int(arr.sum())

    @property
    def counts(self) -> np.ndarray:
        return self._counts

    @property
    def num_labels(self) -> int:
        return int(self._counts.shape[0])

    @property
    def total(self) -> int:
        return self._total

    def proportions(self) -> np.ndarray:
        """Per-label share of the total.

        Raises:
            ValueError: If every count is zero.
        """
        if self._total == 0:
            raise ValueError("An empty distribution has no proportions")
        return self._counts / self._total

    def _check_compatible(self, other: "LabelDistribution") -> None:
        if other.num_labels != self.num_labels:
            raise ValueError(
                f"Alphabet size mismatch: {self.num_labels} vs {other.num_labels}"
            )

    def distance(self, other: "LabelDistribution") -> float:
        """Total variation distance between the two proportion vectors."""
        self._check_compatible(other)
        diff = np.abs(self.proportions() - other.proportions())
        # rounding can push disjoint supports a hair above 1
        return min(float(0.5 * diff.sum()), 1.0)

    def get_deficiencies(
        self, global_ld: "LabelDistribution", alpha: float
    ) -> LabelSet:
        """Labels this distribution under-represents relative to global_ld.

        Returns an empty set when this distribution is already within alpha
        of global_ld. Otherwise every label whose local proportion is strictly
        below its global proportion is deficient.
        """
        if self.distance(global_ld) <= alpha:
            return LabelSet()
        # c_i / t < g_i / T compared exactly as c_i * T < g_i * t
        short = np.flatnonzero(
            self._counts * global_ld.total < global_ld.counts * self._total
        )
        return LabelSet.from_labels(short.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelDistribution):
            return NotImplemented
        return np.array_equal(self._counts, other._counts)

    def __hash__(self) -> int:
        return hash(tuple(self._counts.tolist()))

    def __repr__(self) -> str:
        return f"LabelDistribution({self._counts.tolist()})"
