"""Data types shared by the repair strategies."""

from dataclasses import dataclass
from enum import StrEnum


class Strategy(StrEnum):
    """Edge-insertion strategy used to repair proximity violations.

    NAIVE: Insert uniformly random absent edges until proximal ("hopeful").
    GREEDY: Pair vertices whose deficiencies complement each other, falling
            back to a random edge when an iteration makes no progress.
    """

    NAIVE = "naive"
    GREEDY = "greedy"


class RepairOutcome(StrEnum):
    """How a repair run terminated.

    PROXIMAL: The graph satisfies alpha-proximity.
    UNATTAINABLE: The graph is complete and still not alpha-proximal.
    BUDGET_EXHAUSTED: The caller's iteration cap was reached first.
    """

    PROXIMAL = "proximal"
    UNATTAINABLE = "unattainable"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass(frozen=True, slots=True)
class RepairResult:
    """Summary of one repair run over a graph."""

    strategy: Strategy
    alpha: float
    outcome: RepairOutcome
    edges_added: int  # all edges inserted, greedy and random fallback
    iterations: int  # repair loop iterations executed
    random_edges: int  # edges inserted by uniform random choice
    initial_max_distance: float
    final_max_distance: float

    @property
    def succeeded(self) -> bool:
        return self.outcome is RepairOutcome.PROXIMAL


class ProximityUnattainableError(Exception):
    """Raised when a graph became complete without reaching alpha-proximity."""

    def __init__(self, result: RepairResult) -> None:
        self.result = result
        super().__init__(
            f"alpha={result.alpha} is unattainable: graph is complete after "
            f"{result.edges_added} added edges, max distance "
            f"{result.final_max_distance:.6f}"
        )
