"""Frozen, slotted anonymization configuration dataclasses."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Labelled graph source parameters.

    When input_path is set the graph is read from disk and the generation
    parameters are ignored.
    """

    n: int = 200  # number of vertices
    num_labels: int = 4  # label alphabet size
    p: float = 0.03  # Erdos-Renyi edge probability
    input_path: str | None = None


@dataclass(frozen=True, slots=True)
class RepairConfig:
    """Proximity repair parameters."""

    alpha: float = 0.3  # total variation tolerance
    strategy: str = "greedy"  # "naive" or "greedy"
    max_iterations: int | None = None  # external cap on repair loop iterations
    strict: bool = True  # raise when proximity is unattainable


@dataclass(frozen=True, slots=True)
class AnonymizationConfig:
    """Top-level anonymization configuration composing all sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    repair: RepairConfig = field(default_factory=RepairConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.graph.num_labels <= 0:
            raise ValueError(
                f"num_labels must be positive, got {self.graph.num_labels}"
            )
        if self.graph.n < 0:
            raise ValueError(f"n must be non-negative, got {self.graph.n}")
        if not 0.0 <= self.graph.p <= 1.0:
            raise ValueError(f"p ({self.graph.p}) must lie in [0, 1]")
        if not math.isfinite(self.repair.alpha) or not (
            0.0 <= self.repair.alpha <= 1.0
        ):
            raise ValueError(
                f"alpha ({self.repair.alpha}) must lie in [0, 1]"
            )
        if self.repair.strategy not in ("naive", "greedy"):
            raise ValueError(
                f"strategy must be 'naive' or 'greedy', "
                f"got {self.repair.strategy!r}"
            )
        if self.repair.max_iterations is not None and self.repair.max_iterations < 0:
            raise ValueError(
                f"max_iterations ({self.repair.max_iterations}) "
                f"must be non-negative"
            )
