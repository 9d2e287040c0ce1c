"""Strategy dispatch and the top-level anonymize() entry point."""

import logging

import numpy as np

from graphanon.anonymize.greedy import greedy_repair
from graphanon.anonymize.naive import naive_repair
from graphanon.anonymize.types import (
    ProximityUnattainableError,
    RepairOutcome,
    RepairResult,
    Strategy,
)
from graphanon.config.experiment import RepairConfig
from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)

_STRATEGIES = {
    Strategy.NAIVE: naive_repair,
    Strategy.GREEDY: greedy_repair,
}


def repair(
    graph: LabelledGraph,
    alpha: float,
    strategy: Strategy | str,
    rng: np.random.Generator,
    max_iterations: int | None = None,
) -> RepairResult:
    """Run the named repair strategy on graph (mutated in place).

    Raises:
        ValueError: For an unknown strategy name.
    """
    try:
        repair_fn = _STRATEGIES[Strategy(strategy)]
    except ValueError as exc:
        raise ValueError(
            f"Unknown strategy {strategy!r}; expected one of "
            f"{[s.value for s in Strategy]}"
        ) from exc
    return repair_fn(graph, alpha, rng, max_iterations=max_iterations)


def anonymize(
    graph: LabelledGraph,
    config: RepairConfig,
    rng: np.random.Generator,
) -> RepairResult:
    """Repair graph toward alpha-proximity as configured.

    Args:
        graph: Graph to repair, mutated in place.
        config: Repair parameters (alpha, strategy, cap, strictness).
        rng: Source of all random choices.

    Returns:
        RepairResult for the run.

    Raises:
        ProximityUnattainableError: If the graph became complete without
            reaching proximity and config.strict is set.
    """
    log.info(
        "Repairing %r with %s strategy (alpha=%.4f)",
        graph,
        config.strategy,
        config.alpha,
    )
    result = repair(
        graph,
        config.alpha,
        config.strategy,
        rng,
        max_iterations=config.max_iterations,
    )

    log.info(
        "Repair finished: outcome=%s, edges_added=%d (random=%d), "
        "iterations=%d, max distance %.4f -> %.4f",
        result.outcome,
        result.edges_added,
        result.random_edges,
        result.iterations,
        result.initial_max_distance,
        result.final_max_distance,
    )

    if result.outcome is RepairOutcome.UNATTAINABLE:
        log.warning("alpha=%.4f is unattainable for this labelling", config.alpha)
        if config.strict:
            raise ProximityUnattainableError(result)
    elif result.outcome is RepairOutcome.BUDGET_EXHAUSTED:
        log.warning(
            "Iteration cap %s reached before proximity", config.max_iterations
        )
    return result
