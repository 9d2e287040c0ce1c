"""Naive ("hopeful") repair: random edge insertion until alpha-proximal.

Serves as the baseline for the greedy strategy. It always terminates because
each iteration adds one distinct edge, but it knows nothing about which
labels are missing and therefore tends to add many more edges.
"""

import logging

import numpy as np

from graphanon.anonymize.proximity import is_alpha_proximal, max_distance
from graphanon.anonymize.types import RepairOutcome, RepairResult, Strategy
from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)


def naive_repair(
    graph: LabelledGraph,
    alpha: float,
    rng: np.random.Generator,
    max_iterations: int | None = None,
) -> RepairResult:
    """Add uniformly random edges until the graph is alpha-proximal or complete.

    Mutates graph in place; existing edges are never removed.

    Args:
        graph: Graph to repair.
        alpha: Proximity tolerance.
        rng: Source of all random edge choices.
        max_iterations: Optional cap on inserted edges. None means run until
            proximal or complete.

    Returns:
        RepairResult describing the run.
    """
    initial = max_distance(graph)
    iterations = 0

    proximal = is_alpha_proximal(graph, alpha)
    while not proximal and not graph.is_complete():
        if max_iterations is not None and iterations >= max_iterations:
            break
        u, v = graph.add_random_edge(rng)
        iterations += 1
        log.debug("Iteration %d: added random edge (%d, %d)", iterations, u, v)
        proximal = is_alpha_proximal(graph, alpha)

    if proximal:
        outcome = RepairOutcome.PROXIMAL
    elif graph.is_complete():
        outcome = RepairOutcome.UNATTAINABLE
    else:
        outcome = RepairOutcome.BUDGET_EXHAUSTED

    return RepairResult(
        strategy=Strategy.NAIVE,
        alpha=alpha,
        outcome=outcome,
        edges_added=iterations,
        iterations=iterations,
        random_edges=iterations,
        initial_max_distance=initial,
        final_max_distance=max_distance(graph),
    )
