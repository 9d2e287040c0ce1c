"""Global and neighbourhood label distributions and the alpha-proximity predicate.

A graph is alpha-proximal when every vertex's closed neighbourhood (the vertex
itself plus its current neighbours) has a label distribution within total
variation distance alpha of the graph-wide label distribution.
"""

import logging

import numpy as np

from graphanon.anonymize.distribution import LabelDistribution
from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)


def global_distribution(graph: LabelledGraph) -> LabelDistribution:
    """One count per vertex label; totals n."""
    counts = np.bincount(graph.labels, minlength=graph.num_labels)
    return LabelDistribution(counts)


def neighbourhood_distribution(graph: LabelledGraph, v: int) -> LabelDistribution:
    """Counts of v's own label plus the label of every current neighbour of v."""
    counts = [0] * graph.num_labels
    counts[graph.label(v)] += 1
    for u in graph.neighbors(v):
        counts[graph.label(u)] += 1
    return LabelDistribution(counts)


def vertex_distances(graph: LabelledGraph) -> np.ndarray:
    """Distance of every vertex's neighbourhood distribution to the global one.

    Returns:
        float64 array of shape (n,).
    """
    global_ld = global_distribution(graph)
    return np.array(
        [
            neighbourhood_distribution(graph, v).distance(global_ld)
            for v in range(graph.n)
        ],
        dtype=np.float64,
    )


def max_distance(graph: LabelledGraph) -> float:
    """Largest neighbourhood-to-global distance; 0.0 for an empty graph."""
    if graph.n == 0:
        return 0.0
    return float(vertex_distances(graph).max())


def is_alpha_proximal(graph: LabelledGraph, alpha: float) -> bool:
    """True iff every vertex's neighbourhood is within alpha of the global distribution.

    Performs a full pass over all vertices on every call.
    """
    if graph.n == 0:
        return True
    global_ld = global_distribution(graph)
    worst = 0.0
    for v in range(graph.n):
        distance = neighbourhood_distribution(graph, v).distance(global_ld)
        if distance > worst:
            worst = distance
    log.debug("Max neighbourhood distance %.6f (alpha=%.6f)", worst, alpha)
    return worst <= alpha
