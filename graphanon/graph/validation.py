"""Structural validation for labelled graphs.

Checks the invariants the anonymization engine relies on:
1. Every label lies inside the alphabet
2. Adjacency is symmetric (undirected)
3. No self loops
4. The cached edge count matches the adjacency sets
"""

import logging

from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)


def validate_labelled_graph(graph: LabelledGraph) -> list[str]:
    """Validate a labelled graph.

    Args:
        graph: Graph to check.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []
    n = graph.n

    # 1. Label range
    for v in range(n):
        label = graph.label(v)
        if not 0 <= label < graph.num_labels:
            errors.append(
                f"Vertex {v} has label {label} outside [0, {graph.num_labels})"
            )

    # 2-3. Symmetry and self loops
    degree_sum = 0
    for u in range(n):
        for v in graph.neighbors(u):
            degree_sum += 1
            if u == v:
                errors.append(f"Self loop on vertex {u}")
            elif not 0 <= v < n:
                errors.append(f"Vertex {u} lists out-of-range neighbour {v}")
            elif not graph.has_edge(v, u):
                errors.append(f"Edge ({u}, {v}) is not mirrored by ({v}, {u})")

    # 4. Edge count
    if degree_sum != 2 * graph.num_edges:
        errors.append(
            f"Edge count {graph.num_edges} disagrees with degree sum {degree_sum}"
        )

    log.debug("Validated %r: %d errors", graph, len(errors))
    return errors
