"""Greedy deficiency-guided repair.

Each iteration snapshots which labels every non-proximal vertex is missing,
visits those vertices in random order and, for every missing label, connects
the vertex to the first later vertex that both carries that label and is
itself missing the visiting vertex's label. One edge thereby relieves one
deficiency on each endpoint.

The matching is a first-fit scan in visit order, not a maximum matching.
"""

import logging
from dataclasses import dataclass

import numpy as np

from graphanon.anonymize.distribution import LabelSet
from graphanon.anonymize.proximity import (
    global_distribution,
    is_alpha_proximal,
    max_distance,
    neighbourhood_distribution,
)
from graphanon.anonymize.types import RepairOutcome, RepairResult, Strategy
from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)


@dataclass(slots=True)
class VisitEntry:
    """A vertex and the labels its neighbourhood is still recorded as missing."""

    vertex: int
    deficiencies: LabelSet


def collect_visit_order(
    graph: LabelledGraph, alpha: float, rng: np.random.Generator
) -> list[VisitEntry]:
    """Deficient vertices with their deficiency sets, in shuffled order.

    Vertices that are already within alpha of the global distribution are
    left out.
    """
    global_ld = global_distribution(graph)
    visit_order: list[VisitEntry] = []
    for v in range(graph.n):
        defs = neighbourhood_distribution(graph, v).get_deficiencies(global_ld, alpha)
        if defs:
            visit_order.append(VisitEntry(v, defs))

    # Random order spreads insertions over the whole vertex range.
    rng.shuffle(visit_order)
    return visit_order


def run_greedy_iteration(
    graph: LabelledGraph, alpha: float, rng: np.random.Generator
) -> int:
    """Run one greedy matching pass.

    For each entry (v, defs) in visit order and each label l in defs,
    ascending: scan only the entries after v for a mate u that is missing
    label(v) and has label l. On the first mate whose edge to v is new, insert
    it and drop label(v) from u's recorded deficiencies. v's own record is
    left as is; it is re-evaluated on the next pass.

    Returns:
        Number of edges inserted.
    """
    visit_order = collect_visit_order(graph, alpha, rng)
    num_edges_added = 0

    for i, entry in enumerate(visit_order):
        v = entry.vertex
        v_label = graph.label(v)

        for needed in entry.deficiencies:
            for mate in visit_order[i + 1:]:
                if not mate.deficiencies.contains(v_label):
                    continue
                if graph.label(mate.vertex) != needed:
                    continue
                if graph.add_edge(v, mate.vertex):
                    mate.deficiencies = mate.deficiencies.remove(v_label)
                    num_edges_added += 1
                    break

    log.debug(
        "Greedy pass: %d deficient vertices, %d edges added",
        len(visit_order),
        num_edges_added,
    )
    return num_edges_added


def greedy_repair(
    graph: LabelledGraph,
    alpha: float,
    rng: np.random.Generator,
    max_iterations: int | None = None,
) -> RepairResult:
    """Run greedy passes until the graph is alpha-proximal or complete.

    A pass that inserts no edge is followed by one uniformly random edge so
    the loop always makes progress toward completeness.

    Args:
        graph: Graph to repair, mutated in place.
        alpha: Proximity tolerance.
        rng: Source of shuffles and fallback edges.
        max_iterations: Optional cap on greedy passes.

    Returns:
        RepairResult describing the run.
    """
    initial = max_distance(graph)
    iterations = 0
    edges_added = 0
    random_edges = 0

    proximal = is_alpha_proximal(graph, alpha)
    while not proximal and not graph.is_complete():
        if max_iterations is not None and iterations >= max_iterations:
            break
        num_new_edges = run_greedy_iteration(graph, alpha, rng)
        iterations += 1
        edges_added += num_new_edges
        if num_new_edges == 0:
            u, v = graph.add_random_edge(rng)
            edges_added += 1
            random_edges += 1
            log.debug("Iteration %d: no mates, added random edge (%d, %d)", iterations, u, v)
        proximal = is_alpha_proximal(graph, alpha)

    if proximal:
        outcome = RepairOutcome.PROXIMAL
    elif graph.is_complete():
        outcome = RepairOutcome.UNATTAINABLE
    else:
        outcome = RepairOutcome.BUDGET_EXHAUSTED

    return RepairResult(
        strategy=Strategy.GREEDY,
        alpha=alpha,
        outcome=outcome,
        edges_added=edges_added,
        iterations=iterations,
        random_edges=random_edges,
        initial_max_distance=initial,
        final_max_distance=max_distance(graph),
    )
