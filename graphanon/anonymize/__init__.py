"""Neighbourhood attribute disclosure protection by edge insertion."""

from graphanon.anonymize.distribution import LabelDistribution, LabelSet
from graphanon.anonymize.greedy import (
    VisitEntry,
    collect_visit_order,
    greedy_repair,
    run_greedy_iteration,
)
from graphanon.anonymize.naive import naive_repair
from graphanon.anonymize.pipeline import anonymize, repair
from graphanon.anonymize.proximity import (
    global_distribution,
    is_alpha_proximal,
    max_distance,
    neighbourhood_distribution,
    vertex_distances,
)
from graphanon.anonymize.types import (
    ProximityUnattainableError,
    RepairOutcome,
    RepairResult,
    Strategy,
)

__all__ = [
    "LabelDistribution",
    "LabelSet",
    "ProximityUnattainableError",
    "RepairOutcome",
    "RepairResult",
    "Strategy",
    "VisitEntry",
    "anonymize",
    "collect_visit_order",
    "global_distribution",
    "greedy_repair",
    "is_alpha_proximal",
    "max_distance",
    "naive_repair",
    "neighbourhood_distribution",
    "repair",
    "run_greedy_iteration",
    "vertex_distances",
]
