"""Tests for global/neighbourhood distributions and the alpha-proximity predicate."""

import itertools

import numpy as np
import pytest

from graphanon.anonymize.proximity import (
    global_distribution,
    is_alpha_proximal,
    max_distance,
    neighbourhood_distribution,
    vertex_distances,
)
from graphanon.graph.generation import generate_labelled_graph
from graphanon.config.experiment import GraphConfig
from graphanon.graph.types import LabelledGraph


def _complete_graph(labels: list[int], num_labels: int) -> LabelledGraph:
    graph = LabelledGraph(len(labels), num_labels, labels)
    for u, v in itertools.combinations(range(len(labels)), 2):
        graph.add_edge(u, v)
    return graph


def _path_graph() -> LabelledGraph:
    """0 - 1 - 2 with labels [0, 1, 1]."""
    graph = LabelledGraph(3, 2, [0, 1, 1])
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    return graph


class TestDistributions:
    """Global and neighbourhood label counts."""

    def test_global_counts_every_vertex(self) -> None:
        graph = _path_graph()
        global_ld = global_distribution(graph)
        assert global_ld.counts.tolist() == [1, 2]
        assert global_ld.total == graph.n

    def test_global_counts_unused_labels(self) -> None:
        graph = LabelledGraph(2, 4, [0, 0])
        assert global_distribution(graph).counts.tolist() == [2, 0, 0, 0]

    def test_neighbourhood_includes_own_label(self) -> None:
        graph = _path_graph()
        assert neighbourhood_distribution(graph, 0).counts.tolist() == [1, 1]
        assert neighbourhood_distribution(graph, 1).counts.tolist() == [1, 2]

    def test_neighbourhood_total_is_degree_plus_one(self) -> None:
        graph = _path_graph()
        for v in range(graph.n):
            assert neighbourhood_distribution(graph, v).total == graph.degree(v) + 1

    def test_isolated_vertex_sees_only_itself(self) -> None:
        graph = LabelledGraph(2, 3, [2, 0])
        assert neighbourhood_distribution(graph, 0).counts.tolist() == [0, 0, 1]

    def test_edge_changes_only_endpoint_neighbourhoods(self) -> None:
        graph = LabelledGraph(4, 2, [0, 1, 0, 1])
        graph.add_edge(2, 3)
        global_before = global_distribution(graph)
        before = [neighbourhood_distribution(graph, v) for v in range(4)]

        graph.add_edge(0, 1)

        assert global_distribution(graph) == global_before
        after = [neighbourhood_distribution(graph, v) for v in range(4)]
        assert after[0] != before[0]
        assert after[1] != before[1]
        assert after[2] == before[2]
        assert after[3] == before[3]


class TestProximityPredicate:
    """is_alpha_proximal and distance summaries."""

    def test_complete_graph_is_proximal_at_zero(self) -> None:
        graph = _complete_graph([0, 1, 1, 2, 0], 3)
        assert is_alpha_proximal(graph, 0.0)
        assert max_distance(graph) == 0.0

    def test_isolated_pair_threshold(self) -> None:
        graph = LabelledGraph(2, 2, [0, 1])
        assert not is_alpha_proximal(graph, 0.4)
        assert is_alpha_proximal(graph, 0.5)

    def test_empty_graph_is_proximal(self) -> None:
        graph = LabelledGraph(0, 1)
        assert is_alpha_proximal(graph, 0.0)
        assert max_distance(graph) == 0.0
        assert vertex_distances(graph).shape == (0,)

    def test_single_label_graph_is_always_proximal(self) -> None:
        graph = LabelledGraph(5, 1)
        assert is_alpha_proximal(graph, 0.0)

    def test_vertex_distances_match_predicate(self) -> None:
        rng = np.random.default_rng(3)
        graph = generate_labelled_graph(GraphConfig(n=30, num_labels=3, p=0.1), rng)
        distances = vertex_distances(graph)
        assert distances.shape == (30,)
        worst = float(distances.max())
        assert max_distance(graph) == worst
        assert is_alpha_proximal(graph, worst)
        if worst > 0:
            assert not is_alpha_proximal(graph, worst - 1e-9)

    def test_vertex_distances_values(self) -> None:
        graph = _path_graph()
        # global proportions [1/3, 2/3]
        np.testing.assert_allclose(
            vertex_distances(graph), [1 / 6, 0.0, 1 / 3], atol=1e-12
        )

    def test_predicate_is_idempotent(self) -> None:
        rng = np.random.default_rng(5)
        graph = generate_labelled_graph(GraphConfig(n=25, num_labels=4, p=0.1), rng)
        edges_before = graph.edges()
        first = is_alpha_proximal(graph, 0.3)
        second = is_alpha_proximal(graph, 0.3)
        assert first == second
        assert graph.edges() == edges_before

    @pytest.mark.parametrize("alpha", [0.0, 0.25, 1.0])
    def test_predicate_does_not_mutate(self, alpha: float) -> None:
        graph = _path_graph()
        is_alpha_proximal(graph, alpha)
        assert graph.num_edges == 2
