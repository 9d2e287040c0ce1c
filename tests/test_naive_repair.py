"""Tests for the naive (random edge) repair strategy."""

import itertools

import numpy as np
import pytest

from graphanon.anonymize.naive import naive_repair
from graphanon.anonymize.proximity import is_alpha_proximal
from graphanon.anonymize.types import RepairOutcome, Strategy
from graphanon.config.experiment import GraphConfig
from graphanon.graph.generation import generate_labelled_graph
from graphanon.graph.types import LabelledGraph


def _star_graph() -> LabelledGraph:
    """Hub 0 with label 0; leaves split evenly between labels 1 and 2."""
    graph = LabelledGraph(5, 3, [0, 1, 1, 2, 2])
    for leaf in range(1, 5):
        graph.add_edge(0, leaf)
    return graph


class TestNaiveRepair:
    """naive_repair terminates, only grows the edge set, and reports outcomes."""

    def test_already_proximal_adds_nothing(self) -> None:
        graph = LabelledGraph(3, 3, [0, 1, 2])
        for u, v in itertools.combinations(range(3), 2):
            graph.add_edge(u, v)
        result = naive_repair(graph, 0.0, np.random.default_rng(0))
        assert result.outcome is RepairOutcome.PROXIMAL
        assert result.succeeded
        assert result.edges_added == 0
        assert result.iterations == 0
        assert result.strategy is Strategy.NAIVE

    def test_two_vertex_pair_gets_connected(self) -> None:
        graph = LabelledGraph(2, 2, [0, 1])
        result = naive_repair(graph, 0.1, np.random.default_rng(1))
        assert result.outcome is RepairOutcome.PROXIMAL
        assert result.edges_added == 1
        assert graph.has_edge(0, 1)
        assert result.initial_max_distance == pytest.approx(0.5)
        assert result.final_max_distance == 0.0

    def test_edge_set_only_grows(self) -> None:
        rng = np.random.default_rng(2)
        graph = generate_labelled_graph(GraphConfig(n=30, num_labels=3, p=0.05), rng)
        before = set(graph.edges())
        m0 = graph.num_edges

        result = naive_repair(graph, 0.3, rng)

        assert before <= set(graph.edges())
        assert graph.num_edges == m0 + result.edges_added
        assert result.edges_added <= graph.max_edges - m0
        assert result.outcome is RepairOutcome.PROXIMAL
        assert is_alpha_proximal(graph, 0.3)

    def test_random_edges_equal_edges_added(self) -> None:
        graph = LabelledGraph(6, 2, [0, 0, 0, 1, 1, 1])
        result = naive_repair(graph, 0.2, np.random.default_rng(3))
        assert result.random_edges == result.edges_added == result.iterations

    def test_star_reaches_completeness_unattainable(self) -> None:
        """With a negative tolerance no graph qualifies, so repair runs to completeness."""
        graph = _star_graph()
        result = naive_repair(graph, -0.01, np.random.default_rng(4))
        assert result.outcome is RepairOutcome.UNATTAINABLE
        assert not result.succeeded
        assert graph.is_complete()
        assert result.edges_added == graph.max_edges - 4
        assert not is_alpha_proximal(graph, -0.01)

    def test_iteration_cap_reports_budget_exhausted(self) -> None:
        graph = LabelledGraph(2, 2, [0, 1])
        result = naive_repair(graph, 0.1, np.random.default_rng(5), max_iterations=0)
        assert result.outcome is RepairOutcome.BUDGET_EXHAUSTED
        assert result.edges_added == 0
        assert graph.num_edges == 0

    def test_same_seed_same_edges(self) -> None:
        config = GraphConfig(n=25, num_labels=4, p=0.05)
        g1 = generate_labelled_graph(config, np.random.default_rng(6))
        g2 = generate_labelled_graph(config, np.random.default_rng(6))
        naive_repair(g1, 0.3, np.random.default_rng(60))
        naive_repair(g2, 0.3, np.random.default_rng(60))
        assert g1.edges() == g2.edges()
