"""Random labelled graph generation for anonymization experiments.

Edges follow the Erdos-Renyi G(n, p) model and labels are spread as evenly
as the alphabet size allows.
"""

import logging

import numpy as np
import scipy.sparse

from graphanon.config.experiment import GraphConfig
from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)


def evenly_distribute_labels(
    n: int, num_labels: int, rng: np.random.Generator
) -> np.ndarray:
    """Assign labels so that every label covers n // num_labels vertices.

    The n % num_labels leftover vertices each receive a distinct label chosen
    at random, and the resulting label sequence is shuffled over vertices.

    Args:
        n: Number of vertices.
        num_labels: Label alphabet size.
        rng: numpy random Generator for reproducibility.

    Returns:
        int64 array of shape (n,) mapping vertex -> label.
    """
    if num_labels <= 0:
        raise ValueError(f"num_labels must be positive, got {num_labels}")

    per_label, remainder = divmod(n, num_labels)
    labels = np.concatenate([
        np.repeat(np.arange(num_labels, dtype=np.int64), per_label),
        rng.choice(num_labels, size=remainder, replace=False).astype(np.int64),
    ])
    rng.shuffle(labels)
    return labels


def sample_adjacency(
    n: int, p: float, rng: np.random.Generator
) -> scipy.sparse.csr_matrix:
    """Sample a symmetric G(n, p) adjacency matrix without self loops."""
    upper = np.triu(rng.random((n, n)) < p, k=1)
    edges = (upper | upper.T).astype(np.int8)
    return scipy.sparse.csr_matrix(edges)


def generate_labelled_graph(
    config: GraphConfig, rng: np.random.Generator
) -> LabelledGraph:
    """Generate a random labelled graph from a GraphConfig.

    Args:
        config: Graph parameters (n, num_labels, p).
        rng: numpy random Generator for reproducibility.

    Returns:
        A fresh LabelledGraph.
    """
    labels = evenly_distribute_labels(config.n, config.num_labels, rng)
    adj = sample_adjacency(config.n, config.p, rng)
    graph = LabelledGraph.from_csr(adj, labels, config.num_labels)
    log.info(
        "Generated labelled graph (n=%d, labels=%d, p=%.4f, edges=%d)",
        graph.n,
        graph.num_labels,
        config.p,
        graph.num_edges,
    )
    return graph
