"""Graph caching by config hash with compressed sparse matrix storage.

Caches generated graphs so repeated repair runs (for example naive vs greedy
over the same input) start from an identical graph without regenerating it.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import scipy.sparse

from graphanon.config.experiment import AnonymizationConfig
from graphanon.config.hashing import graph_config_hash
from graphanon.graph.generation import generate_labelled_graph
from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/graphs")


def graph_cache_key(config: AnonymizationConfig) -> str:
    """Cache key = graph_config_hash + seed, e.g. "a1b2c3d4e5f6a7b8_s42".

    Repair settings, description and tags do not affect the key.
    """
    return f"{graph_config_hash(config)}_s{config.seed}"


def _cache_path(
    config: AnonymizationConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> Path:
    return Path(cache_dir) / graph_cache_key(config)


def save_graph(
    graph: LabelledGraph,
    config: AnonymizationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Save a graph to the cache.

    Stores:
    - adjacency.npz: scipy sparse matrix
    - metadata.json: labels, alphabet size, generation params

    Returns:
        Path to the cache directory for this graph.
    """
    cache_path = _cache_path(config, cache_dir)
    cache_path.mkdir(parents=True, exist_ok=True)

    scipy.sparse.save_npz(str(cache_path / "adjacency.npz"), graph.to_csr())

    metadata = {
        "n": graph.n,
        "num_labels": graph.num_labels,
        "num_edges": graph.num_edges,
        "labels": graph.labels.tolist(),
        "config_hash": graph_config_hash(config),
        "seed": config.seed,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with open(cache_path / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Graph cached at %s", cache_path)
    return cache_path


def load_graph(
    config: AnonymizationConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> LabelledGraph | None:
    """Load a cached graph, or None on a cache miss."""
    cache_path = _cache_path(config, cache_dir)
    for fname in ("adjacency.npz", "metadata.json"):
        if not (cache_path / fname).exists():
            return None

    adjacency = scipy.sparse.load_npz(str(cache_path / "adjacency.npz"))
    with open(cache_path / "metadata.json") as f:
        metadata = json.load(f)

    graph = LabelledGraph.from_csr(
        adjacency, np.array(metadata["labels"]), metadata["num_labels"]
    )
    if (
        metadata.get("config_hash") != graph_config_hash(config)
        or graph.num_edges != metadata.get("num_edges")
    ):
        log.warning("Ignoring stale graph cache entry at %s", cache_path)
        return None
    log.info("Graph loaded from cache: %s", cache_path)
    return graph


def generate_or_load_graph(
    config: AnonymizationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> LabelledGraph:
    """Generate a graph or load it from cache if available.

    Generation uses its own Generator seeded from config.seed, so the cached
    graph does not depend on how much randomness the caller has consumed.
    """
    key = graph_cache_key(config)

    cached = load_graph(config, cache_dir)
    if cached is not None:
        log.info("Cache hit for %s", key)
        return cached

    log.info("Cache miss for %s, generating...", key)
    graph = generate_labelled_graph(config.graph, np.random.default_rng(config.seed))
    save_graph(graph, config, cache_dir)
    return graph
