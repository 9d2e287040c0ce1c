"""Labelled graph container, generation, file format and caching."""

from graphanon.graph.cache import (
    DEFAULT_CACHE_DIR,
    generate_or_load_graph,
    graph_cache_key,
    load_graph,
    save_graph,
)
from graphanon.graph.generation import (
    evenly_distribute_labels,
    generate_labelled_graph,
    sample_adjacency,
)
from graphanon.graph.io import GraphFormatError, read_labelled_graph, write_labelled_graph
from graphanon.graph.types import LabelledGraph
from graphanon.graph.validation import validate_labelled_graph

__all__ = [
    "DEFAULT_CACHE_DIR",
    "GraphFormatError",
    "LabelledGraph",
    "evenly_distribute_labels",
    "generate_labelled_graph",
    "generate_or_load_graph",
    "graph_cache_key",
    "load_graph",
    "read_labelled_graph",
    "sample_adjacency",
    "save_graph",
    "validate_labelled_graph",
    "write_labelled_graph",
]
