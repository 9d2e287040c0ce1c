"""Plain-text adjacency list format for labelled graphs.

The first line holds ``n l`` (vertex count, label alphabet size). Each of the
next n lines describes one vertex in increasing id order: its label followed
by the ids of its neighbours, whitespace separated. An edge only needs to be
listed on one endpoint's line; the reverse direction is implied.
"""

import logging
from pathlib import Path

from graphanon.graph.types import LabelledGraph

log = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """Raised when a graph file does not follow the adjacency list format."""


def _parse_ints(line: str, path: Path, lineno: int) -> list[int]:
    try:
        return [int(tok) for tok in line.split()]
    except ValueError as exc:
        raise GraphFormatError(f"{path}:{lineno}: non-integer token") from exc


def read_labelled_graph(path: str | Path) -> LabelledGraph:
    """Parse a labelled graph file.

    Raises:
        FileNotFoundError: If the file does not exist.
        GraphFormatError: If the header, a vertex line, a label or a
            neighbour id is malformed.
    """
    path = Path(path)
    lines = path.read_text().splitlines()
    if not lines:
        raise GraphFormatError(f"{path}: empty file")

    header = _parse_ints(lines[0], path, 1)
    if len(header) != 2:
        raise GraphFormatError(f"{path}:1: header must be 'n l', got {lines[0]!r}")
    n, num_labels = header
    if n <= 0:
        raise GraphFormatError(
            f"{path}:1: did not parse a positive number of vertices"
        )
    if num_labels <= 0:
        raise GraphFormatError(f"{path}:1: label alphabet size must be positive")
    if len(lines) - 1 < n:
        raise GraphFormatError(
            f"{path}: expected {n} vertex lines, found {len(lines) - 1}"
        )

    rows = [_parse_ints(lines[u + 1], path, u + 2) for u in range(n)]
    labels: list[int] = []
    for u, row in enumerate(rows):
        if not row:
            raise GraphFormatError(f"{path}:{u + 2}: missing label for vertex {u}")
        if not 0 <= row[0] < num_labels:
            raise GraphFormatError(
                f"{path}:{u + 2}: label {row[0]} outside [0, {num_labels})"
            )
        labels.append(row[0])

    graph = LabelledGraph(n, num_labels, labels)
    for u, row in enumerate(rows):
        for v in row[1:]:
            if not 0 <= v < n or v == u:
                raise GraphFormatError(
                    f"{path}:{u + 2}: invalid neighbour {v} for vertex {u}"
                )
            graph.add_edge(u, v)

    log.info("Read %r from %s", graph, path)
    return graph


def write_labelled_graph(graph: LabelledGraph, path: str | Path) -> Path:
    """Write a graph in the adjacency list format, neighbours sorted."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    out = [f"{graph.n} {graph.num_labels}"]
    for u in range(graph.n):
        out.append(
            " ".join(str(x) for x in [graph.label(u), *sorted(graph.neighbors(u))])
        )
    path.write_text("\n".join(out) + "\n")
    log.info("Wrote %r to %s", graph, path)
    return path
