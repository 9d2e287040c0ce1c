"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from graphanon.config.experiment import AnonymizationConfig


def _remove_nested(d: dict[str, Any], field_path: str) -> None:
    """Remove a dotted-path key such as "graph.n" from a nested dict."""
    *parents, leaf = field_path.split(".")
    current = d
    for part in parents:
        child = current.get(part)
        if not isinstance(child, dict):
            return
        current = child
    current.pop(leaf, None)


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional list of dotted field paths to exclude.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    for field_path in exclude_fields or []:
        _remove_nested(d, field_path)
    serialized = json.dumps(d, sort_keys=True, ensure_ascii=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def graph_config_hash(config: AnonymizationConfig) -> str:
    """Hash of the graph source only.

    Seed and repair settings are excluded so that every repair run over the
    same generated graph shares one cache entry per seed.
    """
    return config_hash(config.graph)


def full_config_hash(config: AnonymizationConfig) -> str:
    """Hash for full run identity, including seed and repair settings."""
    return config_hash(config)
