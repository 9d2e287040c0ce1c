"""Anonymization configuration system with frozen, hashable, serializable dataclasses."""

from graphanon.config.defaults import ANCHOR_CONFIG
from graphanon.config.experiment import AnonymizationConfig, GraphConfig, RepairConfig
from graphanon.config.hashing import config_hash, full_config_hash, graph_config_hash
from graphanon.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "AnonymizationConfig",
    "GraphConfig",
    "RepairConfig",
    "ANCHOR_CONFIG",
    "config_hash",
    "graph_config_hash",
    "full_config_hash",
    "config_to_dict",
    "config_from_dict",
    "config_to_json",
    "config_from_json",
]
