"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required fields
and types before writing result.json files.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

from graphanon.anonymize.types import RepairOutcome, RepairResult
from graphanon.config.experiment import AnonymizationConfig
from graphanon.config.hashing import full_config_hash, graph_config_hash
from graphanon.results.run_id import generate_run_id

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "repair",
}

REQUIRED_REPAIR_FIELDS = {
    "strategy",
    "alpha",
    "outcome",
    "edges_added",
    "iterations",
    "random_edges",
    "initial_max_distance",
    "final_max_distance",
}


# Expected JSON type for each top-level field that is checked beyond presence.
_TOP_FIELD_TYPES: dict[str, type] = {
    "schema_version": str,
    "run_id": str,
    "description": str,
    "tags": list,
    "config": dict,
    "repair": dict,
}

_COUNT_FIELDS = ("edges_added", "iterations", "random_edges")
_DISTANCE_FIELDS = ("initial_max_distance", "final_max_distance")


def _validate_timestamp(ts: Any) -> list[str]:
    if not isinstance(ts, str):
        return ["timestamp must be a string"]
    try:
        datetime.fromisoformat(ts)
    except ValueError:
        return ["timestamp must be in ISO 8601 format"]
    return []


def _validate_repair_block(block: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    missing = REQUIRED_REPAIR_FIELDS - set(block.keys())
    if missing:
        errors.append(f"repair missing fields: {sorted(missing)}")

    outcome = block.get("outcome")
    if outcome is not None and outcome not in {o.value for o in RepairOutcome}:
        errors.append(f"repair.outcome {outcome!r} is not a known outcome")

    for name in _COUNT_FIELDS:
        value = block.get(name)
        if value is not None and (
            isinstance(value, bool) or not isinstance(value, int) or value < 0
        ):
            errors.append(f"repair.{name} must be a non-negative int")

    for name in _DISTANCE_FIELDS:
        value = block.get(name)
        if value is not None and not (
            isinstance(value, (int, float)) and 0.0 <= value <= 1.0
        ):
            errors.append(f"repair.{name} must be a number in [0, 1]")
    return errors


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    for name, expected in _TOP_FIELD_TYPES.items():
        if name in result and not isinstance(result[name], expected):
            errors.append(f"{name} must be a {expected.__name__}")

    if "timestamp" in result:
        errors.extend(_validate_timestamp(result["timestamp"]))

    if isinstance(result.get("repair"), dict):
        errors.extend(_validate_repair_block(result["repair"]))

    return errors


def repair_to_dict(result: RepairResult) -> dict[str, Any]:
    """Plain JSON-ready view of a RepairResult."""
    d = asdict(result)
    d["strategy"] = str(result.strategy)
    d["outcome"] = str(result.outcome)
    return d


def write_result(
    config: AnonymizationConfig,
    repair_result: RepairResult,
    graph_stats: dict[str, Any] | None = None,
    distances: dict[str, np.ndarray] | None = None,
    metadata: dict[str, Any] | None = None,
    results_dir: str | Path = "results",
) -> Path:
    """Write result.json and optional distances.npz under results/{run_id}/.

    Args:
        config: The anonymization configuration.
        repair_result: Outcome of the repair run.
        graph_stats: Optional scalar statistics (vertex and edge counts).
        distances: Optional per-vertex distance arrays keyed by stage name.
        metadata: Optional additional metadata merged into the metadata block.
        results_dir: Base directory for result output.

    Returns:
        The run output directory.

    Raises:
        ValueError: If the assembled result fails validation.
    """
    run_id = generate_run_id(config)

    result = {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "repair": repair_to_dict(repair_result),
        "graph": graph_stats or {},
        "metadata": {
            "config_hash": full_config_hash(config),
            "graph_config_hash": graph_config_hash(config),
            **(metadata or {}),
        },
    }

    errors = validate_result(result)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    out_dir = Path(results_dir) / run_id
    out_dir.mkdir(parents=True, exist_ok=True)
    with open(out_dir / "result.json", "w") as f:
        json.dump(result, f, indent=2)

    if distances:
        np.savez_compressed(str(out_dir / "distances.npz"), **distances)

    return out_dir


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Load and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )
    return result
