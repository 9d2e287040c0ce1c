"""JSON serialization and deserialization for anonymization configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from graphanon.config.experiment import AnonymizationConfig

# strict rejects unknown keys; cast turns JSON arrays back into tuples.
_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_dict(config: AnonymizationConfig) -> dict[str, Any]:
    """Convert an AnonymizationConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> AnonymizationConfig:
    """Reconstruct an AnonymizationConfig from a plain dictionary."""
    return from_dict(data_class=AnonymizationConfig, data=d, config=_DACITE_CONFIG)


def config_to_json(config: AnonymizationConfig) -> str:
    """Serialize with sorted keys and 2-space indent for diffability."""
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> AnonymizationConfig:
    """Deserialize a JSON string to an AnonymizationConfig.

    Missing keys fall back to dataclass defaults, so a config file only
    needs to list the values it overrides.
    """
    return config_from_dict(json.loads(json_str))
