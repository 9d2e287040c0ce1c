"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone
from pathlib import Path

from graphanon.config.experiment import AnonymizationConfig


def generate_run_id(config: AnonymizationConfig) -> str:
    """Generate a scannable run ID from config parameters.

    Format: {source}_a{alpha}_{strategy}_s{seed}_{YYYYMMDD}_{HHMMSS}
    where source is n{n}_l{num_labels} for generated graphs or the input
    file stem otherwise.
    Example: n200_l4_a0.3_greedy_s42_20261019_143012
    """
    ts = datetime.now(timezone.utc)
    if config.graph.input_path is not None:
        source = Path(config.graph.input_path).stem
    else:
        source = f"n{config.graph.n}_l{config.graph.num_labels}"
    return (
        f"{source}"
        f"_a{config.repair.alpha:g}"
        f"_{config.repair.strategy}"
        f"_s{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
