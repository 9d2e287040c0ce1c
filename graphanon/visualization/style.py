"""Shared figure style for anonymization reports.

Figures render headless on the Agg backend and are written twice: a 300 dpi
PNG for quick viewing and an SVG with live text for papers.
"""

import matplotlib
matplotlib.use("Agg")

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns

PALETTE = sns.color_palette("colorblind", n_colors=8)

# Input graph vs repaired graph, consistent across every figure.
BEFORE_COLOR = PALETTE[3]
AFTER_COLOR = PALETTE[0]
THRESHOLD_COLOR = (0.5, 0.5, 0.5)

FIGURE_FORMATS = ("png", "svg")

_RC_OVERRIDES = {
    "figure.dpi": 150,
    "savefig.dpi": 300,
    "font.size": 10,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "legend.fontsize": 9,
    "figure.figsize": (7, 4.5),
    "svg.fonttype": "none",
}


def apply_style() -> None:
    """Switch to the whitegrid theme and report-sized fonts. Safe to repeat."""
    sns.set_theme(style="whitegrid")
    plt.rcParams.update(_RC_OVERRIDES)


def save_figure(
    fig: plt.Figure,
    output_dir: Path,
    name: str,
    formats: tuple[str, ...] = FIGURE_FORMATS,
) -> tuple[Path, ...]:
    """Write fig as output_dir/name.<fmt> for each format and close it.

    Returns:
        The written paths, in the order of formats.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for fmt in formats:
        path = output_dir / f"{name}.{fmt}"
        fig.savefig(path, bbox_inches="tight")
        paths.append(path)
    plt.close(fig)
    return tuple(paths)
