"""Static figures for anonymization runs."""

from graphanon.visualization.distances import plot_distance_distribution
from graphanon.visualization.style import apply_style, save_figure

__all__ = [
    "apply_style",
    "plot_distance_distribution",
    "save_figure",
]
