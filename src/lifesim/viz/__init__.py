"""
Visualization utilities.

- Universe heatmaps
- Population curves
"""

from lifesim.viz.fields import (
    CMAP_LIFE,
    plot_universe,
    plot_population,
    save_figure,
)

__all__ = [
    "CMAP_LIFE",
    "plot_universe",
    "plot_population",
    "save_figure",
]
