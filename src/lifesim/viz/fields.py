"""
2D visualization of a universe.

Provides:
- Binary heatmap of the current generation
- Population curve over a run

All plots use matplotlib and return (fig, ax) so they can be composed.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from lifesim.core.universe import Universe


# Dead cells: warm white (blanc-cassé), live cells: dark purple
CMAP_LIFE = ListedColormap(
    [
        (0.993, 0.978, 0.925),
        (0.267, 0.004, 0.329),
    ],
    name="life",
)


def plot_universe(
    universe: "Universe",
    title: str = "",
    ax: Axes | None = None,
    gridlines: bool = True,
    figsize: tuple[float, float] = (6, 6),
) -> tuple[Figure, Axes]:
    """
    Plot the current generation as a heatmap.

    Row 0 is drawn at the top, matching the text rendering.

    Args:
        universe: Universe to draw
        title: Plot title (defaults to the generation number)
        ax: Existing axes to plot on (creates new figure if None)
        gridlines: Draw thin lines between cells
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(
        universe.grid,
        origin="upper",
        cmap=CMAP_LIFE,
        vmin=0,
        vmax=1,
        aspect="equal",
        interpolation="nearest",
    )

    if gridlines:
        rows, columns = universe.shape
        ax.set_xticks(np.arange(-0.5, columns, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
        ax.grid(which="minor", color="gray", linewidth=0.3, alpha=0.5)
        ax.tick_params(which="minor", length=0)

    ax.set_title(title or f"Generation {universe.generation}")
    ax.set_xlabel("column")
    ax.set_ylabel("row")

    return fig, ax


def plot_population(
    populations: Sequence[int] | np.ndarray,
    title: str = "Population",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Plot live-cell count against generation.

    Args:
        populations: Population per generation, seed first
        title: Plot title
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    populations = np.asarray(populations)
    ax.plot(np.arange(len(populations)), populations, "b-", linewidth=2)
    ax.set_xlabel("Generation")
    ax.set_ylabel("Live cells")
    ax.set_title(title)
    ax.set_ylim(bottom=0)
    ax.grid(True, alpha=0.3)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
