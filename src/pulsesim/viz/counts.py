"""
Plots of engine history.

- Cumulative Low/High pulse counts per press
- Flip-flop bit raster (press × flip-flop)
"""

from __future__ import annotations
from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes


COLOR_LOW = "#3b6ea8"
COLOR_HIGH = "#d1495b"
CMAP_BITS = "Greys"


def plot_pulse_counts(
    history: np.ndarray,
    title: str = "Cumulative Pulse Counts",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Plot cumulative Low and High counts against press number.

    Args:
        history: [presses, 2] array of (low, high), as from
                 PulseEngine.get_count_history()
        title: Plot title
        ax: Existing axes (creates new if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    history = np.asarray(history)
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    presses = np.arange(1, len(history) + 1)
    if len(history) > 0:
        ax.plot(presses, history[:, 0], color=COLOR_LOW, label="Low")
        ax.plot(presses, history[:, 1], color=COLOR_HIGH, label="High")
        ax.legend(loc="upper left")

    ax.set_title(title)
    ax.set_xlabel("press")
    ax.set_ylabel("pulses")

    return fig, ax


def plot_flip_flop_states(
    states: np.ndarray,
    labels: Sequence[str] | None = None,
    title: str = "Flip-Flop States",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 4),
) -> tuple[Figure, Axes]:
    """
    Raster of flip-flop bits after each press.

    Args:
        states: [presses, n_flip_flops] bool array (stacked
                ModuleNetwork.flip_flop_states() snapshots)
        labels: Flip-flop labels for the y axis
        title: Plot title
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    states = np.atleast_2d(np.asarray(states, dtype=float))
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(
        states.T,
        origin="lower",
        cmap=CMAP_BITS,
        vmin=0.0,
        vmax=1.0,
        aspect="auto",
        interpolation="nearest",
    )

    if labels is not None:
        ax.set_yticks(np.arange(len(labels)))
        ax.set_yticklabels(labels)

    ax.set_title(title)
    ax.set_xlabel("press")
    ax.set_ylabel("flip-flop")

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
