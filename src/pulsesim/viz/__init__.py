"""
Visualization utilities.

- Cumulative pulse counts
- Flip-flop state rasters
"""

from pulsesim.viz.counts import (
    plot_pulse_counts,
    plot_flip_flop_states,
    save_figure,
)

__all__ = [
    "plot_pulse_counts",
    "plot_flip_flop_states",
    "save_figure",
]
