"""
Analysis layer: derived answers over a module network.

IMPORTANT: The engine never sees this layer. One-way derivation only,
and every simulation here runs on a copy of the network.

- adjacency_matrix / find_subcircuits: graph structure via scipy
- find_feeder: the module feeding a sink
- presses_until_pulse: brute-force press count
- fewest_presses_to_low: cycle detection + LCM
"""

from pulsesim.analysis.structure import (
    adjacency_matrix,
    find_feeder,
    find_subcircuits,
    graph_labels,
)
from pulsesim.analysis.cycles import (
    first_high_presses,
    fewest_presses_to_low,
    lcm_of_cycles,
    presses_until_pulse,
)

__all__ = [
    "adjacency_matrix",
    "find_feeder",
    "find_subcircuits",
    "graph_labels",
    "first_high_presses",
    "fewest_presses_to_low",
    "lcm_of_cycles",
    "presses_until_pulse",
]
