"""
Structural analysis of a module network.

Treats the network as a directed graph over modules and sinks.
Used to locate the conjunction feeding a sink and to split the
network into independent sub-circuits (typically one counter per
broadcaster output).
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import connected_components

if TYPE_CHECKING:
    from pulsesim.core.modules import Module
    from pulsesim.core.network import ModuleNetwork


def graph_labels(network: "ModuleNetwork") -> list[str]:
    """Module labels in registry order, followed by sinks."""
    return network.labels + network.sinks()


def adjacency_matrix(network: "ModuleNetwork") -> tuple[sparse.csr_matrix, list[str]]:
    """
    Directed adjacency matrix of the network.

    Returns:
        (matrix, labels) where matrix[i, j] = 1 if labels[i] sends to labels[j]
    """
    labels = graph_labels(network)
    index = {label: i for i, label in enumerate(labels)}

    edges = list(network.connections())
    rows = np.array([index[sender] for sender, _ in edges], dtype=np.int64)
    cols = np.array([index[receiver] for _, receiver in edges], dtype=np.int64)
    data = np.ones(len(edges), dtype=np.int8)

    n = len(labels)
    matrix = sparse.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()
    # Repeated outputs collapse to a single edge
    matrix.data[:] = 1
    return matrix, labels


def find_feeder(network: "ModuleNetwork", target: str) -> "Module":
    """
    The single module that sends to `target`.

    Raises:
        ValueError: if no module, or more than one, sends to `target`
    """
    senders = list(dict.fromkeys(network.inputs_of(target)))
    if len(senders) != 1:
        raise ValueError(
            f"Expected exactly one module feeding {target!r}, found {len(senders)}"
        )
    return network[senders[0]]


def find_subcircuits(
    network: "ModuleNetwork",
    exclude: Iterable[str] = (),
) -> list[list[str]]:
    """
    Weakly connected components once `exclude` labels are removed.

    Args:
        network: Network to split
        exclude: Labels to drop first (e.g. the broadcaster and the final feeder)

    Returns:
        Sorted label lists, ordered by their first label
    """
    matrix, labels = adjacency_matrix(network)
    excluded = set(exclude)
    keep = np.array([label not in excluded for label in labels], dtype=bool)

    sub = matrix[keep][:, keep]
    kept_labels = [label for label, k in zip(labels, keep) if k]
    if not kept_labels:
        return []

    n_components, component_of = connected_components(sub, directed=True, connection="weak")

    groups: list[list[str]] = [[] for _ in range(n_components)]
    for label, component in zip(kept_labels, component_of):
        groups[component].append(label)

    return sorted(sorted(group) for group in groups)
