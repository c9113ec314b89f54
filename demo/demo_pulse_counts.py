#!/usr/bin/env python3
"""
Demo: Pulse Counts in a Feedback Network

Presses the button 1000 times on a small feedback network and shows:

1. Low and High pulses accumulate across presses
2. Flip-flop bits cycle with a fixed period
3. The final product of the counters

Output: output/demo_pulse_counts/counts.png
        output/demo_pulse_counts/flip_flops.png
"""

import os

import numpy as np
import matplotlib.pyplot as plt

from pulsesim.core import PulseEngine, parse_network
from pulsesim.viz import plot_flip_flop_states, plot_pulse_counts, save_figure


NETWORK = """broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output
"""


def main():
    print("=" * 60)
    print("  PULSE COUNTS IN A FEEDBACK NETWORK")
    print("=" * 60)

    network = parse_network(NETWORK)
    print("\n1. Network:")
    for line in str(network).splitlines():
        print(f"   {line}")
    print(f"   Sinks: {', '.join(network.sinks())}")

    print("\n2. Pressing the button 1000 times...")
    engine = PulseEngine(network)
    snapshots = []
    for _ in range(1000):
        engine.press_button()
        snapshots.append(network.flip_flop_states())

    states = np.stack(snapshots)
    print(f"   Low pulses:  {engine.low_count}")
    print(f"   High pulses: {engine.high_count}")
    print(f"   Product:     {engine.value()}")

    # First press whose flip-flop bits repeat those after press 1
    repeats = np.nonzero((states[1:] == states[0]).all(axis=1))[0]
    if len(repeats) > 0:
        print(f"   Flip-flop state period: {repeats[0] + 1} presses")

    os.makedirs("output/demo_pulse_counts", exist_ok=True)

    fig, _ = plot_pulse_counts(engine.get_count_history())
    save_figure(fig, "output/demo_pulse_counts/counts.png")
    plt.close(fig)
    print("\n   Saved: output/demo_pulse_counts/counts.png")

    labels = [ff.label for ff in network.flip_flops()]
    fig, _ = plot_flip_flop_states(states[:40], labels=labels, title="Flip-Flop States (first 40 presses)")
    save_figure(fig, "output/demo_pulse_counts/flip_flops.png")
    plt.close(fig)
    print("   Saved: output/demo_pulse_counts/flip_flops.png")

    print("\n" + "=" * 60)
    print("  Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
