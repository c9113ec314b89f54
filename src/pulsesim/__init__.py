"""
pulsesim: discrete-event pulse propagation simulator

A network of typed modules exchanging High/Low pulses in strict
FIFO order. Each button press injects one Low pulse into the
broadcaster and runs until the queue drains.

Core concepts:
- Pulses travel as addressed messages
- Flip-flops toggle on Low and ignore High
- Conjunctions remember the last pulse from every input
- Counters accumulate across presses
"""

__version__ = "0.1.0"
