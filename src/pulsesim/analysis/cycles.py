"""
Press-count analysis: how many presses until a sink sees a pulse.

Brute force works for small networks. Real inputs are built from
independent counters feeding one final conjunction, which emits Low
only in the press where all of its inputs fire High together. Each
input fires with a fixed period, so the answer is the LCM of the
first press in which each input sends High.

All functions simulate on a copy: the caller's network is untouched.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

from pulsesim.analysis.structure import find_feeder
from pulsesim.core.engine import EngineConfig, PulseEngine
from pulsesim.core.modules import Conjunction
from pulsesim.core.pulse import Message, Pulse

if TYPE_CHECKING:
    from pulsesim.core.network import ModuleNetwork

logger = logging.getLogger(__name__)


DEFAULT_MAX_PRESSES = 100_000


def presses_until_pulse(
    network: "ModuleNetwork",
    target: str,
    pulse: Pulse = Pulse.LOW,
    max_presses: int = DEFAULT_MAX_PRESSES,
    config: EngineConfig | None = None,
) -> int | None:
    """
    First press in which `target` receives `pulse`, by direct simulation.

    Returns:
        Press number (1-based), or None if not reached within max_presses
    """
    engine = PulseEngine(network.copy(), config or EngineConfig())
    hit: list[int] = []

    def watch(press: int, message: Message) -> None:
        if message.to == target and message.pulse is pulse:
            hit.append(press)

    engine.add_listener(watch)
    for _ in range(max_presses):
        engine.press_button()
        if hit:
            return hit[0]
    return None


def first_high_presses(
    network: "ModuleNetwork",
    feeder: str,
    max_presses: int = DEFAULT_MAX_PRESSES,
    config: EngineConfig | None = None,
) -> dict[str, int | None]:
    """
    For each input of `feeder`, the first press in which it sends High to it.

    Stops early once every input has fired. Inputs that never fire
    within max_presses map to None.
    """
    inputs = list(dict.fromkeys(network.inputs_of(feeder)))
    first: dict[str, int | None] = dict.fromkeys(inputs)

    engine = PulseEngine(network.copy(), config or EngineConfig())

    def watch(press: int, message: Message) -> None:
        if (
            message.to == feeder
            and message.pulse is Pulse.HIGH
            and first.get(message.sender, 0) is None
        ):
            first[message.sender] = press

    engine.add_listener(watch)
    for _ in range(max_presses):
        engine.press_button()
        if all(press is not None for press in first.values()):
            break

    logger.debug("First High presses into %r: %s", feeder, first)
    return first


def lcm_of_cycles(cycles: Iterable[int]) -> int:
    """Least common multiple of positive cycle lengths."""
    values = np.array(list(cycles), dtype=object)
    if values.size == 0:
        raise ValueError("Need at least one cycle length")
    if any(v <= 0 for v in values):
        raise ValueError(f"Cycle lengths must be positive, got {values.tolist()}")
    # object dtype keeps Python ints, so large products do not overflow
    return int(np.lcm.reduce(values))


def fewest_presses_to_low(
    network: "ModuleNetwork",
    target: str = "rx",
    max_presses: int = DEFAULT_MAX_PRESSES,
    config: EngineConfig | None = None,
) -> int:
    """
    Fewest presses until `target` receives a Low pulse.

    Requires `target` to be fed by a single conjunction whose inputs
    fire High periodically.

    Raises:
        ValueError: unexpected structure, or an input that never fires
    """
    feeder = find_feeder(network, target)
    if not isinstance(feeder, Conjunction):
        raise ValueError(f"{target!r} is fed by {feeder.label!r}, which is not a conjunction")

    first = first_high_presses(network, feeder.label, max_presses, config)
    silent = [label for label, press in first.items() if press is None]
    if silent:
        raise ValueError(
            f"Inputs {silent} never sent High to {feeder.label!r} within {max_presses} presses"
        )

    return lcm_of_cycles(first.values())
