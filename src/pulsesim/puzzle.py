"""
Puzzle answers for a module definition text.

- part1: product of Low and High pulse counts after N presses
- part2: fewest presses until the final sink receives a Low pulse
"""

from __future__ import annotations

from pulsesim.analysis.cycles import fewest_presses_to_low
from pulsesim.core.engine import EngineConfig, PulseEngine
from pulsesim.core.parser import parse_network


DEFAULT_PRESSES = 1000
DEFAULT_TARGET = "rx"


def part1(text: str, presses: int = DEFAULT_PRESSES, config: EngineConfig | None = None) -> str:
    engine = PulseEngine(parse_network(text), config or EngineConfig())
    engine.run(presses)
    return str(engine.value())


def part2(text: str, target: str = DEFAULT_TARGET, config: EngineConfig | None = None) -> str:
    return str(fewest_presses_to_low(parse_network(text), target=target, config=config))
