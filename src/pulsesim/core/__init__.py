"""
Core engine primitives.

This layer knows NOTHING about puzzle answers or cycle analysis.
It only knows:
- Pulses and addressed messages
- Modules with local state and a transition rule
- The registry and its one-time conjunction wiring
- A FIFO engine that counts every pulse it delivers
"""

from pulsesim.core.pulse import Pulse, Message
from pulsesim.core.modules import Module, Broadcaster, FlipFlop, Conjunction
from pulsesim.core.network import ModuleNetwork, DuplicateModuleError
from pulsesim.core.parser import ParseError, parse_module, parse_modules, parse_network
from pulsesim.core.engine import PulseEngine, EngineConfig, QuiescenceError

__all__ = [
    "Pulse",
    "Message",
    "Module",
    "Broadcaster",
    "FlipFlop",
    "Conjunction",
    "ModuleNetwork",
    "DuplicateModuleError",
    "ParseError",
    "parse_module",
    "parse_modules",
    "parse_network",
    "PulseEngine",
    "EngineConfig",
    "QuiescenceError",
]
