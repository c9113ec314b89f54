"""
Pulses and the messages that carry them between modules.

A message is created when a module emits output and consumed exactly
once when the engine dequeues it.
"""

from dataclasses import dataclass
from enum import Enum


class Pulse(Enum):
    """Two-valued signal exchanged between modules."""

    HIGH = "high"
    LOW = "low"

    def flip(self) -> "Pulse":
        """Return the opposite pulse."""
        return Pulse.LOW if self is Pulse.HIGH else Pulse.HIGH


@dataclass(frozen=True)
class Message:
    """
    A pulse addressed from one module to another.

    `sender` is the label of the emitting module (or the button
    for the seed message of a press).
    """

    to: str
    sender: str
    pulse: Pulse

    def __str__(self) -> str:
        return f"{self.sender} -{self.pulse.value}-> {self.to}"
