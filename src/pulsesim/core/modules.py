"""
Module variants: the typed nodes of a pulse network.

Every module is a tiny state machine:
- Broadcaster: stateless fan-out
- FlipFlop: one bit, toggled by Low pulses, High pulses absorbed
- Conjunction: remembers the last pulse from each input,
  emits Low only when all of them are High

Modules only transform one incoming message into outgoing messages.
Routing, queueing and counting belong to the engine.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pulsesim.core.pulse import Message, Pulse


@dataclass
class Module(ABC):
    """
    Base class for a named node in the network.

    `outputs` is the ordered list of labels this module sends to.
    Topology is fixed after construction; only internal state changes.
    """

    label: str
    outputs: list[str] = field(default_factory=list)

    prefix = ""

    @abstractmethod
    def process(self, message: Message) -> list[Message]:
        """
        Handle one incoming message addressed to this module.

        Args:
            message: Message whose `to` equals this module's label

        Returns:
            Messages to append to the engine queue, in output order
        """
        ...

    def reset(self) -> None:
        """Restore initial internal state."""

    def _check_addressed(self, message: Message) -> None:
        if message.to != self.label:
            raise ValueError(
                f"Message for {message.to!r} delivered to module {self.label!r}"
            )

    def _emit(self, pulse: Pulse) -> list[Message]:
        return [Message(to=to, sender=self.label, pulse=pulse) for to in self.outputs]

    def __str__(self) -> str:
        return f"{self.prefix}{self.label} -> {', '.join(self.outputs)}"


@dataclass
class Broadcaster(Module):
    """Re-emits every incoming pulse unchanged to all outputs."""

    def process(self, message: Message) -> list[Message]:
        self._check_addressed(message)
        return self._emit(message.pulse)


@dataclass
class FlipFlop(Module):
    """
    One-bit module.

    High input: ignored, no output.
    Low input: toggle, then emit High if now on, Low if now off.
    """

    is_on: bool = False

    prefix = "%"

    def process(self, message: Message) -> list[Message]:
        self._check_addressed(message)
        if message.pulse is Pulse.HIGH:
            return []

        self.is_on = not self.is_on
        return self._emit(Pulse.HIGH if self.is_on else Pulse.LOW)

    def reset(self) -> None:
        self.is_on = False


@dataclass
class Conjunction(Module):
    """
    Remembers the most recent pulse from each connected input.

    Inputs start at Low. After recording a message, emits Low if every
    remembered input is High, otherwise High.
    """

    inputs: dict[str, Pulse] = field(default_factory=dict)

    prefix = "&"

    def connect_input(self, label: str) -> None:
        """Register an input, defaulting it to Low. Existing inputs keep their pulse."""
        self.inputs.setdefault(label, Pulse.LOW)

    @property
    def all_high(self) -> bool:
        return all(pulse is Pulse.HIGH for pulse in self.inputs.values())

    def process(self, message: Message) -> list[Message]:
        self._check_addressed(message)
        self.inputs[message.sender] = message.pulse
        return self._emit(Pulse.LOW if self.all_high else Pulse.HIGH)

    def reset(self) -> None:
        for label in self.inputs:
            self.inputs[label] = Pulse.LOW
