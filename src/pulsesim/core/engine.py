"""
PulseEngine: drives button presses through a module network.

Each press:
1. Enqueue one Low pulse from the button to the entry point
2. Dequeue messages strictly in arrival order
3. Count the dequeued pulse, dispatch it to its target module
4. Append the module's outputs to the back of the queue
5. Stop when the queue is empty

FIFO order is load-bearing: flip-flop and conjunction state depends on
the order in which pulses arrive.

Counters accumulate across presses. They reset only when the engine is
constructed or `reset()` is called.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from pulsesim.core.network import ModuleNetwork
from pulsesim.core.pulse import Message, Pulse

logger = logging.getLogger(__name__)


MessageListener = Callable[[int, Message], None]


class QuiescenceError(RuntimeError):
    """A press exceeded the configured message cap without draining its queue."""


@dataclass
class EngineConfig:
    """Configuration for a pulse engine."""

    entry_point: str | None = None  # None: the network's broadcaster
    button_label: str = "button"  # Sender of the seed message
    # Termination is not guaranteed for arbitrary networks.
    # None runs each press until the queue drains.
    max_messages_per_press: int | None = None


@dataclass
class PulseEngine:
    """
    Owns the module network, the FIFO queue and the pulse counters.

    The network must not be shared with another engine: modules carry
    mutable state. Use `ModuleNetwork.copy()` for independent runs.
    """

    network: ModuleNetwork
    config: EngineConfig = field(default_factory=EngineConfig)

    high_count: int = field(default=0, init=False)
    low_count: int = field(default=0, init=False)
    presses: int = field(default=0, init=False)
    _queue: deque = field(default_factory=deque, init=False, repr=False)
    _listeners: list = field(default_factory=list, init=False, repr=False)
    _history: list = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.network.wire_conjunctions()

    @property
    def entry_point(self) -> str:
        return self.config.entry_point or self.network.entry_point

    def add_listener(self, listener: MessageListener) -> None:
        """Call `listener(press_number, message)` for every dequeued message."""
        self._listeners.append(listener)

    def press_button(self) -> None:
        """
        Run one press to quiescence.

        Raises:
            QuiescenceError: if `max_messages_per_press` is exceeded
        """
        self.presses += 1
        limit = self.config.max_messages_per_press
        processed = 0

        self._queue.append(
            Message(to=self.entry_point, sender=self.config.button_label, pulse=Pulse.LOW)
        )

        try:
            while self._queue:
                message = self._queue.popleft()
                processed += 1
                if limit is not None and processed > limit:
                    raise QuiescenceError(
                        f"Press {self.presses} did not quiesce within {limit} messages"
                    )

                if message.pulse is Pulse.HIGH:
                    self.high_count += 1
                else:
                    self.low_count += 1

                for listener in self._listeners:
                    listener(self.presses, message)

                module = self.network.get(message.to)
                if module is None:
                    logger.debug("Message to sink %r: %s", message.to, message)
                    continue

                self._queue.extend(module.process(message))
        finally:
            # An aborted press leaves no messages behind and still records a history row
            self._queue.clear()
            self._history.append((self.low_count, self.high_count))

    def run(self, n_presses: int) -> dict:
        """Press the button n_presses times."""
        for _ in range(n_presses):
            self.press_button()

        logger.info(
            "%d presses: %d low, %d high", self.presses, self.low_count, self.high_count
        )
        return {
            "n_presses": n_presses,
            "total_presses": self.presses,
            "low_count": self.low_count,
            "high_count": self.high_count,
            "value": self.value(),
        }

    def value(self) -> int:
        """Product of the accumulated high and low counts."""
        return self.high_count * self.low_count

    def get_count_history(self) -> np.ndarray:
        """
        Cumulative counts after each press.

        Returns:
            [presses, 2] int64 array of (low, high)
        """
        return np.array(self._history, dtype=np.int64).reshape(-1, 2)

    def reset(self) -> None:
        """Zero the counters and return every module to its initial state."""
        self.network.reset_state()
        self._queue.clear()
        self._history.clear()
        self.high_count = 0
        self.low_count = 0
        self.presses = 0
