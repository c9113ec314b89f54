"""
ModuleNetwork: the registry of all modules, indexed by label.

Built in two phases:
1. Register every module with default internal state
2. Wire conjunctions: each one learns the full set of modules
   that list it as an output

Wiring is a registration step done once before simulation.
Dispatch never wires lazily.
"""

from __future__ import annotations
import copy
from typing import Iterable, Iterator

import numpy as np

from pulsesim.core.modules import Broadcaster, Conjunction, FlipFlop, Module


DEFAULT_ENTRY_POINT = "broadcaster"


class DuplicateModuleError(ValueError):
    """Two modules were defined with the same label."""


class ModuleNetwork:
    """
    Ordered collection of modules, looked up by label during dispatch.

    Labels referenced as outputs but never defined are sinks: messages
    sent to them are counted by the engine but go nowhere.
    """

    def __init__(self, modules: Iterable[Module] = ()):
        self._modules: dict[str, Module] = {}
        for module in modules:
            self.add(module)

    def add(self, module: Module) -> None:
        """Register a module. Raises DuplicateModuleError on a repeated label."""
        if module.label in self._modules:
            raise DuplicateModuleError(f"Module {module.label!r} is defined more than once")
        self._modules[module.label] = module

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules.values())

    def __contains__(self, label: str) -> bool:
        return label in self._modules

    def __getitem__(self, label: str) -> Module:
        return self._modules[label]

    def get(self, label: str) -> Module | None:
        """Module with this label, or None for a sink."""
        return self._modules.get(label)

    @property
    def labels(self) -> list[str]:
        return list(self._modules)

    @property
    def entry_point(self) -> str:
        """Label of the broadcaster, where every button press starts."""
        for module in self:
            if isinstance(module, Broadcaster):
                return module.label
        return DEFAULT_ENTRY_POINT

    def connections(self) -> Iterator[tuple[str, str]]:
        """Yield every (sender, receiver) edge in registry and output order."""
        for module in self:
            for output in module.outputs:
                yield module.label, output

    def inputs_of(self, label: str) -> list[str]:
        """Labels of modules that send to `label`, in registry order."""
        return [sender for sender, receiver in self.connections() if receiver == label]

    def sinks(self) -> list[str]:
        """Referenced labels with no module definition, in first-seen order."""
        seen = dict.fromkeys(
            receiver for _, receiver in self.connections()
            if receiver not in self._modules
        )
        return list(seen)

    def conjunctions(self) -> list[Conjunction]:
        return [m for m in self if isinstance(m, Conjunction)]

    def flip_flops(self) -> list[FlipFlop]:
        return [m for m in self if isinstance(m, FlipFlop)]

    def wire_conjunctions(self) -> None:
        """
        Back-fill every conjunction's input map from the output lists.

        Only missing inputs are added (as Low), so running this again
        leaves keys and already-recorded pulses untouched.
        """
        for sender, receiver in self.connections():
            module = self._modules.get(receiver)
            if isinstance(module, Conjunction):
                module.connect_input(sender)

    def reset_state(self) -> None:
        """Return every module to its initial state. Topology is unchanged."""
        for module in self:
            module.reset()

    def flip_flop_states(self) -> np.ndarray:
        """Current flip-flop bits as a bool vector, in registry order."""
        return np.array([ff.is_on for ff in self.flip_flops()], dtype=bool)

    def copy(self) -> ModuleNetwork:
        """Independent copy: no module state is shared with the original."""
        return ModuleNetwork(copy.deepcopy(module) for module in self)

    def __str__(self) -> str:
        return "\n".join(str(module) for module in self)
