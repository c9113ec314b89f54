"""
Parser for the line-oriented module definition format.

One module per line:

    broadcaster -> a, b, c
    %a -> b
    &inv -> a

No prefix is the broadcaster, `%` a flip-flop, `&` a conjunction.
Output labels are bare names; a name with no defining line is a sink.
"""

from __future__ import annotations
import logging
import re

from pulsesim.core.modules import Broadcaster, Conjunction, FlipFlop, Module
from pulsesim.core.network import ModuleNetwork

logger = logging.getLogger(__name__)


MODULE_TYPES: dict[str, type[Module]] = {
    "": Broadcaster,
    "%": FlipFlop,
    "&": Conjunction,
}

_LINE_RE = re.compile(r"^(?P<prefix>[^A-Za-z\s]?)(?P<label>[A-Za-z]+)\s*->\s*(?P<outputs>.*)$")
_LABEL_RE = re.compile(r"^[A-Za-z]+$")


class ParseError(ValueError):
    """A module definition line could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def parse_module(line: str, line_number: int | None = None) -> Module:
    """
    Parse a single `<prefix><label> -> <outputs>` line.

    Raises:
        ParseError: malformed line, unknown prefix or bad output list
    """
    match = _LINE_RE.match(line.strip())
    if match is None:
        raise ParseError(f"malformed module definition {line.strip()!r}", line_number)

    prefix = match["prefix"]
    if prefix not in MODULE_TYPES:
        raise ParseError(f"unknown module prefix {prefix!r}", line_number)

    outputs = [name.strip() for name in match["outputs"].split(",")]
    if not all(_LABEL_RE.match(name) for name in outputs):
        raise ParseError(f"invalid output list {match['outputs']!r}", line_number)

    return MODULE_TYPES[prefix](label=match["label"], outputs=outputs)


def parse_modules(text: str) -> list[Module]:
    """Parse every non-blank line of `text` into unwired modules."""
    modules = []
    broadcaster = None
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        module = parse_module(line, line_number)
        if isinstance(module, Broadcaster):
            if broadcaster is not None:
                raise ParseError(
                    f"second broadcaster {module.label!r} (already have {broadcaster!r})",
                    line_number,
                )
            broadcaster = module.label
        modules.append(module)

    if not modules:
        raise ParseError("no module definitions found")

    if broadcaster is None:
        raise ParseError("no broadcaster defined")

    logger.debug("Parsed %d modules", len(modules))
    return modules


def parse_network(text: str) -> ModuleNetwork:
    """
    Parse `text` into a registry with conjunction inputs wired.

    Raises:
        ParseError: on any malformed line
        DuplicateModuleError: when a label is defined twice
    """
    network = ModuleNetwork(parse_modules(text))
    network.wire_conjunctions()
    return network
