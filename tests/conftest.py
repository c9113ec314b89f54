"""
Pytest configuration and shared fixtures.
"""

import matplotlib
import pytest

matplotlib.use("Agg")


CHAIN_TEXT = """broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a
"""

FEEDBACK_TEXT = """broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output
"""

# Two counters feeding one conjunction in front of rx:
# nx fires High every 2nd press, nb every 4th.
COUNTERS_TEXT = """broadcaster -> x, a
%x -> nx
&nx -> hub
%a -> b
%b -> nb
&nb -> hub
&hub -> rx
"""

# Two conjunctions feeding each other never drain the queue.
LOOP_TEXT = """broadcaster -> a
&a -> b
&b -> a
"""


@pytest.fixture
def chain_text():
    """Broadcaster into a three flip-flop chain closed by an inverter."""
    return CHAIN_TEXT


@pytest.fixture
def feedback_text():
    """Feedback network with an undefined `output` sink."""
    return FEEDBACK_TEXT


@pytest.fixture
def counters_text():
    return COUNTERS_TEXT


@pytest.fixture
def loop_text():
    return LOOP_TEXT


@pytest.fixture
def chain_network(chain_text):
    from pulsesim.core import parse_network
    return parse_network(chain_text)


@pytest.fixture
def feedback_network(feedback_text):
    from pulsesim.core import parse_network
    return parse_network(feedback_text)


@pytest.fixture
def counters_network(counters_text):
    from pulsesim.core import parse_network
    return parse_network(counters_text)
