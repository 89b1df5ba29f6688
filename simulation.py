"""
Generic network simulation.

Walks a network in topological order. Leaves (constant and primary inputs)
get their values from a simulator; gates are evaluated by the network
itself, which receives the simulator so that constants and negation match
the value type (booleans, truth tables, ...).
"""

import logging
from typing import Iterator, Protocol

logger = logging.getLogger(__name__)


class Simulator(Protocol):
    """Leaf values and negation for one value type."""

    def compute_constant(self, value: bool): ...

    def compute_pi(self, index: int): ...

    def compute_not(self, value): ...


class DefaultSimulator:
    """Simulates a single input vector with plain booleans."""

    def __init__(self, input_values: list[bool]):
        self._input_values = input_values

    def compute_constant(self, value: bool) -> bool:
        return value

    def compute_pi(self, index: int) -> bool:
        return self._input_values[index]

    def compute_not(self, value: bool) -> bool:
        return not value


def _signal_value(ntk, values: dict, signal, simulator):
    value = values[ntk.get_node(signal)]
    return simulator.compute_not(value) if ntk.is_complemented(signal) else value


def simulate_nodes(ntk, simulator: Simulator) -> dict:
    """
    Simulate every node of the network.

    Returns:
        Fresh dict mapping each node to its simulated value
    """
    values = {}
    for node in ntk.nodes():
        if ntk.is_constant(node):
            values[node] = simulator.compute_constant(False)
        elif ntk.is_pi(node):
            values[node] = simulator.compute_pi(ntk.pi_index(node))
        else:
            fanin_values = [_signal_value(ntk, values, f, simulator) for f in ntk.fanins(node)]
            values[node] = ntk.compute(node, fanin_values, simulator)
    return values


def iter_outputs(ntk, simulator: Simulator) -> Iterator:
    """Yield the simulated value of each primary output, in output order."""
    values = simulate_nodes(ntk, simulator)
    for signal in ntk.pos():
        yield _signal_value(ntk, values, signal, simulator)


def simulate(ntk, simulator: Simulator) -> list:
    """Simulated value of every primary output, in output order."""
    return list(iter_outputs(ntk, simulator))


def evaluate_circuit(circuit, input_values: dict[str, bool]) -> dict[str, bool]:
    """
    Evaluate a circuit with concrete input values.

    Args:
        circuit: The circuit to evaluate
        input_values: dict mapping input names to boolean values

    Returns:
        dict mapping all net names (inputs + gates) to their computed values
    """
    missing = [pi for pi in circuit.pis() if pi not in input_values]
    if missing:
        raise ValueError(f"No value given for primary inputs: {missing}")

    vector = [input_values[pi] for pi in circuit.pis()]
    values = simulate_nodes(circuit, DefaultSimulator(vector))
    logger.debug(f"Evaluated {len(values)} nodes of {circuit.name}")
    return {node: value for node, value in values.items() if not circuit.is_constant(node)}
