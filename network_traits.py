"""
Capability interface for logic networks.

Any network type that provides these methods can be checked and simulated;
`Circuit` is the implementation shipped with this package.
"""

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class LogicNetwork(Protocol):
    """Operations the equivalence checker and the simulator rely on."""

    def num_pis(self) -> int: ...

    def num_pos(self) -> int: ...

    def size(self) -> int: ...

    def pis(self) -> Iterable: ...

    def pos(self) -> Iterable: ...

    def nodes(self) -> Iterable: ...

    def get_node(self, signal): ...

    def is_complemented(self, signal) -> bool: ...

    def is_constant(self, node) -> bool: ...

    def is_pi(self, node) -> bool: ...

    def pi_index(self, node) -> int: ...

    def fanins(self, node) -> Iterable: ...

    def compute(self, node, values: list, simulator): ...


# Checked in this order so the error names the most basic missing method
REQUIRED_CAPABILITIES = (
    'num_pis',
    'num_pos',
    'size',
    'get_node',
    'pis',
    'pos',
    'nodes',
    'is_complemented',
    'is_constant',
    'is_pi',
    'pi_index',
    'fanins',
    'compute',
)


def check_network(ntk) -> None:
    """
    Reject objects that do not implement the network interface.

    Raises:
        TypeError: naming the first missing method
    """
    for name in REQUIRED_CAPABILITIES:
        if not callable(getattr(ntk, name, None)):
            raise TypeError(f"{type(ntk).__name__} does not implement the {name} method")
