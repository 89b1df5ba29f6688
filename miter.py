"""
Miter construction.

Combines two circuits into one whose output i is the XOR of output i of
both circuits. The miter is constant 0 on every output exactly when the
two circuits are equivalent.
"""

import logging

from circuit_types import CONSTANT_NODE, XOR2, Circuit, Gate, Signal

logger = logging.getLogger(__name__)


def _fresh_name(name: str, taken: set[str]) -> str:
    """Return `name`, suffixed with '#k' if it is already taken, and reserve it."""
    candidate = name
    k = 1
    while candidate in taken:
        candidate = f"{name}#{k}"
        k += 1
    taken.add(candidate)
    return candidate


def _copy_gates(ntk: Circuit, primary_inputs: list[str], prefix: str,
                gates: list[Gate], taken: set[str]) -> list[Signal]:
    """
    Copy the gates of `ntk` into `gates`, renamed with `prefix`.

    Primary inputs are matched by position with `primary_inputs`. New
    names never repeat a name in `taken`, which includes the primary inputs.

    Returns:
        The primary output signals of `ntk`, translated to the copy
    """
    node_map = {}
    for node in ntk.nodes():
        if ntk.is_constant(node):
            node_map[node] = CONSTANT_NODE
        elif ntk.is_pi(node):
            node_map[node] = primary_inputs[ntk.pi_index(node)]
        else:
            inputs = [Signal(node_map[ntk.get_node(f)], ntk.is_complemented(f))
                      for f in ntk.fanins(node)]
            node_map[node] = _fresh_name(prefix + node, taken)
            gates.append(Gate(node_map[node], inputs, ntk.get_gate(node).truth_table))

    return [Signal(node_map[ntk.get_node(po)], ntk.is_complemented(po)) for po in ntk.pos()]


def miter(ntk1: Circuit, ntk2: Circuit) -> Circuit | None:
    """
    Build the miter of two circuits.

    Returns:
        The combined circuit, or None if the circuits have a different
        number of primary inputs or primary outputs
    """
    if ntk1.num_pis() != ntk2.num_pis():
        logger.warning(f"Cannot build miter: {ntk1.name} has {ntk1.num_pis()} inputs, "
                       f"{ntk2.name} has {ntk2.num_pis()}")
        return None
    if ntk1.num_pos() != ntk2.num_pos():
        logger.warning(f"Cannot build miter: {ntk1.name} has {ntk1.num_pos()} outputs, "
                       f"{ntk2.name} has {ntk2.num_pos()}")
        return None

    primary_inputs = list(ntk1.pis())
    gates = []
    taken = set(primary_inputs)
    outputs1 = _copy_gates(ntk1, primary_inputs, "ntk1.", gates, taken)
    outputs2 = _copy_gates(ntk2, primary_inputs, "ntk2.", gates, taken)

    primary_outputs = []
    for i, (po1, po2) in enumerate(zip(outputs1, outputs2)):
        name = _fresh_name(f"miter.po{i}", taken)
        gates.append(Gate(name, [po1, po2], XOR2))
        primary_outputs.append(Signal(name))

    result = Circuit(
        name=f"miter({ntk1.name},{ntk2.name})",
        primary_inputs=primary_inputs,
        primary_outputs=primary_outputs,
        gates=gates
    )
    logger.debug(f"Built {result.name}: {result.num_pis()} inputs, "
                 f"{result.num_pos()} outputs, {result.num_gates()} gates")
    return result
