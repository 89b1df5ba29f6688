"""Core data structures for logic network representation."""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterator


class _ConstantNode:
    """Key of the implicit constant-0 node; never equal to a net name."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "CONSTANT_NODE"

    def __str__(self) -> str:
        return "const0"


CONSTANT_NODE = _ConstantNode()


@dataclass(frozen=True)
class Signal:
    """
    Reference to a node, optionally complemented.

    Example:
        Signal("n1")        -> n1
        ~Signal("n1")       -> !n1
    """
    node: str
    complemented: bool = False

    def __invert__(self) -> "Signal":
        return Signal(self.node, not self.complemented)

    def __str__(self) -> str:
        return f"!{self.node}" if self.complemented else f"{self.node}"


@dataclass
class TruthTable:
    """
    Represents a gate's logic function using cubes.

    Cubes list input patterns where output = 1, or output = 0 when
    `offset` is set (BLIF rows with an output column of 0).
    Each cube is a string: '1' = must be true, '0' = must be false, '-' = don't care

    Example - OR gate:
        num_inputs: 2
        onset_cubes: ["1-", "-1"]  # output=1 if first input=1 OR second input=1

    Example - NAND gate given by its off-set:
        num_inputs: 2
        onset_cubes: ["11"], offset: True
    """
    num_inputs: int
    onset_cubes: list[str] = field(default_factory=list)
    offset: bool = False

    def evaluate(self, inputs: list[bool]) -> bool:
        """Evaluate the truth table for given input values."""
        for cube in self.onset_cubes:
            match = True
            for i, c in enumerate(cube):
                if c == '1' and not inputs[i]:
                    match = False
                    break
                elif c == '0' and inputs[i]:
                    match = False
                    break
                # '-' always matches
            if match:
                return not self.offset
        return self.offset

    def compute(self, values: list, simulator):
        """
        Evaluate the cube cover over simulation values.

        Values may be plain booleans or bit-parallel truth tables; anything
        supporting `&` and `|` works. Constants and negation come from the
        simulator so that their width matches the values.
        """
        result = simulator.compute_constant(False)
        for cube in self.onset_cubes:
            term = simulator.compute_constant(True)
            for value, c in zip(values, cube):
                if c == '1':
                    term = term & value
                elif c == '0':
                    term = term & simulator.compute_not(value)
            result = result | term
        return simulator.compute_not(result) if self.offset else result

    def to_binary_string(self) -> str:
        """
        Get full truth table as binary string.
        Index 0 = all inputs false, last index = all inputs true.

        Example - AND gate returns "0001" (only true when both inputs true)
        Example - OR gate returns "0111" (true unless both inputs false)
        """
        if self.num_inputs > 4:
            return "TOO_LARGE"

        result = ""
        for i in range(2 ** self.num_inputs):
            inputs = [(i >> j) & 1 == 1 for j in range(self.num_inputs - 1, -1, -1)]
            result += "1" if self.evaluate(inputs) else "0"
        return result

    def identify_gate_type(self) -> str:
        """Identify common gate types from truth table."""
        tt = self.to_binary_string()

        gate_types = {
            # 0-input
            "0": "CONST0",
            "1": "CONST1",
            # 1-input
            "01": "BUF",
            "10": "NOT",
            # 2-input
            "0001": "AND",
            "0111": "OR",
            "1110": "NAND",
            "1000": "NOR",
            "0110": "XOR",
            "1001": "XNOR",
            "0000": "CONST0",
            "1111": "CONST1",
        }

        return gate_types.get(tt, f"COMPLEX({tt})")


# Frequently used gate functions
AND2 = TruthTable(2, ["11"])
OR2 = TruthTable(2, ["1-", "-1"])
XOR2 = TruthTable(2, ["10", "01"])


@dataclass
class Gate:
    """
    A single logic gate in the circuit.

    Attributes:
        name: Output net name (unique identifier for this gate)
        inputs: Fanin signals, in the column order of the truth table
        truth_table: The gate's logic function
    """
    name: str
    inputs: list[Signal]
    truth_table: TruthTable

    def num_inputs(self) -> int:
        return len(self.inputs)


@dataclass
class Circuit:
    """
    Combinational logic network.

    Nodes are the implicit constant-0 node, the primary inputs and the
    gates. Gates and primary outputs refer to nodes through signals, so
    any fanin or output may be complemented.

    The lookup tables are built on first use; do not add gates afterwards.

    Attributes:
        name: Circuit/model name
        primary_inputs: List of primary input net names
        primary_outputs: List of primary output signals
        gates: List of all gates in the circuit
    """
    name: str
    primary_inputs: list[str]
    primary_outputs: list[Signal]
    gates: list[Gate]

    @cached_property
    def _gate_index(self) -> dict[str, Gate]:
        return {gate.name: gate for gate in self.gates}

    @cached_property
    def _pi_index(self) -> dict[str, int]:
        return {name: i for i, name in enumerate(self.primary_inputs)}

    @cached_property
    def _topological_order(self) -> list[Gate]:
        return self.topological_sort()

    # Network interface

    def num_pis(self) -> int:
        return len(self.primary_inputs)

    def num_pos(self) -> int:
        return len(self.primary_outputs)

    def num_gates(self) -> int:
        return len(self.gates)

    def size(self) -> int:
        """Number of nodes, counting the constant node."""
        return 1 + self.num_pis() + self.num_gates()

    def pis(self) -> Iterator[str]:
        return iter(self.primary_inputs)

    def pos(self) -> Iterator[Signal]:
        return iter(self.primary_outputs)

    def nodes(self) -> Iterator[str]:
        """All nodes: constant, primary inputs, then gates in topological order."""
        yield CONSTANT_NODE
        yield from self.primary_inputs
        for gate in self._topological_order:
            yield gate.name

    def get_node(self, signal: Signal) -> str:
        return signal.node

    def is_complemented(self, signal: Signal) -> bool:
        return signal.complemented

    def is_constant(self, node: str) -> bool:
        return node is CONSTANT_NODE

    def is_pi(self, node: str) -> bool:
        return node in self._pi_index

    def pi_index(self, node: str) -> int:
        return self._pi_index[node]

    def fanins(self, node: str) -> list[Signal]:
        gate = self.get_gate(node)
        return gate.inputs if gate else []

    def compute(self, node: str, values: list, simulator):
        """Apply the gate function of `node` to its fanin values."""
        return self._gate_index[node].truth_table.compute(values, simulator)

    # Lookup helpers

    def get_gate(self, net_name: str) -> Gate | None:
        """Find gate by its output net name."""
        return self._gate_index.get(net_name)

    def topological_sort(self) -> list[Gate]:
        """Return gates in topological order (inputs before outputs)."""
        gate_dict = {g.name: g for g in self.gates}
        in_degree = {g.name: 0 for g in self.gates}
        dependents = {g.name: [] for g in self.gates}
        pi_names = set(self.primary_inputs)

        for gate in self.gates:
            for signal in gate.inputs:
                inp = signal.node
                if inp in gate_dict:
                    in_degree[gate.name] += 1
                    dependents[inp].append(gate.name)
                elif inp is not CONSTANT_NODE and inp not in pi_names:
                    raise ValueError(f"Gate '{gate.name}' reads undefined net '{inp}'")

        ready = [g.name for g in self.gates if in_degree[g.name] == 0]
        sorted_gates = []

        while ready:
            gate_name = ready.pop(0)
            sorted_gates.append(gate_dict[gate_name])
            for dep in dependents[gate_name]:
                in_degree[dep] -= 1
                if in_degree[dep] == 0:
                    ready.append(dep)

        if len(sorted_gates) != len(self.gates):
            remaining = [g.name for g in self.gates if in_degree[g.name] > 0]
            raise ValueError(f"Combinational loop detected: {remaining}")

        return sorted_gates

    def print_stats(self):
        """Print circuit statistics."""
        print(f"Circuit: {self.name}")
        print(f"  Primary inputs:  {self.num_pis()}")
        print(f"  Primary outputs: {self.num_pos()}")
        print(f"  Gates: {self.num_gates()}")
        print(f"  Nodes: {self.size()}")

        # Count gate types
        type_counts = {}
        for gate in self.gates:
            gtype = gate.truth_table.identify_gate_type()
            type_counts[gtype] = type_counts.get(gtype, 0) + 1

        print(f"  Gate types:")
        for gtype, count in sorted(type_counts.items()):
            print(f"    {gtype}: {count}")
