"""
Pytest configuration and shared circuits.
"""

import pytest

import blif_parser
from circuit_types import AND2, XOR2, Circuit, Gate, Signal, TruthTable


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


AND_BLIF = """
.model and2
.inputs a b
.outputs f
.names a b f
11 1
.end
"""

XOR_BLIF = """
.model xor2
.inputs a b
.outputs f
.names a b f
10 1
01 1
.end
"""

# AND written through De Morgan: f = !(!a | !b)
DEMORGAN_AND_BLIF = """
.model demorgan_and
.inputs a b
.outputs f
.names a na
0 1
.names b nb
0 1
.names na nb f
00 1
.end
"""


def single_gate_circuit(name: str, num_inputs: int, tt: TruthTable) -> Circuit:
    """Circuit with `num_inputs` inputs x0.. and one output gate f."""
    inputs = [f"x{i}" for i in range(num_inputs)]
    return Circuit(
        name=name,
        primary_inputs=inputs,
        primary_outputs=[Signal("f")],
        gates=[Gate("f", [Signal(x) for x in inputs], tt)]
    )


def and_chain(name: str, num_inputs: int) -> Circuit:
    """AND of all inputs, built from two-input gates."""
    inputs = [f"x{i}" for i in range(num_inputs)]
    gates = []
    prev = Signal(inputs[0])
    for i, x in enumerate(inputs[1:], start=1):
        gates.append(Gate(f"n{i}", [prev, Signal(x)], AND2))
        prev = Signal(f"n{i}")
    return Circuit(name=name, primary_inputs=inputs, primary_outputs=[prev], gates=gates)


def parity_chain(name: str, num_inputs: int) -> Circuit:
    """XOR of all inputs, built from two-input gates."""
    inputs = [f"x{i}" for i in range(num_inputs)]
    gates = []
    prev = Signal(inputs[0])
    for i, x in enumerate(inputs[1:], start=1):
        gates.append(Gate(f"p{i}", [prev, Signal(x)], XOR2))
        prev = Signal(f"p{i}")
    return Circuit(name=name, primary_inputs=inputs, primary_outputs=[prev], gates=gates)


@pytest.fixture
def and_circuit():
    return blif_parser.parse_string(AND_BLIF)


@pytest.fixture
def xor_circuit():
    return blif_parser.parse_string(XOR_BLIF)


@pytest.fixture
def demorgan_and_circuit():
    return blif_parser.parse_string(DEMORGAN_AND_BLIF)
