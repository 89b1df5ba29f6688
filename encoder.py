"""
Z3 encoder for circuits.

Converts Circuit objects into Z3 boolean formulas for SAT-based checking.
"""

from z3 import Bool, BoolVal, And, Or, Not, BoolRef
from circuit_types import Circuit, TruthTable


def encode_fixed_gate(inputs: list[BoolRef], tt: TruthTable) -> BoolRef:
    """
    Encode a gate with a fixed truth table as a sum of products.
    """
    terms = []

    for cube in tt.onset_cubes:
        # Build product term for this cube
        literals = []
        for i, c in enumerate(cube):
            if c == '1':
                literals.append(inputs[i])
            elif c == '0':
                literals.append(Not(inputs[i]))
            # '-' = don't care, skip

        if literals:
            terms.append(And(*literals) if len(literals) > 1 else literals[0])
        else:
            # Empty cube (all don't-cares) = always true
            terms.append(BoolVal(True))

    if not terms:
        cover = BoolVal(False)
    else:
        cover = Or(*terms) if len(terms) > 1 else terms[0]

    return Not(cover) if tt.offset else cover


def encode_circuit(circuit: Circuit, input_vars: list[BoolRef],
                   prefix: str = "") -> tuple[list[BoolRef], list[BoolRef]]:
    """
    Encode a circuit over the given primary input variables.

    Every gate gets its own variable named `prefix + gate name`, tied to
    its fanins by an equality constraint.

    Args:
        circuit: The circuit to encode
        input_vars: One Z3 variable per primary input, in input order
        prefix: Namespace for gate variables

    Returns:
        (outputs, constraints): one expression per primary output, and
        the gate equations
    """
    if len(input_vars) != circuit.num_pis():
        raise ValueError(f"Expected {circuit.num_pis()} input variables, got {len(input_vars)}")

    signals = {}
    constraints = []

    def literal(signal) -> BoolRef:
        var = signals[circuit.get_node(signal)]
        return Not(var) if circuit.is_complemented(signal) else var

    for node in circuit.nodes():
        if circuit.is_constant(node):
            signals[node] = BoolVal(False)
        elif circuit.is_pi(node):
            signals[node] = input_vars[circuit.pi_index(node)]
        else:
            gate = circuit.get_gate(node)
            gate_inputs = [literal(f) for f in gate.inputs]
            out_var = Bool(f"{prefix}{gate.name}")
            signals[node] = out_var
            constraints.append(out_var == encode_fixed_gate(gate_inputs, gate.truth_table))

    outputs = [literal(po) for po in circuit.pos()]
    return outputs, constraints
