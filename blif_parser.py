"""
BLIF (Berkeley Logic Interchange Format) parser.

Parses the combinational subset of .blif files into Circuit objects.
Sequential and hierarchical constructs (.latch, .subckt, .gate) are rejected.
"""

import logging

from circuit_types import TruthTable, Gate, Circuit, Signal

logger = logging.getLogger(__name__)


class BlifParseError(Exception):
    """Raised when BLIF parsing fails."""
    def __init__(self, message: str, line_num: int = None):
        if line_num is not None:
            message = f"Line {line_num}: {message}"
        super().__init__(message)


def parse(filename: str) -> Circuit:
    """
    Parse a BLIF file and return a Circuit.
    """
    with open(filename, 'r') as f:
        content = f.read()
    circuit = parse_string(content)
    logger.info(f"Parsed {filename}: {circuit.num_pis()} inputs, "
                f"{circuit.num_pos()} outputs, {circuit.num_gates()} gates")
    return circuit


def parse_string(content: str) -> Circuit:
    """
    Parse BLIF content from a string.
    """
    lines = _preprocess(content)
    return _parse_lines(lines)


def _preprocess(content: str) -> list[tuple[int, str]]:
    """
    Preprocess BLIF content:
    - Remove comments
    - Handle line continuations (backslash)
    - Track line numbers for error messages

    Returns list of (line_number, line_content) tuples.
    """
    result = []
    continued_line = ""
    continued_from = None

    for line_num, line in enumerate(content.split('\n'), start=1):
        if '#' in line:
            line = line[:line.find('#')]

        line = line.strip()
        if not line:
            continue

        if line.endswith('\\'):
            if continued_from is None:
                continued_from = line_num
            continued_line += line[:-1] + ' '
            continue

        if continued_line:
            line = continued_line + line
            line_num = continued_from
            continued_line = ""
            continued_from = None

        result.append((line_num, line))

    return result


def _parse_lines(lines: list[tuple[int, str]]) -> Circuit:
    """Parse preprocessed lines into a Circuit."""
    name = "unnamed"
    primary_inputs = []
    output_names = []
    gates = []
    defined = set()

    current_gate = None
    # Output column seen so far for the current gate ('1', '0' or None)
    current_polarity = None

    for line_num, line in lines:
        tokens = line.split()
        cmd = tokens[0]

        if not cmd.startswith('.'):
            # Cover row for current gate
            if current_gate is None:
                raise BlifParseError("Truth table row without .names", line_num)
            current_polarity = _parse_cover_row(tokens, current_gate, current_polarity, line_num)
            continue

        current_gate = None
        current_polarity = None

        if cmd == '.model':
            if len(tokens) >= 2:
                name = tokens[1]

        elif cmd == '.inputs':
            for net in tokens[1:]:
                _define(net, defined, line_num)
            primary_inputs.extend(tokens[1:])

        elif cmd == '.outputs':
            output_names.extend(tokens[1:])

        elif cmd == '.names':
            if len(tokens) < 2:
                raise BlifParseError(".names requires at least one signal", line_num)

            # Last token is output, rest are inputs
            gate_output = tokens[-1]
            _define(gate_output, defined, line_num)

            current_gate = Gate(
                name=gate_output,
                inputs=[Signal(net) for net in tokens[1:-1]],
                truth_table=TruthTable(num_inputs=len(tokens) - 2)
            )
            gates.append(current_gate)

        elif cmd == '.end':
            break

        elif cmd in ('.latch', '.subckt', '.gate'):
            raise BlifParseError(f"{cmd} not supported", line_num)

        else:
            logger.debug(f"Line {line_num}: ignoring directive {cmd}")

    undriven = [net for net in output_names if net not in defined]
    if undriven:
        raise BlifParseError(f"Outputs without a driver: {undriven}")

    return Circuit(
        name=name,
        primary_inputs=primary_inputs,
        primary_outputs=[Signal(net) for net in output_names],
        gates=gates
    )


def _define(net: str, defined: set[str], line_num: int):
    if net in defined:
        raise BlifParseError(f"Net '{net}' is defined more than once", line_num)
    defined.add(net)


def _parse_cover_row(tokens: list[str], gate: Gate, polarity: str | None,
                     line_num: int) -> str:
    """
    Parse a cover row and add its cube to the gate's truth table.

    Formats:
        "11 1"     - input pattern "11", output 1
        "1- 0"     - input pattern "1-", output 0 (off-set cover)
        "1"        - for constant output (no inputs), output 1
        "11"       - some BLIF files omit output when it's 1

    Returns the output column of the row, which must be the same for all
    rows of one gate.
    """
    tt = gate.truth_table

    if tt.num_inputs == 0:
        if len(tokens) != 1:
            raise BlifParseError(f"Invalid constant row: {' '.join(tokens)}", line_num)
        cube, output = "", tokens[0]
    elif len(tokens) == 1:
        cube, output = tokens[0], '1'
    elif len(tokens) == 2:
        cube, output = tokens
    else:
        raise BlifParseError(f"Invalid truth table row: {' '.join(tokens)}", line_num)

    if output not in ('0', '1'):
        raise BlifParseError(f"Invalid output value '{output}'", line_num)

    if len(cube) != tt.num_inputs:
        raise BlifParseError(
            f"Cube '{cube}' has {len(cube)} bits but gate has {tt.num_inputs} inputs",
            line_num
        )

    for c in cube:
        if c not in '01-':
            raise BlifParseError(f"Invalid character '{c}' in cube", line_num)

    if polarity is not None and polarity != output:
        raise BlifParseError(f"Gate '{gate.name}' mixes on-set and off-set rows", line_num)

    tt.offset = output == '0'
    tt.onset_cubes.append(cube)
    return output
