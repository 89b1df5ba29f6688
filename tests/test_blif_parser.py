"""
Tests for the BLIF parser.
"""

import pytest

import blif_parser
from blif_parser import BlifParseError
from circuit_types import Signal
from simulation import evaluate_circuit


class TestParse:
    """Test well-formed BLIF input."""

    def test_and_gate(self, and_circuit):
        assert and_circuit.name == "and2"
        assert and_circuit.primary_inputs == ["a", "b"]
        assert and_circuit.primary_outputs == [Signal("f")]
        assert and_circuit.get_gate("f").truth_table.identify_gate_type() == "AND"

    def test_offset_rows(self):
        circuit = blif_parser.parse_string("""
        .model nand
        .inputs a b
        .outputs f
        .names a b f
        11 0
        .end
        """)
        assert circuit.get_gate("f").truth_table.identify_gate_type() == "NAND"

    def test_constant_gates(self):
        circuit = blif_parser.parse_string("""
        .model consts
        .inputs a
        .outputs one zero empty
        .names one
        1
        .names zero
        0
        .names empty
        .end
        """)
        values = evaluate_circuit(circuit, {"a": False})
        assert values["one"] is True
        assert values["zero"] is False
        assert values["empty"] is False

    def test_continuation_and_comments(self):
        circuit = blif_parser.parse_string("""
        .model cont   # trailing comment
        .inputs a \\
                b c
        .outputs f
        .names a b c f
        111 1
        .end
        """)
        assert circuit.primary_inputs == ["a", "b", "c"]

    def test_output_driven_by_input(self):
        circuit = blif_parser.parse_string("""
        .model wire
        .inputs a
        .outputs a
        .end
        """)
        assert circuit.primary_outputs == [Signal("a")]

    def test_parse_file(self, tmp_path):
        path = tmp_path / "and.blif"
        path.write_text(".model f\n.inputs a b\n.outputs y\n.names a b y\n11 1\n.end\n")
        circuit = blif_parser.parse(str(path))
        assert circuit.num_gates() == 1


class TestParseErrors:
    """Test rejection of malformed or unsupported input."""

    def test_latch_rejected(self):
        with pytest.raises(BlifParseError, match="latch"):
            blif_parser.parse_string(".model s\n.inputs a\n.outputs q\n.latch a q 0\n.end\n")

    def test_row_without_names(self):
        with pytest.raises(BlifParseError, match="Line 3"):
            blif_parser.parse_string(".model s\n.inputs a\n11 1\n")

    def test_cube_width(self):
        with pytest.raises(BlifParseError, match="bits"):
            blif_parser.parse_string(".model s\n.inputs a b\n.outputs f\n.names a b f\n1 1\n")

    def test_mixed_polarity(self):
        with pytest.raises(BlifParseError, match="mixes"):
            blif_parser.parse_string(
                ".model s\n.inputs a b\n.outputs f\n.names a b f\n11 1\n00 0\n"
            )

    def test_undriven_output(self):
        with pytest.raises(BlifParseError, match="driver"):
            blif_parser.parse_string(".model s\n.inputs a\n.outputs f\n.end\n")

    def test_duplicate_definition(self):
        with pytest.raises(BlifParseError, match="more than once"):
            blif_parser.parse_string(
                ".model s\n.inputs a\n.outputs a\n.names a\n1\n.end\n"
            )
