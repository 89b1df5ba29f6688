"""
Tests for the command line interface.
"""

import pytest

import main
from conftest import AND_BLIF, DEMORGAN_AND_BLIF, XOR_BLIF


def wide_and_blif(num_inputs: int) -> str:
    inputs = " ".join(f"x{i}" for i in range(num_inputs))
    return f".model wide\n.inputs {inputs}\n.outputs f\n.names {inputs} f\n{'1' * num_inputs} 1\n.end\n"


@pytest.fixture
def write_blif(tmp_path):
    def write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return write


class TestMain:
    """Test exit status and report."""

    def test_equivalent(self, write_blif, capsys):
        rc = main.main(["--ntk1", write_blif("a.blif", AND_BLIF),
                        "--ntk2", write_blif("b.blif", DEMORGAN_AND_BLIF)])
        out = capsys.readouterr().out
        assert rc == main.EXIT_EQUIVALENT
        assert "Status: EQUIVALENT" in out
        assert "Split variables: 2" in out
        assert "Rounds: 1" in out

    def test_not_equivalent(self, write_blif, capsys):
        rc = main.main(["--ntk1", write_blif("a.blif", AND_BLIF),
                        "--ntk2", write_blif("b.blif", XOR_BLIF), "--stats"])
        out = capsys.readouterr().out
        assert rc == main.EXIT_NOT_EQUIVALENT
        assert "Status: NOT EQUIVALENT" in out
        assert "Gate types:" in out

    def test_undecided_without_fallback(self, write_blif, capsys):
        path = write_blif("w.blif", wide_and_blif(41))
        rc = main.main(["--ntk1", path, "--ntk2", path])
        assert rc == main.EXIT_UNDECIDED
        assert "Status: UNDECIDED" in capsys.readouterr().out

    def test_sat_fallback(self, write_blif, capsys):
        path = write_blif("w.blif", wide_and_blif(41))
        rc = main.main(["--ntk1", path, "--ntk2", path, "--sat-fallback"])
        out = capsys.readouterr().out
        assert rc == main.EXIT_EQUIVALENT
        assert "Method: SAT" in out
        assert "Split variables" not in out
        assert "Rounds" not in out

    def test_missing_file(self, tmp_path, capsys):
        rc = main.main(["--ntk1", str(tmp_path / "nope.blif"), "--ntk2", str(tmp_path / "nope.blif")])
        assert rc == 1
        assert "Error" in capsys.readouterr().err

    def test_parse_error(self, write_blif, capsys):
        path = write_blif("bad.blif", ".model s\n.inputs a\n.outputs q\n.latch a q 0\n")
        rc = main.main(["--ntk1", path, "--ntk2", path])
        assert rc == 1
        assert "Parse error" in capsys.readouterr().err

    def test_combinational_loop(self, write_blif, capsys):
        loop = ".model l\n.inputs a\n.outputs x\n.names y a x\n11 1\n.names x a y\n11 1\n.end\n"
        path = write_blif("loop.blif", loop)
        rc = main.main(["--ntk1", path, "--ntk2", path])
        assert rc == 1
        assert "loop" in capsys.readouterr().err
