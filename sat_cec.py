"""
SAT-based combinational equivalence checking.

Encodes the miter of two circuits with Z3 and asks for an input that sets
any miter output to 1. Unlike simulation_cec there is no limit on the
number of inputs, so the CLI falls back to this check when simulation is
not possible.
"""

import logging

from z3 import Solver, Bool, Or, sat, unsat

from encoder import encode_circuit
from miter import miter

logger = logging.getLogger(__name__)


def sat_cec(ntk1, ntk2, timeout_ms: int | None = None) -> bool | None:
    """
    Check two circuits for equivalence with a SAT solver.

    Args:
        ntk1, ntk2: Circuits to compare
        timeout_ms: Solver timeout, None for no limit

    Returns:
        True if equivalent, False if not, None if the miter cannot be
        built or the solver gives up
    """
    ntk_miter = miter(ntk1, ntk2)
    if ntk_miter is None:
        return None

    if ntk_miter.num_pos() == 0:
        return True

    input_vars = [Bool(f"pi.{name}") for name in ntk_miter.pis()]
    outputs, constraints = encode_circuit(ntk_miter, input_vars, prefix="g.")

    solver = Solver()
    if timeout_ms is not None:
        solver.set('timeout', timeout_ms)
    solver.add(constraints)
    solver.add(Or(*outputs) if len(outputs) > 1 else outputs[0])

    result = solver.check()
    logger.debug(f"SAT check of {ntk_miter.name}: {result}")

    if result == unsat:
        return True
    if result == sat:
        return False

    logger.warning(f"SAT check of {ntk_miter.name} inconclusive: {solver.reason_unknown()}")
    return None
