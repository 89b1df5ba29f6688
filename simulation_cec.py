"""
Simulation-based combinational equivalence checking.

Builds the miter of two circuits and simulates it exhaustively. The first
`split_var` primary inputs are simulated in parallel as truth-table
variables; the remaining inputs are fixed to constants and swept over
`2 ** (num_pis - split_var)` rounds. Each round covers a distinct slice of
the input space, so together the rounds enumerate every input vector once.

For memory and speed reasons this approach is limited to networks with at
most 40 inputs.
"""

import logging
from dataclasses import dataclass

from dynamic_truth_table import DynamicTruthTable
from miter import miter
from network_traits import check_network
from simulation import iter_outputs

logger = logging.getLogger(__name__)

# Largest number of primary inputs simulation_cec accepts
MAX_PIS = 40

# Bound on per-round simulation memory, approximated in 32-bit words
MEMORY_BUDGET = 1 << 29


@dataclass
class SimulationCecStats:
    """Statistics of one simulation_cec call."""
    split_var: int = 0   # Inputs simulated in parallel
    rounds: int = 0      # Number of simulation rounds


def calculate_split_var(num_pis: int, num_nodes: int) -> int:
    """
    Number of inputs to simulate as truth-table variables.

    Up to 6 inputs are always simulated at once. Beyond that, the split
    grows from 7 while one truth table per node stays within
    MEMORY_BUDGET. If even 7 variables do not fit, the result is 6.
    """
    if num_pis <= 6:
        return num_pis

    m = 7
    while m <= num_pis and 32 + (1 << (m - 3)) * num_nodes <= MEMORY_BUDGET:
        m += 1
    return m - 1


class TruthTableSimulator:
    """
    Leaf values for one simulation round.

    Inputs below `split_var` become projection functions. Input
    `split_var + k` is constant, driven by bit k of the round index:
    bit 0 gives constant 1 and bit 1 gives constant 0.
    """

    def __init__(self, split_var: int, round_index: int):
        self._split_var = split_var
        self._round = round_index

    def compute_constant(self, value: bool) -> DynamicTruthTable:
        return DynamicTruthTable.constant(self._split_var, value)

    def compute_pi(self, index: int) -> DynamicTruthTable:
        if index < self._split_var:
            return DynamicTruthTable.nth_var(self._split_var, index)

        bit = (self._round >> (index - self._split_var)) & 1
        return DynamicTruthTable.constant(self._split_var, bit == 0)

    def compute_not(self, value: DynamicTruthTable) -> DynamicTruthTable:
        return ~value


class SimulationCecImpl:
    """Runs all simulation rounds on a miter."""

    def __init__(self, ntk, st: SimulationCecStats):
        self._ntk = ntk
        self._st = st

    def run(self) -> bool:
        """
        Returns:
            True if every miter output is 0 in every round, False as soon
            as one output is not
        """
        num_pis = self._ntk.num_pis()
        num_nodes = self._ntk.size()

        self._st.split_var = calculate_split_var(num_pis, num_nodes)
        self._st.rounds = 1 << (num_pis - self._st.split_var)
        logger.debug(f"Simulating {num_pis} inputs, {num_nodes} nodes: "
                     f"split_var={self._st.split_var}, rounds={self._st.rounds}")

        for round_index in range(self._st.rounds):
            simulator = TruthTableSimulator(self._st.split_var, round_index)
            if self._has_nonzero_output(simulator):
                logger.debug(f"Round {round_index}: miter output is not constant 0")
                return False
        return True

    def _has_nonzero_output(self, simulator: TruthTableSimulator) -> bool:
        return any(not tt.is_const0() for tt in iter_outputs(self._ntk, simulator))


def simulation_cec(ntk1, ntk2, stats: SimulationCecStats | None = None) -> bool | None:
    """
    Simulation-based combinational equivalence check.

    Args:
        ntk1, ntk2: Networks to compare
        stats: If given, receives split_var and rounds of this call

    Returns:
        True if the networks are equivalent, False if not, None if the
        check was not run (more than MAX_PIS inputs, or the networks
        cannot be combined into a miter)

    Raises:
        TypeError: if a network does not implement the network interface
    """
    check_network(ntk1)
    check_network(ntk2)

    st = SimulationCecStats()

    if ntk1.num_pis() > MAX_PIS:
        logger.info(f"Skipping simulation: {ntk1.num_pis()} inputs exceed the limit of {MAX_PIS}")
        return None

    ntk_miter = miter(ntk1, ntk2)

    result = None
    if ntk_miter is not None:
        result = SimulationCecImpl(ntk_miter, st).run()

    if stats is not None:
        stats.split_var = st.split_var
        stats.rounds = st.rounds

    return result
