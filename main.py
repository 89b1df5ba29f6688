"""
Simulation CEC - Main Entry Point

Checks two combinational BLIF circuits for functional equivalence by
exhaustive bit-parallel simulation.

Usage:
    python main.py --ntk1 golden.blif --ntk2 revised.blif
    python main.py --ntk1 golden.blif --ntk2 revised.blif --sat-fallback

Exit status: 0 equivalent, 1 not equivalent or error, 2 undecided.
"""

import argparse
import logging
import sys
import time

import blif_parser
from sat_cec import sat_cec
from simulation_cec import MAX_PIS, SimulationCecStats, simulation_cec

logger = logging.getLogger(__name__)

EXIT_EQUIVALENT = 0
EXIT_NOT_EQUIVALENT = 1
EXIT_UNDECIDED = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description='Check two combinational circuits for equivalence by simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Simulate both circuits exhaustively
  python main.py --ntk1 golden.blif --ntk2 revised.blif

  # Use the SAT check for circuits with more than {MAX_PIS} inputs
  python main.py --ntk1 golden.blif --ntk2 revised.blif --sat-fallback

  # Verbose output
  python main.py --ntk1 golden.blif --ntk2 revised.blif -v
        """
    )

    parser.add_argument('--ntk1', required=True,
                        help='Path to the first BLIF file')
    parser.add_argument('--ntk2', required=True,
                        help='Path to the second BLIF file')
    parser.add_argument('--sat-fallback', action='store_true',
                        help='Run a SAT check when simulation is undecided')
    parser.add_argument('--sat-timeout', type=int, default=None,
                        help='SAT solver timeout in milliseconds (default: none)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print detailed progress')
    parser.add_argument('--stats', action='store_true',
                        help='Print circuit statistics')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    # Parse circuits
    try:
        ntk1 = blif_parser.parse(args.ntk1)
        ntk2 = blif_parser.parse(args.ntk2)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except blif_parser.BlifParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 1

    if args.stats:
        print("First circuit:")
        ntk1.print_stats()
        print("\nSecond circuit:")
        ntk2.print_stats()
        print()

    print(f"Checking {ntk1.name} against {ntk2.name}")
    start_time = time.time()

    st = SimulationCecStats()
    method = "simulation"
    try:
        result = simulation_cec(ntk1, ntk2, st)
        if result is None and args.sat_fallback:
            logger.info("Simulation undecided, running SAT check")
            method = "SAT"
            result = sat_cec(ntk1, ntk2, timeout_ms=args.sat_timeout)
    except ValueError as e:
        print(f"Circuit error: {e}", file=sys.stderr)
        return 1

    elapsed = time.time() - start_time

    # Print results
    print()
    print("=" * 50)
    print("RESULTS")
    print("=" * 50)

    if result is None:
        print("Status: UNDECIDED")
    else:
        print(f"Status: {'EQUIVALENT' if result else 'NOT EQUIVALENT'}")
    print(f"Method: {method}")
    if method == "simulation":
        print(f"Split variables: {st.split_var}")
        print(f"Rounds: {st.rounds}")
    print(f"Time: {elapsed:.3f}s")

    if result is None:
        return EXIT_UNDECIDED
    return EXIT_EQUIVALENT if result else EXIT_NOT_EQUIVALENT


if __name__ == "__main__":
    sys.exit(main())
