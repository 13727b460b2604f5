# growth_models/cli/solve_vfi.py
"""
Command-line interface for the stochastic growth model benchmark.

Solves the benchmark economy once with progress logging, or repeatedly
in sampling mode to time the solver, and verifies the regression check
value after every solve.

Example:
    $ python -m growth_models.cli.solve_vfi
    $ python -m growth_models.cli.solve_vfi --sample --n-samples 5
"""

import argparse
import logging
import math
import sys
import time
from typing import List, Optional

import numpy as np

from growth_models.vfi.growth import solve_benchmark
from growth_models.vfi.scheduler import ProductivityScheduler

# Policy function at (capital index 999, productivity index 2) for the
# default calibration and grid.
EXPECTED_CHECK_VALUE = 0.1465491436956954
CHECK_ABS_TOL = 1e-12

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


def verify_check_value(result: float) -> None:
    """Raise ValueError if *result* differs from the benchmark value."""
    if not math.isclose(result, EXPECTED_CHECK_VALUE, rel_tol=0.0, abs_tol=CHECK_ABS_TOL):
        raise ValueError(
            f"Check value {result!r} differs from expected "
            f"{EXPECTED_CHECK_VALUE!r}."
        )


def run_single(n_workers: Optional[int]) -> float:
    """Solve once with progress logging and report the elapsed time."""
    with ProductivityScheduler(n_workers) as scheduler:
        cpu0 = time.perf_counter()
        result = solve_benchmark(verbose=True, scheduler=scheduler)
        cpu1 = time.perf_counter()

    logger.info(f"My check = {result!r}")
    verify_check_value(result)
    logger.info(f"Elapsed time is = {cpu1 - cpu0:.6f}")
    return cpu1 - cpu0


def run_samples(n_samples: int, n_workers: Optional[int]) -> List[float]:
    """Time *n_samples* quiet solves on one shared worker pool."""
    samples = []
    with ProductivityScheduler(n_workers) as scheduler:
        for i in range(n_samples):
            cpu0 = time.perf_counter()
            result = solve_benchmark(verbose=False, scheduler=scheduler)
            cpu1 = time.perf_counter()

            verify_check_value(result)
            logger.info(f"Sample #{i + 1}, Time: {cpu1 - cpu0:.6f}s")
            samples.append(cpu1 - cpu0)

    logger.info(f"Median time is = {float(np.median(samples)):.6f}")
    return samples


def main():
    """Main entry point for the benchmark CLI."""
    parser = argparse.ArgumentParser(
        description="Solve the stochastic growth model via VFI"
    )
    parser.add_argument(
        '--sample',
        action='store_true',
        help="Time repeated quiet solves and report the median."
    )
    parser.add_argument(
        '--n-samples',
        type=int,
        default=5,
        help="Number of timed solves in sampling mode."
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=None,
        help="Worker-pool size. If not set, uses all available CPUs."
    )
    args = parser.parse_args()

    try:
        if args.n_samples < 1:
            raise ValueError(f"--n-samples must be >= 1, got {args.n_samples}.")
        if args.sample:
            run_samples(args.n_samples, args.workers)
        else:
            run_single(args.workers)
    except Exception as e:
        logger.error(f"Solver failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
