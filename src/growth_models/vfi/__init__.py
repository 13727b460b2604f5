"""Value Function Iteration (VFI) solver for the stochastic growth model.

This package provides:

* :class:`StochasticGrowthVFI` — VFI solver over (capital × productivity).
* :func:`solve_benchmark` — benchmark entry point returning the
  regression check value.
* :class:`VFIEngine` — Generic Bellman fixed-point driver.
* :class:`ProductivityScheduler` — Fork-join worker pool over
  productivity states.

Sub-packages
------------
kernels
    Compiled numerical kernels (XLA expectation, Numba maximisation).
flows
    Output-table construction.
grids
    Grid construction.

Modules
-------
protocols
    Protocol definitions for solver components.
policies
    Policy extraction.
workspace
    Double-buffered per-solve matrices.
engine
    Convergence control.
"""

from growth_models.vfi.engine import ConvergenceError, ConvergenceReport, VFIEngine
from growth_models.vfi.growth import StochasticGrowthVFI, solve_benchmark
from growth_models.vfi.scheduler import ProductivityScheduler

__all__ = [
    "ConvergenceError",
    "ConvergenceReport",
    "ProductivityScheduler",
    "StochasticGrowthVFI",
    "VFIEngine",
    "solve_benchmark",
]
