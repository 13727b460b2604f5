"""Value Function Iteration for the stochastic neoclassical growth model.

Solves

.. math::

    V(k, z_j) = \\max_{k'} (1 - \\beta) \\ln(z_j k^\\alpha - k')
                + \\beta \\sum_l P_{jl} V(k', z_l)

on a dense capital grid.  Each iteration runs two fork-join phases over
the productivity states: the expectation step, then the monotone
capital-choice search.  The phases are separated by a full barrier
because the search for state ``j`` reads expected values at capital
indices above the current one.

Architecture note
-----------------
This module is a thin orchestrator.  Expectation and maximisation
primitives live in ``vfi.kernels``, the fork-join pool in
``vfi.scheduler``, the convergence loop in ``vfi.engine`` and policy
extraction in ``vfi.policies``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import tensorflow as tf

from growth_models.config.economic_params import EconomicParams
from growth_models.config.vfi_config import GridConfig
from growth_models.core.types import TENSORFLOW_DTYPE, Array
from growth_models.econ import SteadyStateCalculator
from growth_models.vfi.engine import ConvergenceReport, VFIEngine
from growth_models.vfi.flows import build_output_table
from growth_models.vfi.grids.grid_builder import GridBuilder
from growth_models.vfi.kernels import compute_expected_value_slice, maximize_slice
from growth_models.vfi.policies import (
    extract_capital_policy,
    extract_consumption_policy,
)
from growth_models.vfi.protocols import PhaseScheduler
from growth_models.vfi.scheduler import ProductivityScheduler
from growth_models.vfi.workspace import BellmanWorkspace

logger = logging.getLogger(__name__)


class StochasticGrowthVFI:
    """VFI solver for the stochastic growth model with log utility.

    State space : (Capital K, Productivity Z)
    Choice      : Next-period capital K'

    Parameters
    ----------
    params : EconomicParams
        Calibration (frozen dataclass, validated on construction).
    config : GridConfig
        Grid size, tolerances and worker-pool size.

    Raises
    ------
    ValueError
        If the regression check cell lies outside the state space.
    """

    def __init__(self, params: EconomicParams, config: GridConfig) -> None:
        self._validate_inputs(params, config)

        self.params: EconomicParams = params
        self.config: GridConfig = config

        self._initialize_grids()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_inputs(params: EconomicParams, config: GridConfig) -> None:
        """Cross-check configuration against the calibration."""
        if config.check_productivity_index >= params.n_productivity:
            raise ValueError(
                f"check_productivity_index {config.check_productivity_index} "
                f"outside [0, {params.n_productivity})."
            )

    # ------------------------------------------------------------------
    # Grid initialisation
    # ------------------------------------------------------------------

    def _initialize_grids(self) -> None:
        """Build the capital grid, productivity chain and steady state."""
        self.z_grid: Array
        self.P: Array
        self.z_grid, self.P = GridBuilder.build_productivity_grid(self.params)

        self.k_grid: Array
        self.k_ss: float
        self.k_grid, self.k_ss = GridBuilder.build_capital_grid(
            self.config, self.params
        )

        self.steady_state = SteadyStateCalculator.calculate(self.params)
        self.n_capital: int = int(self.k_grid.shape[0])
        self.n_productivity: int = self.params.n_productivity

        # Transition rows as tensors, one per expectation slice.
        self._p_rows = [
            tf.constant(self.P[j], dtype=TENSORFLOW_DTYPE)
            for j in range(self.n_productivity)
        ]

    # ------------------------------------------------------------------
    # Bellman iteration
    # ------------------------------------------------------------------

    def _bellman_step(
        self,
        workspace: BellmanWorkspace,
        output: Array,
        scheduler: PhaseScheduler,
    ) -> float:
        """One application of the Bellman operator.

        Returns the sup-norm change between the old and new value
        functions; the new one becomes current before returning.
        """
        v_curr = tf.constant(workspace.v_current, dtype=TENSORFLOW_DTYPE)
        expected_value = workspace.expected_value

        def expectation_slice(j: int) -> None:
            expected_value[j] = compute_expected_value_slice(
                v_curr, self._p_rows[j]
            ).numpy()

        scheduler.run_phase(expectation_slice, self.n_productivity)

        v_old = workspace.v_current
        v_new = workspace.v_next
        policy_idx = workspace.policy_idx
        beta = self.params.discount_factor

        def maximization_slice(j: int) -> float:
            return maximize_slice(
                output[j],
                self.k_grid,
                expected_value[j],
                v_old[j],
                v_new[j],
                policy_idx[j],
                beta,
            )

        slice_diffs = scheduler.run_phase(maximization_slice, self.n_productivity)

        workspace.swap()
        return max(slice_diffs)

    def _run_bellman_iteration(
        self,
        output: Array,
        scheduler: PhaseScheduler,
        verbose: bool,
    ) -> Tuple[BellmanWorkspace, ConvergenceReport]:
        """Iterate the Bellman equation until convergence.

        Returns
        -------
        workspace : BellmanWorkspace
            Buffers holding the converged value and policy functions.
        report : ConvergenceReport
            Iteration count and sup-norm history.
        """
        workspace = BellmanWorkspace(self.n_productivity, self.n_capital)
        engine = VFIEngine(
            tol=self.config.tol_vfi,
            max_iter=self.config.max_iter_vfi,
            log_every=self.config.log_every,
        )
        report = engine.run(
            lambda: self._bellman_step(workspace, output, scheduler),
            verbose=verbose,
        )
        return workspace, report

    # ------------------------------------------------------------------
    # Result packaging
    # ------------------------------------------------------------------

    def _build_result_dict(
        self,
        workspace: BellmanWorkspace,
        output: Array,
        report: ConvergenceReport,
    ) -> Dict[str, Any]:
        """Package solver outputs as ``(n_k, n_z)`` arrays plus metadata."""
        policy_k_idx = workspace.policy_idx.T.copy()
        policy_k_values = extract_capital_policy(self.k_grid, policy_k_idx)
        output_kz = output.T.copy()

        return {
            # Value function
            "V": workspace.v_current.T.copy(),
            # Policy (discrete, capital, consumption)
            "policy_k_idx": policy_k_idx,
            "policy_k_values": policy_k_values,
            "policy_c_values": extract_consumption_policy(
                output_kz, policy_k_values
            ),
            "output": output_kz,
            # Grids
            "K": self.k_grid.copy(),
            "Z": self.z_grid.copy(),
            "transition_matrix": self.P.copy(),
            # Steady state
            "k_ss": float(self.steady_state.capital),
            "y_ss": float(self.steady_state.output),
            "c_ss": float(self.steady_state.consumption),
            # Convergence diagnostics
            "iterations": report.iterations,
            "sup_diff": report.sup_diff,
            "diff_history": list(report.diff_history),
            "check_value": float(
                policy_k_values[
                    self.config.check_capital_index,
                    self.config.check_productivity_index,
                ]
            ),
        }

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def solve(
        self,
        verbose: bool = False,
        scheduler: Optional[PhaseScheduler] = None,
    ) -> Dict[str, Any]:
        """Solve the model via value function iteration.

        Parameters
        ----------
        verbose : bool
            Log the steady state and progress lines at INFO level.
        scheduler : PhaseScheduler, optional
            Worker pool to run the phases on.  When *None*, a
            :class:`ProductivityScheduler` with ``config.n_workers``
            threads is created for this call and shut down afterwards.

        Returns
        -------
        dict
            ``V``
                Converged value function, ``(n_k, n_z)``.
            ``policy_k_idx``
                Optimal K' grid index, ``(n_k, n_z)``.
            ``policy_k_values``
                Optimal K', ``(n_k, n_z)``.
            ``policy_c_values``
                Implied consumption, ``(n_k, n_z)``.
            ``output``
                Output table, ``(n_k, n_z)``.
            ``K``, ``Z``, ``transition_matrix``
                Grids and Markov chain.
            ``k_ss``, ``y_ss``, ``c_ss``
                Deterministic steady state.
            ``iterations``, ``sup_diff``, ``diff_history``
                Convergence diagnostics.
            ``check_value``
                ``policy_k_values`` at the configured check cell.

        Raises
        ------
        ConvergenceError
            If the iteration does not reach the tolerance.
        """
        level = logging.INFO if verbose else logging.DEBUG
        logger.log(
            level,
            "Output = %.16g, Capital = %.16g, Consumption = %.16g",
            self.steady_state.output,
            self.steady_state.capital,
            self.steady_state.consumption,
        )
        logger.log(
            level,
            "Starting StochasticGrowthVFI.solve(): n_k=%d, n_z=%d, tol=%.1e",
            self.n_capital,
            self.n_productivity,
            self.config.tol_vfi,
        )

        output = build_output_table(self.k_grid, self.z_grid, self.params)

        if scheduler is None:
            with ProductivityScheduler(self.config.n_workers) as own_scheduler:
                workspace, report = self._run_bellman_iteration(
                    output, own_scheduler, verbose
                )
        else:
            workspace, report = self._run_bellman_iteration(
                output, scheduler, verbose
            )

        return self._build_result_dict(workspace, output, report)


def solve_benchmark(
    verbose: bool,
    scheduler: Optional[PhaseScheduler] = None,
    params: Optional[EconomicParams] = None,
    config: Optional[GridConfig] = None,
) -> float:
    """Solve the benchmark economy and return the regression check value.

    Parameters
    ----------
    verbose : bool
        Forwarded to :meth:`StochasticGrowthVFI.solve`.
    scheduler : PhaseScheduler, optional
        Pre-sized worker pool, reused across calls by benchmark loops.
    params, config : optional
        Override the default calibration and grid.

    Returns
    -------
    float
        Policy function at the configured check cell.
    """
    solver = StochasticGrowthVFI(
        params if params is not None else EconomicParams(),
        config if config is not None else GridConfig(),
    )
    return solver.solve(verbose=verbose, scheduler=scheduler)["check_value"]
