"""Convergence control for Value Function Iteration (VFI).

This module provides a generic fixed-point driver: it applies a Bellman
step until the sup-norm change of the value function falls to the
tolerance.  It is agnostic to the economic model; the step callable owns
the buffers and returns the change it produced.

Example::

    >>> engine = VFIEngine(tol=1e-7, max_iter=2000)
    >>> report = engine.run(bellman_step, verbose=True)
    >>> report.iterations, report.sup_diff
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List

from growth_models.vfi.protocols import BellmanStep

logger = logging.getLogger(__name__)


class ConvergenceError(RuntimeError):
    """Raised when the Bellman iteration fails to reach the tolerance.

    Attributes
    ----------
    iterations : int
        Number of Bellman steps performed.
    sup_diff : float
        Sup-norm change at the last step.
    diff_history : list of float
        Sup-norm change at every step.
    """

    def __init__(
        self, message: str, iterations: int, sup_diff: float,
        diff_history: List[float],
    ) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.sup_diff = sup_diff
        self.diff_history = diff_history


@dataclass
class ConvergenceReport:
    """Outcome of a converged iteration."""

    iterations: int
    sup_diff: float
    diff_history: List[float] = field(default_factory=list)


class VFIEngine:
    """Fixed-point driver for Bellman equations.

    Iterates :math:`V_{t+1} = T(V_t)` until
    :math:`\\|V_{t+1} - V_t\\|_\\infty \\le \\text{tol}`.

    Parameters
    ----------
    tol : float
        Convergence tolerance (sup-norm).
    max_iter : int
        Maximum number of Bellman iterations.
    log_every : int
        Emit a progress line at iteration 1 and every *log_every*
        iterations.

    Raises
    ------
    ValueError
        If *tol*, *max_iter* or *log_every* is non-positive.
    """

    def __init__(self, tol: float, max_iter: int, log_every: int = 10) -> None:
        if tol <= 0.0:
            raise ValueError(f"Tolerance must be positive, got {tol}.")
        if max_iter <= 0:
            raise ValueError(
                f"max_iter must be positive, got {max_iter}."
            )
        if log_every <= 0:
            raise ValueError(
                f"log_every must be positive, got {log_every}."
            )

        self.tol: float = float(tol)
        self.max_iter: int = int(max_iter)
        self.log_every: int = int(log_every)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, step: BellmanStep, verbose: bool = False) -> ConvergenceReport:
        """Apply *step* until convergence.

        Parameters
        ----------
        step : callable
            Performs one Bellman update and returns its sup-norm change.
        verbose : bool
            Log progress at INFO instead of DEBUG level.

        Returns
        -------
        ConvergenceReport
            Iteration count, final change and the full change history.

        Raises
        ------
        ConvergenceError
            If the change becomes non-finite or *max_iter* is exhausted.
        """
        level = logging.INFO if verbose else logging.DEBUG
        history: List[float] = []
        diff = math.inf

        for iteration in range(1, self.max_iter + 1):
            diff = float(step())
            history.append(diff)

            if iteration == 1 or iteration % self.log_every == 0:
                logger.log(level, "Iteration = %d, Sup Diff = %.10g", iteration, diff)

            if not math.isfinite(diff):
                raise ConvergenceError(
                    f"Sup-norm change became non-finite ({diff}) at "
                    f"iteration {iteration}.",
                    iteration, diff, history,
                )

            if diff <= self.tol:
                logger.log(level, "Iteration = %d, Sup Diff = %.10g", iteration, diff)
                logger.log(
                    level,
                    "VFIEngine converged in %d iterations (diff=%.2e).",
                    iteration,
                    diff,
                )
                return ConvergenceReport(iteration, diff, history)

        logger.error(
            "VFIEngine did not converge after %d iterations "
            "(final diff=%.2e).",
            self.max_iter,
            diff,
        )
        raise ConvergenceError(
            f"No convergence after {self.max_iter} iterations "
            f"(final diff={diff:.3e}, tol={self.tol:.1e}).",
            self.max_iter, diff, history,
        )
