# growth_models/config/economic_params.py
"""
Economic parameter definitions for the stochastic growth model.

This module defines the calibration of the economy: the Cobb-Douglas
capital share, the discount factor and the Markov chain for productivity.
Parameters are immutable after initialization and validated on
construction, since a discount factor outside (0, 1) or a transition
matrix that is not row-stochastic breaks the contraction property that
value function iteration relies on.

Example:
    >>> from growth_models.config.economic_params import EconomicParams
    >>> params = EconomicParams()
    >>> print(f"Discount factor: {params.discount_factor}")
"""

from dataclasses import dataclass
from typing import Tuple
import logging

import numpy as np

from growth_models.core.types import NUMPY_DTYPE, Array

logger = logging.getLogger(__name__)

# Tolerance on the row sums of the transition matrix; the benchmark chain
# is published to four decimals (middle row sums to 1.0001).
ROW_SUM_TOL = 1e-3

# -----------------------------------------------------------------------------
# Benchmark calibration
# -----------------------------------------------------------------------------

DEFAULT_PRODUCTIVITY_LEVELS: Tuple[float, ...] = (
    0.9792, 0.9896, 1.0000, 1.0106, 1.0212,
)

DEFAULT_TRANSITION_MATRIX: Tuple[Tuple[float, ...], ...] = (
    (0.9727, 0.0273, 0.0000, 0.0000, 0.0000),
    (0.0041, 0.9806, 0.0153, 0.0000, 0.0000),
    (0.0000, 0.0082, 0.9837, 0.0082, 0.0000),
    (0.0000, 0.0000, 0.0153, 0.9806, 0.0041),
    (0.0000, 0.0000, 0.0000, 0.0273, 0.9727),
)


@dataclass(frozen=True)
class EconomicParams:
    """
    Immutable container for the growth-model calibration.

    Defaults reproduce the benchmark economy (capital share 1/3,
    discount factor 0.95, five-state productivity chain).

    Attributes:
        capital_share: Output elasticity of capital (alpha), in (0, 1).
        discount_factor: Time preference parameter (beta), in (0, 1).
        productivity_levels: Ordered productivity multipliers, length M.
        transition_matrix: Row-stochastic M x M Markov matrix over
            productivity states, as nested tuples.

    Raises:
        ValueError: If any parameter violates the constraints above.
    """

    capital_share: float = 0.33333333333
    discount_factor: float = 0.95
    productivity_levels: Tuple[float, ...] = DEFAULT_PRODUCTIVITY_LEVELS
    transition_matrix: Tuple[Tuple[float, ...], ...] = DEFAULT_TRANSITION_MATRIX

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        self._validate_capital_share()
        self._validate_discount_factor()
        self._validate_productivity()
        self._validate_transition_matrix()

    @property
    def n_productivity(self) -> int:
        """Number of productivity states M."""
        return len(self.productivity_levels)

    def productivity_array(self) -> Array:
        """Return the productivity levels as a float64 array ``(M,)``."""
        return np.asarray(self.productivity_levels, dtype=NUMPY_DTYPE)

    def transition_array(self) -> Array:
        """Return the transition matrix as a float64 array ``(M, M)``."""
        return np.asarray(self.transition_matrix, dtype=NUMPY_DTYPE)

    def _validate_capital_share(self) -> None:
        """Ensure the production function is strictly concave in capital."""
        if not (0 < self.capital_share < 1):
            raise ValueError(
                f"Capital share must be in (0, 1), got {self.capital_share}"
            )

    def _validate_discount_factor(self) -> None:
        """Ensure discount factor is economically meaningful."""
        if not (0 < self.discount_factor < 1):
            raise ValueError(
                f"Discount factor must be in (0, 1), got {self.discount_factor}"
            )

    def _validate_productivity(self) -> None:
        """Ensure at least one strictly positive productivity level."""
        if len(self.productivity_levels) == 0:
            raise ValueError("At least one productivity level is required.")
        levels = self.productivity_array()
        if not np.all(np.isfinite(levels)) or np.any(levels <= 0.0):
            raise ValueError(
                f"Productivity levels must be finite and positive, "
                f"got {self.productivity_levels}"
            )

    def _validate_transition_matrix(self) -> None:
        """Ensure the transition matrix is a row-stochastic M x M matrix."""
        n_z = self.n_productivity
        rows = [len(row) for row in self.transition_matrix]
        if len(rows) != n_z or any(width != n_z for width in rows):
            raise ValueError(
                f"Transition matrix must be {n_z}x{n_z} to match the "
                f"productivity levels, got row widths {rows}"
            )

        P = self.transition_array()
        if np.any(P < 0.0) or np.any(P > 1.0):
            raise ValueError(
                "Transition probabilities must lie in [0, 1]."
            )

        row_sums = P.sum(axis=1)
        bad_rows = np.flatnonzero(np.abs(row_sums - 1.0) > ROW_SUM_TOL)
        if bad_rows.size > 0:
            raise ValueError(
                f"Transition matrix rows {bad_rows.tolist()} do not sum to 1 "
                f"(sums: {row_sums[bad_rows].tolist()})"
            )
