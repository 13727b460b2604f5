# growth_models/vfi/grids/grid_builder.py
"""
Grid construction utilities for the VFI state space.

This module builds the capital grid anchored at the deterministic steady
state and exposes the productivity chain as float64 arrays.
"""

from typing import Tuple

import tensorflow as tf

from growth_models.config.economic_params import EconomicParams
from growth_models.config.vfi_config import GridConfig
from growth_models.core.types import TENSORFLOW_DTYPE, Array
from growth_models.econ import SteadyStateCalculator


class GridBuilder:
    """
    Utility class for constructing VFI state space grids.

    Grids are returned as NumPy arrays: they are read-only inputs shared
    by every worker for the whole solve.
    """

    @staticmethod
    def build_productivity_grid(
        params: EconomicParams
    ) -> Tuple[Array, Array]:
        """
        Return the productivity levels and their transition matrix.

        Args:
            params: Validated economic parameters.

        Returns:
            Tuple containing:
                - z_grid: Productivity levels, shape ``(M,)``.
                - P: Transition probability matrix, shape ``(M, M)``.
        """
        return params.productivity_array(), params.transition_array()

    @staticmethod
    def build_capital_grid(
        config: GridConfig,
        params: EconomicParams,
    ) -> Tuple[Array, float]:
        """
        Build the capital grid starting below the steady state.

        ``k_i = grid_offset_share * k_ss + grid_step * i``, which is
        strictly increasing because ``grid_step > 0``.

        Args:
            config: Grid configuration.
            params: Economic parameters.

        Returns:
            Tuple containing:
                - k_grid: Capital grid, shape ``(n_capital,)``.
                - k_ss: Steady state capital value.
        """
        k_ss = SteadyStateCalculator.calculate_capital(params)

        k_grid = GridBuilder._build_offset_grid(
            config.grid_offset_share * k_ss,
            config.grid_step,
            config.n_capital,
        )
        return k_grid, k_ss

    @staticmethod
    def _build_offset_grid(
        start: float,
        step: float,
        n_points: int
    ) -> Array:
        """Build an evenly-stepped grid ``start + step * i``."""
        index = tf.range(n_points, dtype=TENSORFLOW_DTYPE)
        grid = (
            tf.constant(start, dtype=TENSORFLOW_DTYPE)
            + tf.constant(step, dtype=TENSORFLOW_DTYPE) * index
        )
        return grid.numpy()
