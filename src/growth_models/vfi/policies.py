"""Policy extraction for the VFI solver.

Contains pure functions that map discrete policy indices to capital and
consumption values.
"""

from __future__ import annotations

import tensorflow as tf

from growth_models.core.types import TENSORFLOW_DTYPE, Array
from growth_models.econ import ProductionFunctions


def extract_capital_policy(
    k_grid: Array,
    policy_k_idx: Array,
) -> Array:
    """Map discrete policy indices to next-period capital values.

    Parameters
    ----------
    k_grid : Array
        Capital grid, shape ``(n_k,)``.
    policy_k_idx : Array
        Grid indices of optimal K', any shape.

    Returns
    -------
    Array
        K' values with the shape of *policy_k_idx*.
    """
    k_grid_t = tf.constant(k_grid, dtype=TENSORFLOW_DTYPE)
    return tf.gather(k_grid_t, policy_k_idx).numpy()


def extract_consumption_policy(
    output: Array,
    policy_k_values: Array,
) -> Array:
    """Consumption implied by the capital policy, ``C = Y - K'``."""
    return ProductionFunctions.consumption(output, policy_k_values)
