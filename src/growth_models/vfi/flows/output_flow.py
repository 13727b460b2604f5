"""Output-table construction.

Precomputes production output for every ``(z, k)`` pair once per solve
so that the maximiser's inner loop never evaluates a power function.
"""

from __future__ import annotations

import tensorflow as tf

from growth_models.config.economic_params import EconomicParams
from growth_models.core.types import TENSORFLOW_DTYPE, Array
from growth_models.econ import ProductionFunctions


def build_output_table(
    k_grid: Array,
    z_grid: Array,
    params: EconomicParams,
) -> Array:
    """Compute ``output[j, i] = z_j * k_i ** alpha``.

    Parameters
    ----------
    k_grid : Array
        Capital grid, ``(n_k,)``.
    z_grid : Array
        Productivity levels, ``(n_z,)``.
    params : EconomicParams
        Calibration supplying the capital share.

    Returns
    -------
    Array
        Output table, ``(n_z, n_k)`` (productivity-major so each
        productivity slice is one contiguous row).
    """
    n_k = k_grid.shape[0]
    n_z = z_grid.shape[0]

    k_curr = tf.reshape(tf.constant(k_grid, dtype=TENSORFLOW_DTYPE), (1, n_k))
    z_curr = tf.reshape(tf.constant(z_grid, dtype=TENSORFLOW_DTYPE), (n_z, 1))

    output = ProductionFunctions.cobb_douglas(k_curr, z_curr, params)
    return output.numpy()
