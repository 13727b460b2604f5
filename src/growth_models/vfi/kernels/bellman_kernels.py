"""Expectation-step XLA kernels.

Contains the conditional-expectation kernel of the Bellman operator:
- ``compute_expected_value_slice`` — ``E[j, :] = P[j, :] @ V`` for one
  productivity state
"""

from __future__ import annotations

import tensorflow as tf


def compute_expected_value_slice_core(
    v_curr: tf.Tensor,
    p_row: tf.Tensor,
) -> tf.Tensor:
    """Expected next-period value for one productivity state (undecorated).

    Returns ``Σ_k p_row[k] · v_curr[k, :]``.

    Parameters
    ----------
    v_curr : tf.Tensor
        Previous value function, productivity-major ``(nz, nk)``.
    p_row : tf.Tensor
        Row ``j`` of the Markov transition matrix, ``(nz,)``.

    Returns
    -------
    tf.Tensor
        Expected value over next-period capital, ``(nk,)``.
    """
    return tf.linalg.matvec(v_curr, p_row, transpose_a=True)


@tf.function(jit_compile=True)
def compute_expected_value_slice(
    v_curr: tf.Tensor,
    p_row: tf.Tensor,
) -> tf.Tensor:
    """Expected next-period value for one productivity state (XLA-compiled).

    See :func:`compute_expected_value_slice_core` for parameter
    documentation.
    """
    return compute_expected_value_slice_core(v_curr, p_row)

