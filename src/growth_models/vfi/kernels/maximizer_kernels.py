"""Numba kernels for the Bellman maximisation step.

The capital choice is a sequential scan: for each current capital level
the search resumes at the previous level's optimum (monotone policy) and
stops at the first non-improving candidate (strict concavity of the
objective in next-period capital).  Neither shortcut vectorises, so the
scan is compiled with Numba.  ``nogil=True`` lets the worker pool run
one productivity slice per thread in parallel.

If a calibration ever makes the objective non-concave, the early stop
returns a local rather than the global optimum.
"""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(nogil=True)
def bellman_candidate(output, capital_next, expected_value, beta):
    """Right-hand side of the Bellman equation for one choice of K'.

    ``(1 - β) ln(C) + β E[V(K', z')]`` with ``C = output - K'``;
    non-positive consumption is infeasible and valued at ``-inf``.
    """
    consumption = output - capital_next
    if consumption <= 0.0:
        return -np.inf
    return (1.0 - beta) * np.log(consumption) + beta * expected_value


@njit(nogil=True)
def maximize_slice(
    output_row,
    k_grid,
    ev_row,
    v_old_row,
    v_new_row,
    policy_idx_row,
    beta,
):
    """Bellman maximisation for one productivity state.

    Parameters
    ----------
    output_row : ndarray
        ``(nk,)`` output at each current capital level.
    k_grid : ndarray
        ``(nk,)`` strictly increasing capital grid.
    ev_row : ndarray
        ``(nk,)`` expected next-period value at each K'.
    v_old_row : ndarray
        ``(nk,)`` previous value function (read only).
    v_new_row : ndarray
        ``(nk,)`` output buffer for the updated value function.
    policy_idx_row : ndarray
        ``(nk,)`` int output buffer for the optimal K' grid index.
    beta : float
        Discount factor.

    Returns
    -------
    float
        ``max_i |v_old_row[i] - v_new_row[i]|`` for this slice.
    """
    n_capital = k_grid.shape[0]
    search_start = 0
    max_diff = 0.0

    for i in range(n_capital):
        value_high = -np.inf
        choice = 0

        for i_next in range(search_start, n_capital):
            candidate = bellman_candidate(
                output_row[i], k_grid[i_next], ev_row[i_next], beta
            )
            if candidate > value_high:
                value_high = candidate
                choice = i_next
                search_start = i_next
            else:
                break

        v_new_row[i] = value_high
        policy_idx_row[i] = choice

        diff = abs(v_old_row[i] - value_high)
        if diff > max_diff:
            max_diff = diff

    return max_diff
