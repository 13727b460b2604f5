"""Per-solve buffers for the Bellman iteration.

All matrices are productivity-major ``(nz, nk)``: row ``j`` is the slice
owned by the worker handling productivity state ``j`` within a phase.
"""

from __future__ import annotations

import numpy as np

from growth_models.core.types import INDEX_DTYPE, NUMPY_DTYPE, Array


class BellmanWorkspace:
    """Double-buffered value function plus expectation and policy buffers.

    The two value buffers form a ping-pong pair: :meth:`swap` exchanges
    which one is *current* without copying data.

    Parameters
    ----------
    n_productivity : int
        Number of productivity states (rows).
    n_capital : int
        Number of capital grid points (columns).
    """

    def __init__(self, n_productivity: int, n_capital: int) -> None:
        shape = (n_productivity, n_capital)
        self._values = (
            np.zeros(shape, dtype=NUMPY_DTYPE),
            np.zeros(shape, dtype=NUMPY_DTYPE),
        )
        self._current = 0

        self.expected_value: Array = np.zeros(shape, dtype=NUMPY_DTYPE)
        self.policy_idx: Array = np.zeros(shape, dtype=INDEX_DTYPE)

    @property
    def v_current(self) -> Array:
        """Value function the next expectation step reads."""
        return self._values[self._current]

    @property
    def v_next(self) -> Array:
        """Buffer the next maximisation step writes."""
        return self._values[1 - self._current]

    def swap(self) -> None:
        """Make the freshly written buffer the current value function."""
        self._current = 1 - self._current
