"""Compiled numerical kernels for the VFI solver.

Modules
-------
bellman_kernels
    XLA-compiled expectation step, one productivity slice per call.
maximizer_kernels
    Numba-compiled monotone capital-choice search, one productivity
    slice per call.
"""

from growth_models.vfi.kernels.bellman_kernels import (
    compute_expected_value_slice,
    compute_expected_value_slice_core,
)
from growth_models.vfi.kernels.maximizer_kernels import (
    bellman_candidate,
    maximize_slice,
)

__all__ = [
    "compute_expected_value_slice",
    "compute_expected_value_slice_core",
    "bellman_candidate",
    "maximize_slice",
]
