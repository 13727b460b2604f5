"""Core utilities shared by the growth-model solvers.

Provide the numeric precision settings and shared type definitions.
"""

from growth_models.core.types import (
    INDEX_DTYPE,
    NUMPY_DTYPE,
    TENSORFLOW_DTYPE,
    Array,
    Tensor,
)
