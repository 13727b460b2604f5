# growth_models/core/types.py
"""
Global type definitions for TensorFlow and NumPy precision.

This module establishes a single source of truth for numerical precision
across the solver, ensuring consistency between TensorFlow kernels, Numba
kernels and NumPy buffers.

Example:
    >>> from growth_models.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE
    >>> import tensorflow as tf
    >>> tensor = tf.constant([1.0, 2.0], dtype=TENSORFLOW_DTYPE)
"""

import tensorflow as tf
import numpy as np
from typing import Union

# -----------------------------------------------------------------------------
# Global Precision Settings
# -----------------------------------------------------------------------------
# The convergence tolerance (1e-7) is far below float32 resolution of the
# value function, so everything runs in float64.

TENSORFLOW_DTYPE = tf.float64
NUMPY_DTYPE = np.float64

# Grid indices written by the maximiser kernel.
INDEX_DTYPE = np.int64

# -----------------------------------------------------------------------------
# Type Aliases
# -----------------------------------------------------------------------------

Tensor = tf.Tensor
Array = np.ndarray
Numeric = Union[float, np.float64, tf.Tensor]
