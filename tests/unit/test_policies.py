"""Unit tests for policies.py: extract_capital_policy and extract_consumption_policy."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

from growth_models.vfi.policies import (
    extract_capital_policy,
    extract_consumption_policy,
)


class TestExtractCapitalPolicy:
    """Tests for extract_capital_policy."""

    def test_identity_indices(self):
        """Indices map to the exact grid values."""
        k_grid = np.array([0.1, 0.5, 1.0, 2.0])
        idx = np.array([[0, 1], [2, 3], [1, 0], [3, 2]])
        result = extract_capital_policy(k_grid, idx)
        expected = np.array([
            [0.1, 0.5], [1.0, 2.0], [0.5, 0.1], [2.0, 1.0]
        ])
        np.testing.assert_array_equal(result, expected)

    def test_shape_and_dtype(self):
        nk, nz = 5, 3
        k_grid = np.linspace(0.1, 2.0, nk)
        idx = np.zeros((nk, nz), dtype=np.int64)
        result = extract_capital_policy(k_grid, idx)
        assert result.shape == (nk, nz)
        assert result.dtype == np.float64


class TestExtractConsumptionPolicy:
    """Tests for extract_consumption_policy."""

    def test_resource_constraint(self):
        output = np.array([[1.0, 2.0], [3.0, 4.0]])
        k_next = np.array([[0.5, 0.5], [1.0, 1.5]])
        np.testing.assert_allclose(
            extract_consumption_policy(output, k_next),
            [[0.5, 1.5], [2.0, 2.5]],
        )
