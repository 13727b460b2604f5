"""Shared test fixtures and helper utilities for VFI unit tests."""

from __future__ import annotations

import numpy as np
import pytest
import tensorflow as tf

# Force CPU for CI; must run before any TF ops
tf.config.set_visible_devices([], 'GPU')

from growth_models.config.economic_params import EconomicParams
from growth_models.config.vfi_config import GridConfig


def make_test_config(**overrides) -> GridConfig:
    """Return a coarse GridConfig that still brackets the policy."""
    defaults = dict(
        n_capital=200,
        grid_step=1e-3,
        tol_vfi=1e-7,
        max_iter_vfi=2000,
        check_capital_index=99,
        check_productivity_index=2,
        n_workers=2,
    )
    defaults.update(overrides)
    return GridConfig(**defaults)


@pytest.fixture
def params() -> EconomicParams:
    """Benchmark calibration."""
    return EconomicParams()


@pytest.fixture
def small_config() -> GridConfig:
    """Coarse grid for fast solves."""
    return make_test_config()


@pytest.fixture
def concave_problem():
    """Small strictly concave maximisation problem for one productivity slice."""
    k_grid = np.linspace(0.1, 0.3, 60)
    output_row = 0.9 * k_grid ** (1.0 / 3.0)
    ev_row = 0.06 * np.log(k_grid)
    return k_grid, output_row, ev_row
