"""Unit tests for grid_builder: GridBuilder."""

from __future__ import annotations

import numpy as np
import pytest

from growth_models.config.economic_params import ROW_SUM_TOL, EconomicParams
from growth_models.config.vfi_config import GridConfig
from growth_models.econ import SteadyStateCalculator
from growth_models.vfi.grids.grid_builder import GridBuilder

from conftest import make_test_config


class TestGridBuilderCapital:
    """Tests for capital grid construction."""

    def test_shape_and_dtype(self):
        config = make_test_config(n_capital=50, check_capital_index=0)
        k_grid, _ = GridBuilder.build_capital_grid(config, EconomicParams())
        assert k_grid.shape == (50,)
        assert k_grid.dtype == np.float64

    def test_strictly_increasing(self):
        k_grid, _ = GridBuilder.build_capital_grid(GridConfig(), EconomicParams())
        assert k_grid.shape == (17820,)
        assert np.all(np.diff(k_grid) > 0)

    def test_anchored_at_steady_state(self):
        params = EconomicParams()
        config = GridConfig()
        k_grid, k_ss = GridBuilder.build_capital_grid(config, params)
        assert k_ss == SteadyStateCalculator.calculate_capital(params)
        assert k_grid[0] == pytest.approx(0.5 * k_ss, rel=1e-15)
        np.testing.assert_allclose(
            k_grid, 0.5 * k_ss + 1e-5 * np.arange(17820), rtol=1e-15
        )

    def test_step(self):
        config = make_test_config(n_capital=10, grid_step=0.01, check_capital_index=0)
        k_grid, _ = GridBuilder.build_capital_grid(config, EconomicParams())
        np.testing.assert_allclose(np.diff(k_grid), 0.01, atol=1e-14)


class TestGridBuilderProductivity:
    """Tests for the productivity chain."""

    def test_shapes(self):
        z_grid, P = GridBuilder.build_productivity_grid(EconomicParams())
        assert z_grid.shape == (5,)
        assert P.shape == (5, 5)

    def test_transition_rows_sum_to_one(self):
        _, P = GridBuilder.build_productivity_grid(EconomicParams())
        np.testing.assert_allclose(P.sum(axis=1), 1.0, rtol=0, atol=ROW_SUM_TOL)

    def test_grid_sorted(self):
        z_grid, _ = GridBuilder.build_productivity_grid(EconomicParams())
        assert np.all(np.diff(z_grid) > 0)
