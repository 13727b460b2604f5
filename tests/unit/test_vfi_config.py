"""Unit tests for vfi_config: GridConfig validation."""

from __future__ import annotations

import dataclasses

import pytest

from growth_models.config.vfi_config import GridConfig


class TestGridConfigDefaults:
    """Defaults reproduce the benchmark grid."""

    def test_benchmark_values(self):
        config = GridConfig()
        assert config.n_capital == 17820
        assert config.grid_offset_share == 0.5
        assert config.grid_step == 1e-5
        assert config.tol_vfi == 1e-7
        assert config.check_capital_index == 999
        assert config.check_productivity_index == 2
        assert config.n_workers is None

    def test_replace(self):
        config = dataclasses.replace(GridConfig(), n_capital=1000, n_workers=1)
        assert config.n_capital == 1000
        assert config.n_workers == 1


class TestGridConfigValidation:
    """Out-of-range fields raise ValueError."""

    @pytest.mark.parametrize(
        "overrides",
        [
            dict(n_capital=1, check_capital_index=0),
            dict(grid_offset_share=0.0),
            dict(grid_step=0.0),
            dict(grid_step=-1e-5),
            dict(tol_vfi=0.0),
            dict(max_iter_vfi=0),
            dict(log_every=0),
            dict(n_workers=0),
            dict(check_productivity_index=-1),
        ],
    )
    def test_invalid(self, overrides):
        with pytest.raises(ValueError):
            GridConfig(**overrides)

    def test_check_index_outside_grid(self):
        with pytest.raises(ValueError, match="check_capital_index"):
            GridConfig(n_capital=500)
